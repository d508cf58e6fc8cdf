# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""tensorlayout Core Module"""

from .types import (
    DataType,
    Shape,
    dtype_size,
    dtype_to_numpy,
    dtype_to_string,
    dtype_from_string,
)
from .indexing import Strides
from .permutation import PermutationVector
from .tensor import TensorDescriptor, ConstTensor, byte_view, MAX_RANK

__all__ = [
    "DataType",
    "Shape",
    "dtype_size",
    "dtype_to_numpy",
    "dtype_to_string",
    "dtype_from_string",
    "Strides",
    "PermutationVector",
    "TensorDescriptor",
    "ConstTensor",
    "byte_view",
    "MAX_RANK",
]
