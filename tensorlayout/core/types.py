# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
tensorlayout Core Types

Element data types and tensor shapes shared by the swizzle engine
and the dump serializer.
"""

from enum import IntEnum
from dataclasses import dataclass, field

import numpy as np


class DataType(IntEnum):
    """
    Tensor element data types.

    The integer value is the type code reported in diagnostics.
    """

    Float16 = 0
    Float32 = 1
    QuantisedAsymm8 = 2
    Signed32 = 3
    Boolean = 4


_DTYPE_SIZES = {
    DataType.Float16: 2,
    DataType.Float32: 4,
    DataType.QuantisedAsymm8: 1,
    DataType.Signed32: 4,
    DataType.Boolean: 1,
}

_NUMPY_DTYPES = {
    DataType.Float16: np.dtype(np.float16),
    DataType.Float32: np.dtype(np.float32),
    DataType.QuantisedAsymm8: np.dtype(np.uint8),
    DataType.Signed32: np.dtype(np.int32),
    DataType.Boolean: np.dtype(np.bool_),
}


def dtype_size(dtype: DataType) -> int:
    """Get the size in bytes for a data type."""
    return _DTYPE_SIZES.get(dtype, 0)


def dtype_to_numpy(dtype: DataType) -> np.dtype:
    """Get the numpy element type used to view buffers of this data type."""
    return _NUMPY_DTYPES[dtype]


def dtype_to_string(dtype: DataType) -> str:
    """Get string representation of data type."""
    return dtype.name.lower()


def dtype_from_string(name: str) -> DataType:
    """
    Parse a data type name.

    Accepts the enum names case-insensitively plus the short aliases
    "float32", "uint8", "qasymm8" and "int32".
    """
    aliases = {
        "float16": DataType.Float16,
        "float32": DataType.Float32,
        "uint8": DataType.QuantisedAsymm8,
        "qasymm8": DataType.QuantisedAsymm8,
        "int32": DataType.Signed32,
        "bool": DataType.Boolean,
    }
    key = name.strip().lower()
    if key in aliases:
        return aliases[key]
    for dtype in DataType:
        if dtype.name.lower() == key:
            return dtype
    raise ValueError(f"Unknown data type: {name!r}")


@dataclass(frozen=True)
class Shape:
    """Represents tensor dimensions."""

    dims: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "dims", tuple(int(d) for d in self.dims))

    def rank(self) -> int:
        """Get number of dimensions."""
        return len(self.dims)

    def numel(self) -> int:
        """Get total number of elements."""
        if not self.dims:
            return 0
        result = 1
        for d in self.dims:
            result *= d
        return result

    def __getitem__(self, idx: int) -> int:
        return self.dims[idx]

    def __len__(self) -> int:
        return len(self.dims)

    def __iter__(self):
        return iter(self.dims)

    def __repr__(self) -> str:
        return f"Shape({list(self.dims)})"
