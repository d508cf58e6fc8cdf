# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
tensorlayout: tensor layout conversion and dumps for inference drivers

Converts 4D tensors between memory layouts by permuting axes, and writes
text dumps of tensor contents for debugging.

Example:
    import numpy as np
    import tensorlayout as tl

    data = np.arange(12, dtype=np.float32).reshape(1, 2, 2, 3)
    tensor = tl.ConstTensor.from_array(data, tl.DataType.Float32)
    info, nchw = tl.swizzle_to_buffer(tensor.info, data, tl.nhwc_to_nchw())
    tl.dump_tensor("/tmp/dumps", "request0", "input", tensor)
"""

__version__ = "0.1.0"
__author__ = "Wahyu Ardiansyah"

from .core import (
    DataType,
    Shape,
    Strides,
    PermutationVector,
    TensorDescriptor,
    ConstTensor,
    dtype_size,
    dtype_to_string,
)

from .layout import (
    LayoutFormat,
    nhwc_to_nchw,
    nchw_to_nhwc,
    layout_mappings,
    memory_layout_string,
)

from .swizzle import swizzle_tensor, swizzle_to_buffer

from .dump import dump_tensor, dump_request_tensors, render_tensor_dump

from .operands import (
    Operand,
    OperandType,
    get_tensor_info_for_operand,
    get_operand_summary,
    get_const_tensor_for_operand,
)
from .memory import DataLocation, RunTimePoolInfo, get_memory_from_pool
from .model import Model, Operation, get_model_summary
from .graph_export import export_network_graph_to_dot_file

from .config import DumpConfig

# Observability
from .observability import set_verbosity, Verbosity

# Errors
from .errors import (
    TensorLayoutError,
    ValidationError,
    UnsupportedDataTypeError,
    UnsupportedOperandError,
    ConfigurationError,
)

__all__ = [
    "__version__",
    # Core
    "DataType",
    "Shape",
    "Strides",
    "PermutationVector",
    "TensorDescriptor",
    "ConstTensor",
    "dtype_size",
    "dtype_to_string",
    # Layout
    "LayoutFormat",
    "nhwc_to_nchw",
    "nchw_to_nhwc",
    "layout_mappings",
    "memory_layout_string",
    # Swizzle and dump
    "swizzle_tensor",
    "swizzle_to_buffer",
    "dump_tensor",
    "dump_request_tensors",
    "render_tensor_dump",
    # Driver collaborators
    "Operand",
    "OperandType",
    "get_tensor_info_for_operand",
    "get_operand_summary",
    "get_const_tensor_for_operand",
    "DataLocation",
    "RunTimePoolInfo",
    "get_memory_from_pool",
    "Model",
    "Operation",
    "get_model_summary",
    "export_network_graph_to_dot_file",
    "DumpConfig",
    # Observability
    "set_verbosity",
    "Verbosity",
    # Errors
    "TensorLayoutError",
    "ValidationError",
    "UnsupportedDataTypeError",
    "UnsupportedOperandError",
    "ConfigurationError",
]
