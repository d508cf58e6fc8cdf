# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Operand mapping.

Converts runtime operand descriptions into TensorDescriptors.
"""

from dataclasses import dataclass, field
from enum import IntEnum

from .core import ConstTensor, DataType, Shape, TensorDescriptor
from .errors import UnsupportedOperandError
from .memory import DataLocation, get_memory_from_pool


class OperandType(IntEnum):
    """Operand type codes used by the runtime model format."""

    FLOAT32 = 0
    INT32 = 1
    UINT32 = 2
    TENSOR_FLOAT32 = 3
    TENSOR_INT32 = 4
    TENSOR_QUANT8_ASYMM = 5


_OPERAND_DATA_TYPES = {
    OperandType.TENSOR_FLOAT32: DataType.Float32,
    OperandType.TENSOR_QUANT8_ASYMM: DataType.QuantisedAsymm8,
    OperandType.TENSOR_INT32: DataType.Signed32,
}


@dataclass
class Operand:
    """An operand of a runtime model."""

    type: OperandType
    dimensions: list[int] = field(default_factory=list)
    scale: float = 0.0
    zero_point: int = 0
    location: DataLocation = field(default_factory=DataLocation)


def get_tensor_info_for_operand(operand: Operand) -> TensorDescriptor:
    """
    Build the TensorDescriptor for a tensor operand.

    Raises:
        UnsupportedOperandError: For scalar and unknown operand types
    """
    dtype = _OPERAND_DATA_TYPES.get(operand.type)
    if dtype is None:
        raise UnsupportedOperandError(operand.type)

    return TensorDescriptor(
        shape=Shape(tuple(operand.dimensions)),
        dtype=dtype,
        quantization_scale=operand.scale,
        quantization_offset=operand.zero_point,
    )


def get_operand_summary(operand: Operand) -> str:
    """One-line summary, e.g. ``[1, 224, 224, 3] TENSOR_FLOAT32``."""
    dims = ", ".join(str(d) for d in operand.dimensions)
    type_name = getattr(operand.type, "name", str(operand.type))
    return f"[{dims}] {type_name}"


def get_const_tensor_for_operand(operand: Operand, pools) -> ConstTensor:
    """Descriptor and pool-backed memory of a constant operand."""
    info = get_tensor_info_for_operand(operand)
    return ConstTensor(info, get_memory_from_pool(operand.location, pools))
