# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tensor Descriptor and buffer wrappers.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from ..errors import ValidationError, format_buffer_size_mismatch
from .types import DataType, Shape, dtype_size, dtype_to_numpy, dtype_to_string

MAX_RANK = 4


@dataclass(frozen=True)
class TensorDescriptor:
    """
    Describes a tensor's metadata without holding actual data.

    Rank is limited to 1..4. Quantization parameters are carried for
    QuantisedAsymm8 tensors and ignored otherwise.
    """

    shape: Shape
    dtype: DataType = DataType.Float32
    quantization_scale: float = 0.0
    quantization_offset: int = 0

    def __post_init__(self):
        if not isinstance(self.shape, Shape):
            object.__setattr__(self, "shape", Shape(tuple(self.shape)))

        rank = self.shape.rank()
        if not 1 <= rank <= MAX_RANK:
            raise ValidationError(
                f"Tensor rank {rank} is not supported",
                parameter="shape",
                expected=f"1..{MAX_RANK} dimensions",
                received=str(list(self.shape)),
            )
        if any(d < 0 for d in self.shape):
            raise ValidationError(
                "Tensor extents must be non-negative",
                parameter="shape",
                received=str(list(self.shape)),
            )

    @property
    def rank(self) -> int:
        return self.shape.rank()

    def num_elements(self) -> int:
        return self.shape.numel()

    def num_bytes(self) -> int:
        """Calculate the size in bytes."""
        return self.num_elements() * dtype_size(self.dtype)

    def with_shape(self, shape) -> "TensorDescriptor":
        """Same type and quantization, different extents."""
        return TensorDescriptor(
            shape=shape if isinstance(shape, Shape) else Shape(tuple(shape)),
            dtype=self.dtype,
            quantization_scale=self.quantization_scale,
            quantization_offset=self.quantization_offset,
        )

    def __repr__(self) -> str:
        return (
            f"TensorDescriptor(shape={self.shape}, "
            f"dtype={dtype_to_string(self.dtype)})"
        )


def byte_view(buffer: Any, writable: bool = False) -> memoryview:
    """
    Flat unsigned-byte view of a caller-owned buffer.

    Accepts anything supporting the buffer protocol. The buffer must be
    contiguous; a read-only buffer is rejected when ``writable`` is set.
    """
    try:
        view = memoryview(buffer)
    except TypeError as e:
        raise ValidationError(
            f"Object of type {type(buffer).__name__} does not expose a buffer",
            parameter="buffer",
        ) from e

    if not view.c_contiguous:
        raise ValidationError("Buffer must be contiguous", parameter="buffer")
    if writable and view.readonly:
        raise ValidationError("Destination buffer is read-only", parameter="buffer")
    return view.cast("B")


@dataclass(frozen=True)
class ConstTensor:
    """A descriptor paired with the caller's buffer holding its elements."""

    info: TensorDescriptor
    memory: Any

    def __post_init__(self):
        nbytes = byte_view(self.memory).nbytes
        required = self.info.num_bytes()
        if nbytes < required:
            raise format_buffer_size_mismatch(required, nbytes, "tensor memory")

    @property
    def shape(self) -> Shape:
        return self.info.shape

    @property
    def dtype(self) -> DataType:
        return self.info.dtype

    def num_dimensions(self) -> int:
        return self.info.rank

    def num_elements(self) -> int:
        return self.info.num_elements()

    def elements(self) -> np.ndarray:
        """Flat read-only numpy view of the elements, no copy."""
        return np.frombuffer(
            byte_view(self.memory),
            dtype=dtype_to_numpy(self.info.dtype),
            count=self.info.num_elements(),
        )

    @classmethod
    def from_array(cls, array: np.ndarray, dtype: DataType) -> "ConstTensor":
        """Wrap a numpy array, converting it to the element type of ``dtype``."""
        data = np.ascontiguousarray(array, dtype=dtype_to_numpy(dtype))
        return cls(TensorDescriptor(Shape(data.shape), dtype), data)
