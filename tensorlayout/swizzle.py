# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Layout Permutation Engine

Copies the elements of a 4D tensor from a source buffer into a
destination buffer, reordering axes according to a PermutationVector.
Source axis ``i`` becomes destination axis ``mappings[i]``, so the
element at source coordinate ``s`` lands at destination coordinate
``d`` where ``d[mappings[i]] = s[i]``.

Buffers are owned by the caller. Only the destination is written.

Example:
    info = TensorDescriptor(Shape((1, 2, 2, 3)), DataType.Float32)
    dst = bytearray(info.num_bytes())
    swizzle_tensor(info, src, dst, nhwc_to_nchw())
"""

import time
from typing import Any

import numpy as np

from .core import (
    DataType,
    PermutationVector,
    Strides,
    TensorDescriptor,
    byte_view,
    dtype_to_numpy,
)
from .errors import (
    UnsupportedDataTypeError,
    ValidationError,
    format_buffer_size_mismatch,
)
from .observability import get_logger

SWIZZLE_RANK = 4

# Element types the engine copies; anything else is rejected
# rather than copied with a guessed width.
SWIZZLE_DATA_TYPES = (DataType.Float32, DataType.QuantisedAsymm8)


def _check_preconditions(
    info: TensorDescriptor, mappings: PermutationVector
) -> np.dtype:
    if info.rank != SWIZZLE_RANK:
        raise ValidationError(
            f"Swizzle requires a 4D tensor, got {info.rank}D",
            parameter="info",
            expected=str(SWIZZLE_RANK),
            received=str(info.rank),
        )
    if len(mappings) != SWIZZLE_RANK:
        raise ValidationError(
            f"Swizzle requires 4 mappings, got {len(mappings)}",
            parameter="mappings",
            expected=str(SWIZZLE_RANK),
            received=str(list(mappings)),
        )
    if info.dtype not in SWIZZLE_DATA_TYPES:
        get_logger().warning(
            "Unknown DataType for swizzling",
            component="swizzle",
            data_type=int(info.dtype),
        )
        raise UnsupportedDataTypeError(
            info.dtype, operation="swizzle", supported=SWIZZLE_DATA_TYPES
        )
    return dtype_to_numpy(info.dtype)


def _permute(
    shape,
    mappings: PermutationVector,
    source: memoryview,
    destination: memoryview,
    element_type: np.dtype,
) -> None:
    source_strides = Strides.row_major(shape)
    dest_strides = Strides.row_major(mappings.permute_shape(shape))
    count = source_strides.numel()
    if count == 0:
        return

    src = np.frombuffer(source, dtype=element_type, count=count)
    dst = np.frombuffer(destination, dtype=element_type, count=count)

    # Every source coordinate in row-major order, one array per axis
    source_coords = [c.reshape(-1) for c in np.indices(source_strides.extents)]

    dest_coords: list[Any] = [None] * SWIZZLE_RANK
    for axis, dest_axis in enumerate(mappings):
        dest_coords[dest_axis] = source_coords[axis]

    dst[dest_strides.offsets(dest_coords)] = src[source_strides.offsets(source_coords)]


def swizzle_tensor(
    info: TensorDescriptor,
    source: Any,
    destination: Any,
    mappings: PermutationVector,
) -> None:
    """
    Permute a 4D tensor from ``source`` into ``destination``.

    Args:
        info: Descriptor of the source tensor (rank 4)
        source: Buffer holding the source elements in row-major order
        destination: Writable buffer sized for the permuted tensor
        mappings: Destination axis for each source axis

    Raises:
        ValidationError: Rank is not 4, mappings are not 4 long, or a
            buffer is smaller than the tensor
        UnsupportedDataTypeError: Element type is not Float32 or
            QuantisedAsymm8
    """
    element_type = _check_preconditions(info, mappings)

    required = info.num_bytes()
    src_bytes = byte_view(source)
    dst_bytes = byte_view(destination, writable=True)
    if src_bytes.nbytes < required:
        raise format_buffer_size_mismatch(required, src_bytes.nbytes, "source")
    if dst_bytes.nbytes < required:
        raise format_buffer_size_mismatch(required, dst_bytes.nbytes, "destination")

    start = time.perf_counter()
    _permute(info.shape, mappings, src_bytes, dst_bytes, element_type)
    elapsed_ms = (time.perf_counter() - start) * 1000

    get_logger().debug(
        "Swizzled tensor",
        component="swizzle",
        operation="swizzle_tensor",
        duration_ms=elapsed_ms,
        shape=list(info.shape),
        mappings=list(mappings),
    )


def swizzle_to_buffer(
    info: TensorDescriptor,
    source: Any,
    mappings: PermutationVector,
) -> tuple[TensorDescriptor, bytearray]:
    """
    Permute into a newly allocated buffer.

    Returns:
        The descriptor of the permuted tensor and the buffer holding it.
    """
    _check_preconditions(info, mappings)

    permuted_info = info.with_shape(mappings.permute_shape(info.shape))
    destination = bytearray(permuted_info.num_bytes())
    swizzle_tensor(info, source, destination, mappings)
    return permuted_info, destination
