# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Memory pool resolution.

Operand data lives in caller-owned memory pools and is addressed by a
(pool index, byte offset, length) triple. Resolution returns a
bounds-checked memoryview into the pool instead of a raw address.
"""

from dataclasses import dataclass
from typing import Any, Sequence

from .core import byte_view
from .errors import ValidationError


@dataclass(frozen=True)
class DataLocation:
    """Where an operand's bytes live."""

    pool_index: int = 0
    offset: int = 0
    length: int = 0


@dataclass
class RunTimePoolInfo:
    """A mapped memory pool."""

    buffer: Any

    def get_buffer(self) -> memoryview:
        return byte_view(self.buffer)


def get_memory_from_pool(
    location: DataLocation, pools: Sequence[RunTimePoolInfo]
) -> memoryview:
    """
    Resolve a location to the bytes it names.

    The view is writable when the pool buffer is.

    Raises:
        ValidationError: If the pool index or the byte range is out of bounds
    """
    if not 0 <= location.pool_index < len(pools):
        raise ValidationError(
            f"Pool index {location.pool_index} out of range",
            parameter="pool_index",
            expected=f"0..{len(pools) - 1}",
            received=str(location.pool_index),
        )

    memory = pools[location.pool_index].get_buffer()
    end = location.offset + location.length
    if location.offset < 0 or location.length < 0 or end > memory.nbytes:
        raise ValidationError(
            f"Byte range [{location.offset}, {end}) exceeds pool of "
            f"{memory.nbytes} bytes",
            parameter="location",
            received=str(location),
        )
    return memory[location.offset : end]
