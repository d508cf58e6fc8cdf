# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Row-major strides and coordinate to offset conversion.

Offsets are in elements, not bytes. Multiply by the element width
to address a byte buffer.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..errors import ValidationError


@dataclass(frozen=True)
class Strides:
    """Row-major element strides for a shape."""

    extents: tuple[int, ...]
    steps: tuple[int, ...]

    @classmethod
    def row_major(cls, extents: Sequence[int]) -> "Strides":
        """Build strides where the last axis varies fastest."""
        extents = tuple(int(e) for e in extents)
        for axis, extent in enumerate(extents):
            if extent < 0:
                raise ValidationError(
                    f"Negative extent {extent} on axis {axis}",
                    parameter="extents",
                    received=str(list(extents)),
                )

        steps = [1] * len(extents)
        for axis in range(len(extents) - 2, -1, -1):
            steps[axis] = steps[axis + 1] * extents[axis + 1]
        return cls(extents=extents, steps=tuple(steps))

    @property
    def rank(self) -> int:
        return len(self.extents)

    def offset(self, coord: Sequence[int]) -> int:
        """Linear element offset of a coordinate, bounds-checked."""
        if len(coord) != self.rank:
            raise ValidationError(
                f"Coordinate rank {len(coord)} does not match tensor rank {self.rank}",
                parameter="coord",
                expected=str(self.rank),
                received=str(len(coord)),
            )
        offset = 0
        for axis, (index, extent, step) in enumerate(
            zip(coord, self.extents, self.steps)
        ):
            if not 0 <= index < extent:
                raise ValidationError(
                    f"Index {index} out of range for axis {axis} with extent {extent}",
                    parameter="coord",
                    received=str(tuple(coord)),
                )
            offset += index * step
        return offset

    def offsets(self, coords: Sequence[np.ndarray]) -> np.ndarray:
        """
        Vectorised offset for per-axis coordinate arrays.

        ``coords[axis]`` holds that axis' index for every element; the
        arrays must broadcast together. Indices are checked against the
        extents the same way ``offset`` checks a single coordinate.
        """
        if len(coords) != self.rank:
            raise ValidationError(
                f"Coordinate rank {len(coords)} does not match tensor rank {self.rank}",
                parameter="coords",
            )
        total = np.zeros((), dtype=np.int64)
        for axis, (index, extent, step) in enumerate(
            zip(coords, self.extents, self.steps)
        ):
            index = np.asarray(index, dtype=np.int64)
            if index.size and (index.min() < 0 or index.max() >= extent):
                raise ValidationError(
                    f"Index out of range for axis {axis} with extent {extent}",
                    parameter="coords",
                )
            total = total + index * step
        return total

    def numel(self) -> int:
        """Number of elements addressed by these strides."""
        result = 1
        for extent in self.extents:
            result *= extent
        return result
