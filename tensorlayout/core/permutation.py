# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Permutation vectors.

``mappings[i]`` is the destination axis of source axis ``i``. A vector of
length N must be a bijection over {0, ..., N-1}. The empty vector means
"no permutation needed".
"""

from dataclasses import dataclass, field
from typing import Sequence

from ..errors import ValidationError
from .types import Shape


@dataclass(frozen=True)
class PermutationVector:
    """Bijective mapping from source axes to destination axes."""

    mappings: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self):
        mappings = tuple(int(m) for m in self.mappings)
        if sorted(mappings) != list(range(len(mappings))):
            raise ValidationError(
                f"Permutation {list(mappings)} is not a bijection",
                parameter="mappings",
                expected=f"a reordering of {list(range(len(mappings)))}",
                received=str(list(mappings)),
            )
        object.__setattr__(self, "mappings", mappings)

    @classmethod
    def identity(cls, rank: int) -> "PermutationVector":
        """Permutation that leaves every axis in place."""
        return cls(tuple(range(rank)))

    @classmethod
    def dont_permute(cls) -> "PermutationVector":
        """The empty vector, used where no swizzle is required."""
        return cls(())

    def is_empty(self) -> bool:
        return not self.mappings

    def is_identity(self) -> bool:
        return all(axis == target for axis, target in enumerate(self.mappings))

    def inverse(self) -> "PermutationVector":
        """Permutation that undoes this one."""
        inverse = [0] * len(self.mappings)
        for source_axis, dest_axis in enumerate(self.mappings):
            inverse[dest_axis] = source_axis
        return PermutationVector(tuple(inverse))

    def permute_shape(self, shape: Sequence[int]) -> Shape:
        """
        Shape of the destination tensor.

        Source extent ``i`` lands on destination axis ``mappings[i]``.
        """
        dims = tuple(shape)
        if len(dims) != len(self.mappings):
            raise ValidationError(
                f"Permutation of size {len(self.mappings)} cannot be applied "
                f"to a shape of rank {len(dims)}",
                parameter="shape",
                expected=str(len(self.mappings)),
                received=str(len(dims)),
            )
        permuted = [0] * len(dims)
        for source_axis, dest_axis in enumerate(self.mappings):
            permuted[dest_axis] = dims[source_axis]
        return Shape(tuple(permuted))

    def __getitem__(self, idx: int) -> int:
        return self.mappings[idx]

    def __len__(self) -> int:
        return len(self.mappings)

    def __iter__(self):
        return iter(self.mappings)

    def __repr__(self) -> str:
        return f"PermutationVector({list(self.mappings)})"
