# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Memory Layout Conventions

Channel-last (NHWC) is the layout tensors arrive in from the runtime;
channel-first (NCHW) is what the compute backend expects for 4D
activations and weights. Conversions between the two are expressed as
PermutationVectors for the swizzle engine.
"""

from enum import Enum

from .core import PermutationVector


class LayoutFormat(Enum):
    """Tensor memory layout formats."""

    NCHW = "NCHW"  # Channel-first
    NHWC = "NHWC"  # Channel-last
    UNKNOWN = "UNKNOWN"


def nhwc_to_nchw() -> PermutationVector:
    """
    Mappings that move a channel-last tensor to channel-first.

    N stays on axis 0, H moves to 2, W to 3 and C to 1.
    """
    return PermutationVector((0, 2, 3, 1))


def nchw_to_nhwc() -> PermutationVector:
    """Inverse of ``nhwc_to_nchw``."""
    return PermutationVector((0, 3, 1, 2))


def layout_mappings(
    from_layout: LayoutFormat, to_layout: LayoutFormat
) -> PermutationVector:
    """
    Mappings converting between two 4D layouts.

    Returns the empty "don't permute" vector when no swizzle is needed.
    """
    if from_layout == to_layout:
        return PermutationVector.dont_permute()

    if from_layout == LayoutFormat.NHWC and to_layout == LayoutFormat.NCHW:
        return nhwc_to_nchw()
    elif from_layout == LayoutFormat.NCHW and to_layout == LayoutFormat.NHWC:
        return nchw_to_nhwc()

    raise ValueError(f"No conversion from {from_layout.value} to {to_layout.value}")


def memory_layout_string(rank: int) -> str:
    """
    Label naming the axis order a dump assumes for a tensor of this rank.

    The label is informational; it does not change iteration order.
    """
    labels = {
        4: "(BHWC) ",
        3: "(HWC) ",
        2: "(HW) ",
    }
    return labels.get(rank, "")
