"""Pixel value conversion for true-colour visuals.

A visual describes each colour channel by a bit mask.  The shift of a
channel is the position of the lowest set bit of its mask.  Its width is
the number of consecutive set bits from there.
"""

from __future__ import annotations

from typing import Sequence

Shifts = tuple[int, int, int, int, int, int]

_FULL_DEPTH = 24


def _mask_layout(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive integer, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def channel_shifts(red_mask: int, green_mask: int, blue_mask: int) -> Shifts:
    """Return (red shift, red width, green shift, green width, blue shift, blue width)."""
    red = _mask_layout(red_mask)
    green = _mask_layout(green_mask)
    blue = _mask_layout(blue_mask)
    return (*red, *green, *blue)  # type: ignore[return-value]


def good_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert a 0xRRGGBB colour to the pixel value of a visual.

    Visuals of depth 24 or more take the colour unchanged.  Shallower ones
    keep the top bits of each channel and place them at the channel's shift.
    """
    if depth >= _FULL_DEPTH:
        return color
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    red_shift, red_width, green_shift, green_width, blue_shift, blue_width = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_width)) << red_shift)
        + ((green >> (16 - green_width)) << green_shift)
        + ((blue >> (16 - blue_width)) << blue_shift)
    )