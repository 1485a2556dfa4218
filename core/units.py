#!/usr/bin/env python3
"""
Units Module
Angle and time conversions shared by the transforms

Rotations are stored in engine angular units (182.04 per degree) and frames
are derived from timestamps at a fixed 30 fps.
"""

import math
from dataclasses import replace

from .errors import InvalidParameter

ENGINE_UNITS_PER_DEGREE = 182.04
FPS = 30


def degrees_to_engine_units(degrees: float) -> int:
    """Convert degrees to engine angular units

    Truncates toward zero, so 1.0 degree becomes 182 units.

    Args:
        degrees: Angle in degrees

    Returns:
        int: Angle in engine units

    Raises:
        InvalidParameter: If the converted angle is not a finite number
    """
    units = _finite_product(degrees, ENGINE_UNITS_PER_DEGREE)
    if units is None:
        raise InvalidParameter('degrees', degrees, "angle out of range")
    return int(units)


def frame_for(timestamp: float) -> int:
    """Frame index for a timestamp at the fixed frame rate

    Halves round away from zero (0.75s -> frame 23, -0.75s -> frame -23).

    Args:
        timestamp: Playback time in seconds

    Returns:
        int: Frame index

    Raises:
        InvalidParameter: If the timestamp is not finite or overflows at 30 fps
    """
    scaled = _finite_product(timestamp, FPS)
    if scaled is None:
        raise InvalidParameter('timestamp', timestamp, "time out of range")
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


def with_timestamp(keyframe, timestamp: float):
    """Copy of keyframe with a new timestamp and its matching frame"""
    return replace(keyframe, timestamp=timestamp, frame=frame_for(timestamp))


def _finite_product(value, factor):
    try:
        product = value * factor
    except OverflowError:
        return None
    return product if math.isfinite(product) else None
