#!/usr/bin/env python3
"""
Transforms Module
Per-keyframe transforms: FOV, position, rotation and time

Every transform visits each keyframe independently and returns a new
CameraPath with the same keys. The input path is never modified.
"""

import math
from dataclasses import replace

from .errors import InvalidParameter
from .path_data import CameraPath, Position, Rotation
from .units import degrees_to_engine_units, with_timestamp


def fov_add(path: CameraPath, value: float) -> CameraPath:
    """Add value to every keyframe's FOV"""
    return {key: replace(kf, fov=kf.fov + value) for key, kf in path.items()}


def fov_multiply(path: CameraPath, multiplier: float) -> CameraPath:
    """Multiply every keyframe's FOV"""
    return {key: replace(kf, fov=kf.fov * multiplier) for key, kf in path.items()}


def fov_set(path: CameraPath, value: float) -> CameraPath:
    """Set every keyframe's FOV to value"""
    return {key: replace(kf, fov=float(value)) for key, kf in path.items()}


def position_offset(path: CameraPath, x: float, y: float, z: float) -> CameraPath:
    """Translate the whole path by (x, y, z)"""
    return {
        key: replace(kf, position=Position(
            x=kf.position.x + x,
            y=kf.position.y + y,
            z=kf.position.z + z,
        ))
        for key, kf in path.items()
    }


def position_scale(path: CameraPath, x: float, y: float, z: float) -> CameraPath:
    """Scale positions about the origin per axis

    Negative factors mirror the path around the origin on that axis.
    """
    return {
        key: replace(kf, position=Position(
            x=kf.position.x * x,
            y=kf.position.y * y,
            z=kf.position.z * z,
        ))
        for key, kf in path.items()
    }


def rotation_offset(path: CameraPath, pitch: int, yaw: int, roll: int,
                    use_degrees: bool = False) -> CameraPath:
    """Add the same rotation offset to every keyframe

    Args:
        path: Camera path
        pitch: Pitch offset
        yaw: Yaw offset
        roll: Roll offset
        use_degrees: If True, offsets are degrees (fractions allowed) and get
                     converted to engine units (truncated) before being added

    Returns:
        CameraPath: New path, angles are not wrapped into any range

    Raises:
        InvalidParameter: If use_degrees is False and an offset is not an integer
    """
    if use_degrees:
        pitch = degrees_to_engine_units(pitch)
        yaw = degrees_to_engine_units(yaw)
        roll = degrees_to_engine_units(roll)
    else:
        for name, value in (('pitch', pitch), ('yaw', yaw), ('roll', roll)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameter(name, value, "engine unit offsets must be integers")

    return {
        key: replace(kf, rotation=Rotation(
            pitch=kf.rotation.pitch + pitch,
            roll=kf.rotation.roll + roll,
            yaw=kf.rotation.yaw + yaw,
        ))
        for key, kf in path.items()
    }


def speed(path: CameraPath, multiplier: float) -> CameraPath:
    """Play the path faster (multiplier > 1) or slower (< 1)

    Raises:
        InvalidParameter: If multiplier is zero or not finite
    """
    if multiplier == 0 or not math.isfinite(multiplier):
        raise InvalidParameter('multiplier', multiplier, "must be a finite non-zero number")
    return {key: with_timestamp(kf, kf.timestamp / multiplier) for key, kf in path.items()}


def time_offset(path: CameraPath, seconds: float) -> CameraPath:
    """Shift every timestamp by seconds (may go negative)

    Raises:
        InvalidParameter: If seconds is not finite
    """
    if not math.isfinite(seconds):
        raise InvalidParameter('seconds', seconds, "must be finite")
    return {key: with_timestamp(kf, kf.timestamp + seconds) for key, kf in path.items()}
