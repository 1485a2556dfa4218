#!/usr/bin/env python3
"""
Path Operations Module
Transforms that need path-wide information: mirror, smooth, reverse, stats

Unlike the per-keyframe transforms these look at the whole path (axis
bounds, neighbor windows, time range). Temporal order is always obtained by
sorting on timestamp, never from the mapping's iteration order.
"""

from dataclasses import replace
from typing import List, Tuple

import numpy as np

from .errors import InvalidParameter
from .path_data import CameraKeyframe, CameraPath, PathStats, Position, Rotation
from .units import with_timestamp

MIRROR_AXES = ('x', 'y', 'z')


def sorted_by_time(path: CameraPath) -> List[Tuple[str, CameraKeyframe]]:
    """Keyframes as (key, keyframe) pairs in ascending timestamp order

    The sort is stable, keyframes sharing a timestamp keep their input order.
    """
    return sorted(path.items(), key=lambda item: item[1].timestamp)


def time_range(path: CameraPath) -> Tuple[float, float]:
    """(min_time, max_time) across the path, (0.0, 0.0) when empty"""
    if not path:
        return 0.0, 0.0
    timestamps = np.fromiter((kf.timestamp for kf in path.values()), dtype=float, count=len(path))
    return float(timestamps.min()), float(timestamps.max())


def mirror(path: CameraPath, axis: str, flip_pitch: bool = False, flip_yaw: bool = False,
           flip_roll: bool = False, bounded: bool = False) -> CameraPath:
    """Mirror the path along one position axis

    Args:
        path: Camera path
        axis: 'x', 'y' or 'z'
        flip_pitch: Negate every pitch
        flip_yaw: Negate every yaw
        flip_roll: Negate every roll
        bounded: Reflect about the midpoint of the axis' range across the
                 path instead of about zero

    Returns:
        CameraPath: Mirrored path with the same keys

    Raises:
        InvalidParameter: If axis is not one of x, y, z
    """
    if axis not in MIRROR_AXES:
        raise InvalidParameter('axis', axis, f"expected one of {', '.join(MIRROR_AXES)}")

    coords = np.fromiter((getattr(kf.position, axis) for kf in path.values()),
                         dtype=float, count=len(path))

    if bounded:
        if coords.size:
            min_pos, max_pos = coords.min(), coords.max()
        else:
            min_pos, max_pos = 0.0, 0.0
        center = (min_pos + max_pos) / 2.0
        mirrored = 2.0 * center - coords
    else:
        mirrored = -coords

    result = {}
    for (key, kf), value in zip(path.items(), mirrored):
        position = replace(kf.position, **{axis: float(value)})
        rotation = Rotation(
            pitch=-kf.rotation.pitch if flip_pitch else kf.rotation.pitch,
            roll=-kf.rotation.roll if flip_roll else kf.rotation.roll,
            yaw=-kf.rotation.yaw if flip_yaw else kf.rotation.yaw,
        )
        result[key] = replace(kf, position=position, rotation=rotation)

    return result


def smooth(path: CameraPath, window_size: int) -> CameraPath:
    """Moving-average smoothing of position and FOV

    Each keyframe takes the mean over a window centered on it in time order,
    [i - window_size // 2, i + window_size // 2]. Windows are clipped at the
    ends of the path, not padded, so edge keyframes average fewer neighbors.
    Rotation, timestamp, frame and weight are left as they are.

    Args:
        path: Camera path
        window_size: Window length in keyframes (0 and 1 leave the path unchanged)

    Returns:
        CameraPath: Smoothed path with the same keys

    Raises:
        InvalidParameter: If window_size is not a non-negative integer
    """
    if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size < 0:
        raise InvalidParameter('window_size', window_size, "must be a non-negative integer")

    ordered = sorted_by_time(path)
    count = len(ordered)
    if count == 0:
        return {}

    # columns: x, y, z, fov
    values = np.array(
        [(kf.position.x, kf.position.y, kf.position.z, kf.fov) for _, kf in ordered],
        dtype=float,
    )
    half = window_size // 2

    smoothed = {}
    for i, (key, kf) in enumerate(ordered):
        start = max(0, i - half)
        end = min(count, i + half + 1)
        x, y, z, fov = values[start:end].mean(axis=0)
        smoothed[key] = replace(
            kf,
            position=Position(x=float(x), y=float(y), z=float(z)),
            fov=float(fov),
        )

    return {key: smoothed[key] for key in path}


def reverse(path: CameraPath) -> CameraPath:
    """Play the path backwards within its own time range

    Each keyframe keeps its key and spatial data; only its timestamp is
    reflected (max_time - timestamp + min_time) and its frame resynced.
    """
    min_time, max_time = time_range(path)
    return {
        key: with_timestamp(kf, max_time - kf.timestamp + min_time)
        for key, kf in path.items()
    }


def path_stats(path: CameraPath) -> PathStats:
    """Keyframe count and time range of the path"""
    min_time, max_time = time_range(path)
    return PathStats(
        keyframe_count=len(path),
        duration=max_time - min_time,
        min_time=min_time,
        max_time=max_time,
    )
