#!/usr/bin/env python3
"""
Core Module
Camera path data structures, transforms and statistics.

Everything here is pure: each function takes a CameraPath and returns a new
one (or a PathStats summary) without touching its input.
"""

from .errors import CameraPathError, MalformedInput, InvalidParameter, SerializationFailure
from .path_data import (
    CameraPath,
    CameraKeyframe,
    Position,
    Rotation,
    PathStats,
    camera_path_from_dict,
    camera_path_to_dict,
)
from .units import (
    ENGINE_UNITS_PER_DEGREE,
    FPS,
    degrees_to_engine_units,
    frame_for,
)
from .transforms import (
    fov_add,
    fov_multiply,
    fov_set,
    position_offset,
    position_scale,
    rotation_offset,
    speed,
    time_offset,
)
from .path_ops import mirror, smooth, reverse, path_stats, sorted_by_time
from .serialization import parse_camera_path, serialize_camera_path, serialize_stats
from .registry import apply_transform, list_operations, get_operation

__all__ = [
    'CameraPathError',
    'MalformedInput',
    'InvalidParameter',
    'SerializationFailure',
    'CameraPath',
    'CameraKeyframe',
    'Position',
    'Rotation',
    'PathStats',
    'camera_path_from_dict',
    'camera_path_to_dict',
    'ENGINE_UNITS_PER_DEGREE',
    'FPS',
    'degrees_to_engine_units',
    'frame_for',
    'fov_add',
    'fov_multiply',
    'fov_set',
    'position_offset',
    'position_scale',
    'rotation_offset',
    'speed',
    'time_offset',
    'mirror',
    'smooth',
    'reverse',
    'path_stats',
    'sorted_by_time',
    'parse_camera_path',
    'serialize_camera_path',
    'serialize_stats',
    'apply_transform',
    'list_operations',
    'get_operation',
]
