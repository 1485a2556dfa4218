#!/usr/bin/env python3
"""
Serialization Module
Canonical JSON text form of camera paths and path statistics
"""

import json

from .errors import MalformedInput, SerializationFailure
from .path_data import CameraPath, PathStats, camera_path_from_dict, camera_path_to_dict

INDENT = 2


def parse_camera_path(text: str) -> CameraPath:
    """Parse serialized keyframe collection text

    Args:
        text: JSON object of keyframe id -> keyframe

    Returns:
        CameraPath

    Raises:
        MalformedInput: If the text is not valid JSON or not a keyframe collection
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except MalformedInput:
        raise
    except (TypeError, ValueError) as e:
        raise MalformedInput(f"Failed to parse JSON: {e}") from e
    return camera_path_from_dict(data)


def serialize_camera_path(path: CameraPath, indent=INDENT) -> str:
    """Serialize a camera path as pretty JSON

    Raises:
        SerializationFailure: If a value has no JSON form (NaN, infinity)
    """
    return _dumps(camera_path_to_dict(path), indent=indent)


def serialize_stats(stats: PathStats) -> str:
    """Serialize path statistics as compact JSON"""
    return _dumps(stats.to_dict(), indent=None)


def _reject_constant(name):
    raise MalformedInput(f"Failed to parse JSON: {name} is not a valid JSON number")


def _dumps(data, indent):
    try:
        return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationFailure(f"Failed to serialize: {e}") from e
