#!/usr/bin/env python3
"""
Path Data Module
Data structures for camera keyframe collections.

A camera path is a mapping of opaque keyframe ids to CameraKeyframe records.
The mapping carries no temporal order; anything that needs one sorts on
the timestamp field. Dict conversion uses the field names written by the
camera path editor ("FOV", "Position", "Rotation", ...).
"""

import math
from dataclasses import dataclass
from typing import Dict, Any

from .errors import MalformedInput


@dataclass
class Position:
    """World-space camera location

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate
    """
    x: float
    y: float
    z: float


@dataclass
class Rotation:
    """Camera orientation in engine angular units (182.04 per degree)

    Attributes:
        pitch: Pitch in engine units
        roll: Roll in engine units
        yaw: Yaw in engine units
    """
    pitch: int
    roll: int
    yaw: int


@dataclass
class CameraKeyframe:
    """Single timed sample of the camera

    Attributes:
        fov: Field of view in degrees
        frame: Frame index, derived from timestamp at 30 fps
        position: World-space position
        rotation: Orientation in engine units
        timestamp: Playback time in seconds
        weight: Blend weight (0-1 expected, not validated)
    """
    fov: float
    frame: int
    position: Position
    rotation: Rotation
    timestamp: float
    weight: float

    @classmethod
    def from_dict(cls, key: str, data: Any) -> 'CameraKeyframe':
        """Build a keyframe from its editor dict form

        Args:
            key: Keyframe id (used in error messages)
            data: Dict with FOV, Frame, Position, Rotation, Timestamp, Weight

        Returns:
            CameraKeyframe

        Raises:
            MalformedInput: If a field is missing or has the wrong type
        """
        where = f"keyframe {key!r}"
        fields = _require_object(data, where)
        position = _require_object(_require(fields, 'Position', where), f"{where} Position")
        rotation = _require_object(_require(fields, 'Rotation', where), f"{where} Rotation")

        return cls(
            fov=_require_float(fields, 'FOV', where),
            frame=_require_int(fields, 'Frame', where),
            position=Position(
                x=_require_float(position, 'X', f"{where} Position"),
                y=_require_float(position, 'Y', f"{where} Position"),
                z=_require_float(position, 'Z', f"{where} Position"),
            ),
            rotation=Rotation(
                pitch=_require_int(rotation, 'Pitch', f"{where} Rotation"),
                roll=_require_int(rotation, 'Roll', f"{where} Rotation"),
                yaw=_require_int(rotation, 'Yaw', f"{where} Rotation"),
            ),
            timestamp=_require_float(fields, 'Timestamp', where),
            weight=_require_float(fields, 'Weight', where),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Editor dict form of this keyframe"""
        return {
            'FOV': self.fov,
            'Frame': self.frame,
            'Position': {
                'X': self.position.x,
                'Y': self.position.y,
                'Z': self.position.z,
            },
            'Rotation': {
                'Pitch': self.rotation.pitch,
                'Roll': self.rotation.roll,
                'Yaw': self.rotation.yaw,
            },
            'Timestamp': self.timestamp,
            'Weight': self.weight,
        }


# Keyframe id -> keyframe. Iteration order is incidental.
CameraPath = Dict[str, CameraKeyframe]


@dataclass
class PathStats:
    """Read-only summary of a camera path

    Attributes:
        keyframe_count: Number of keyframes
        duration: max_time - min_time in seconds
        min_time: Earliest timestamp (0 for an empty path)
        max_time: Latest timestamp (0 for an empty path)
    """
    keyframe_count: int
    duration: float
    min_time: float
    max_time: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'keyframes': self.keyframe_count,
            'duration': self.duration,
            'min_time': self.min_time,
            'max_time': self.max_time,
        }


def camera_path_from_dict(data: Any) -> CameraPath:
    """Convert a decoded JSON object into a CameraPath

    Raises:
        MalformedInput: If the object is not a keyframe collection
    """
    if not isinstance(data, dict):
        raise MalformedInput(
            f"Expected an object of keyframes, got {type(data).__name__}"
        )
    return {str(key): CameraKeyframe.from_dict(key, value) for key, value in data.items()}


def camera_path_to_dict(path: CameraPath) -> Dict[str, Any]:
    """Convert a CameraPath into its editor dict form"""
    return {key: keyframe.to_dict() for key, keyframe in path.items()}


def _require(fields, name, where):
    if name not in fields:
        raise MalformedInput(f"{where}: missing field '{name}'")
    return fields[name]


def _require_object(value, where):
    if not isinstance(value, dict):
        raise MalformedInput(f"{where}: expected an object, got {type(value).__name__}")
    return value


def _require_float(fields, name, where) -> float:
    value = _require(fields, name, where)
    # bool is an int subclass, JSON true/false is never a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedInput(f"{where}: field '{name}' must be a number, got {value!r}")
    # 1e400 decodes to inf, integers past the float range overflow
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise MalformedInput(f"{where}: field '{name}' must be a finite number, got {value!r}")
    return number


def _require_int(fields, name, where) -> int:
    value = _require(fields, name, where)
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedInput(f"{where}: field '{name}' must be an integer, got {value!r}")
    return value
