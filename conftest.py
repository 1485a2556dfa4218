import json

import pytest

from core.path_data import CameraKeyframe, Position, Rotation
from core.units import frame_for


def make_keyframe(timestamp=0.0, x=0.0, y=0.0, z=0.0, fov=90.0,
                  pitch=0, roll=0, yaw=0, weight=1.0, frame=None):
    return CameraKeyframe(
        fov=fov,
        frame=frame_for(timestamp) if frame is None else frame,
        position=Position(x=x, y=y, z=z),
        rotation=Rotation(pitch=pitch, roll=roll, yaw=yaw),
        timestamp=timestamp,
        weight=weight,
    )


@pytest.fixture
def two_keyframes():
    """A at the origin at t=0, B ten units along X at t=1"""
    return {
        'A': make_keyframe(timestamp=0.0, x=0.0),
        'B': make_keyframe(timestamp=1.0, x=10.0),
    }


@pytest.fixture
def two_keyframes_text():
    return json.dumps({
        'A': {'FOV': 90, 'Frame': 0, 'Position': {'X': 0, 'Y': 0, 'Z': 0},
              'Rotation': {'Pitch': 0, 'Roll': 0, 'Yaw': 0}, 'Timestamp': 0, 'Weight': 1},
        'B': {'FOV': 90, 'Frame': 30, 'Position': {'X': 10, 'Y': 0, 'Z': 0},
              'Rotation': {'Pitch': 0, 'Roll': 0, 'Yaw': 0}, 'Timestamp': 1, 'Weight': 1},
    })


@pytest.fixture
def shuffled_path():
    """Three keyframes whose key order differs from their time order"""
    return {
        'c': make_keyframe(timestamp=2.0, x=9.0, fov=60.0, yaw=300),
        'a': make_keyframe(timestamp=0.0, x=0.0, fov=90.0, yaw=100),
        'b': make_keyframe(timestamp=1.0, x=3.0, fov=90.0, yaw=200),
    }
