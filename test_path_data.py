"""Tests for the keyframe model, JSON codec and unit helpers."""

import json

import pytest

from conftest import make_keyframe
from core.errors import InvalidParameter, MalformedInput, SerializationFailure
from core.path_data import CameraKeyframe, PathStats, camera_path_from_dict
from core.serialization import parse_camera_path, serialize_camera_path, serialize_stats
from core.units import degrees_to_engine_units, frame_for, with_timestamp


def keyframe_dict(**overrides):
    data = {
        'FOV': 90.0, 'Frame': 0,
        'Position': {'X': 1.5, 'Y': -2.0, 'Z': 3.25},
        'Rotation': {'Pitch': 10, 'Roll': -5, 'Yaw': 16384},
        'Timestamp': 0.0, 'Weight': 1.0,
    }
    data.update(overrides)
    return data


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseCameraPath:
    def test_parses_all_fields(self):
        path = parse_camera_path(json.dumps({'cam0': keyframe_dict()}))
        kf = path['cam0']
        assert kf.fov == pytest.approx(90.0)
        assert kf.frame == 0
        assert (kf.position.x, kf.position.y, kf.position.z) == (1.5, -2.0, 3.25)
        assert (kf.rotation.pitch, kf.rotation.roll, kf.rotation.yaw) == (10, -5, 16384)
        assert kf.weight == pytest.approx(1.0)

    def test_integer_numbers_become_floats(self, two_keyframes_text):
        path = parse_camera_path(two_keyframes_text)
        assert isinstance(path['B'].position.x, float)
        assert isinstance(path['B'].timestamp, float)

    def test_empty_object_is_empty_path(self):
        assert parse_camera_path('{}') == {}

    def test_unknown_fields_ignored(self):
        path = parse_camera_path(json.dumps({'k': keyframe_dict(Note='hello')}))
        assert 'k' in path

    def test_invalid_json_raises(self):
        with pytest.raises(MalformedInput, match="Failed to parse JSON"):
            parse_camera_path('{not json')

    def test_top_level_must_be_object(self):
        with pytest.raises(MalformedInput, match="list"):
            parse_camera_path('[]')

    def test_missing_field_names_key_and_field(self):
        data = keyframe_dict()
        del data['Weight']
        with pytest.raises(MalformedInput, match="'k1'.*Weight"):
            parse_camera_path(json.dumps({'k1': data}))

    def test_missing_position_component(self):
        with pytest.raises(MalformedInput, match="Position.*'Z'"):
            parse_camera_path(json.dumps({'k': keyframe_dict(Position={'X': 0, 'Y': 0})}))

    def test_float_frame_rejected(self):
        with pytest.raises(MalformedInput, match="Frame"):
            parse_camera_path(json.dumps({'k': keyframe_dict(Frame=1.5)}))

    def test_float_rotation_rejected(self):
        rotation = {'Pitch': 0.5, 'Roll': 0, 'Yaw': 0}
        with pytest.raises(MalformedInput, match="Pitch"):
            parse_camera_path(json.dumps({'k': keyframe_dict(Rotation=rotation)}))

    def test_string_number_rejected(self):
        with pytest.raises(MalformedInput, match="FOV"):
            parse_camera_path(json.dumps({'k': keyframe_dict(FOV="90")}))

    def test_boolean_rejected_as_number(self):
        with pytest.raises(MalformedInput, match="Weight"):
            parse_camera_path(json.dumps({'k': keyframe_dict(Weight=True)}))

    def test_keyframe_must_be_object(self):
        with pytest.raises(MalformedInput, match="expected an object"):
            camera_path_from_dict({'k': 5})

    @pytest.mark.parametrize('literal', ['NaN', 'Infinity', '-Infinity'])
    def test_non_standard_number_literals_rejected(self, literal):
        text = '{"k": {"FOV": %s, "Frame": 0, "Position": {"X": 0, "Y": 0, "Z": 0}, '
        text += '"Rotation": {"Pitch": 0, "Roll": 0, "Yaw": 0}, "Timestamp": 0, "Weight": 1}}'
        with pytest.raises(MalformedInput, match=literal):
            parse_camera_path(text % literal)

    def test_overflowing_float_rejected(self):
        text = json.dumps({'k': keyframe_dict()}).replace('"Timestamp": 0.0', '"Timestamp": 1e400')
        with pytest.raises(MalformedInput, match="Timestamp.*finite"):
            parse_camera_path(text)

    def test_overflowing_integer_rejected(self):
        with pytest.raises(MalformedInput, match="Weight.*finite"):
            camera_path_from_dict({'k': keyframe_dict(Weight=10 ** 400)})


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class TestSerialize:
    def test_round_trip(self, two_keyframes):
        text = serialize_camera_path(two_keyframes)
        assert parse_camera_path(text) == two_keyframes

    def test_editor_field_names(self, two_keyframes):
        data = json.loads(serialize_camera_path(two_keyframes))
        assert set(data['A']) == {'FOV', 'Frame', 'Position', 'Rotation', 'Timestamp', 'Weight'}
        assert set(data['A']['Position']) == {'X', 'Y', 'Z'}
        assert set(data['A']['Rotation']) == {'Pitch', 'Roll', 'Yaw'}

    def test_pretty_printed_in_key_order(self, shuffled_path):
        text = serialize_camera_path(shuffled_path)
        assert text.startswith('{\n  "c": {')
        assert list(json.loads(text)) == ['c', 'a', 'b']

    def test_nan_is_serialization_failure(self):
        path = {'k': make_keyframe(fov=float('nan'))}
        with pytest.raises(SerializationFailure):
            serialize_camera_path(path)

    def test_stats_wire_names(self):
        stats = PathStats(keyframe_count=3, duration=2.0, min_time=0.5, max_time=2.5)
        assert json.loads(serialize_stats(stats)) == {
            'keyframes': 3, 'duration': 2.0, 'min_time': 0.5, 'max_time': 2.5,
        }

    def test_to_dict_from_dict(self):
        kf = make_keyframe(timestamp=1.5, x=1.0, y=2.0, z=3.0, pitch=7)
        assert CameraKeyframe.from_dict('k', kf.to_dict()) == kf


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------


class TestUnits:
    def test_one_degree_truncates(self):
        assert degrees_to_engine_units(1) == 182

    def test_negative_degrees_truncate_toward_zero(self):
        assert degrees_to_engine_units(-1) == -182

    def test_fractional_degrees(self):
        assert degrees_to_engine_units(0.5) == 91
        assert degrees_to_engine_units(90) == 16383

    def test_frame_for_whole_seconds(self):
        assert frame_for(0.0) == 0
        assert frame_for(1.0) == 30
        assert frame_for(-1.0) == -30

    def test_frame_for_halves_round_away_from_zero(self):
        assert frame_for(0.75) == 23
        assert frame_for(0.25) == 8
        assert frame_for(-0.75) == -23

    def test_frame_for_rejects_overflow(self):
        with pytest.raises(InvalidParameter, match="timestamp"):
            frame_for(1e308)
        with pytest.raises(InvalidParameter, match="timestamp"):
            frame_for(float('inf'))

    def test_degrees_reject_overflow(self):
        with pytest.raises(InvalidParameter, match="degrees"):
            degrees_to_engine_units(1e308)
        with pytest.raises(InvalidParameter, match="degrees"):
            degrees_to_engine_units(float('nan'))

    def test_with_timestamp_resyncs_frame(self):
        kf = make_keyframe(timestamp=0.0)
        moved = with_timestamp(kf, 2.0)
        assert moved.timestamp == 2.0
        assert moved.frame == 60
        assert kf.frame == 0
