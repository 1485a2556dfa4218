#!/usr/bin/env python3
"""
Camera Path Converter - Main Orchestrator Module
Text-in/text-out camera path transforms and file-to-file conversion

The string methods mirror the path editor's command surface: each takes the
serialized keyframe collection plus parameters and returns serialized text.
Every call parses its own copy, so calls share no state.
"""

from pathlib import Path

from core import path_ops, transforms
from core.registry import apply_transform
from core.serialization import parse_camera_path, serialize_camera_path, serialize_stats
from exporters.json_exporter import CameraJSONExporter
from readers import create_reader


class CameraPathConverter:
    """Camera path transform facade

    - String API: transform_* / reverse_path / smooth_path / get_path_stats
    - Named dispatch: apply(operation, data, **params)
    - File workflow: convert_file() reads, transforms and writes a camera file
    """

    def __init__(self, progress_callback=None):
        """Initialize converter

        Args:
            progress_callback: Optional function to call for progress updates
                              Signature: callback(message: str) -> None
        """
        self.progress_callback = progress_callback

    def log(self, message):
        """Send progress updates to callback"""
        if self.progress_callback:
            self.progress_callback(message)
        print(message)

    def _run(self, data, transform, *args, **kwargs):
        path = parse_camera_path(data)
        return serialize_camera_path(transform(path, *args, **kwargs))

    # FOV

    def transform_fov_add(self, data, add_value):
        return self._run(data, transforms.fov_add, add_value)

    def transform_fov_multiply(self, data, multiplier):
        return self._run(data, transforms.fov_multiply, multiplier)

    def transform_fov_set(self, data, fov_value):
        return self._run(data, transforms.fov_set, fov_value)

    # Position

    def transform_position_offset(self, data, x, y, z):
        return self._run(data, transforms.position_offset, x, y, z)

    def transform_position_scale(self, data, x, y, z):
        return self._run(data, transforms.position_scale, x, y, z)

    # Rotation

    def transform_rotation_offset(self, data, pitch, yaw, roll, use_degrees=False):
        return self._run(data, transforms.rotation_offset, pitch, yaw, roll, use_degrees)

    # Mirror

    def transform_mirror(self, data, axis, flip_pitch=False, flip_yaw=False,
                         flip_roll=False, bounded=False):
        return self._run(data, path_ops.mirror, axis, flip_pitch, flip_yaw, flip_roll, bounded)

    # Time

    def transform_speed(self, data, multiplier):
        return self._run(data, transforms.speed, multiplier)

    def transform_time_offset(self, data, offset_seconds):
        return self._run(data, transforms.time_offset, offset_seconds)

    # Path operations

    def reverse_path(self, data):
        return self._run(data, path_ops.reverse)

    def smooth_path(self, data, window_size):
        return self._run(data, path_ops.smooth, window_size)

    def get_path_stats(self, data):
        """Statistics summary as compact JSON

        Returns:
            str: {"keyframes", "duration", "min_time", "max_time"}
        """
        return serialize_stats(path_ops.path_stats(parse_camera_path(data)))

    def apply(self, operation, data, **params):
        """Run a registered operation by name on serialized text

        Raises:
            InvalidParameter: Unknown operation or bad parameters
            MalformedInput: If data is not a keyframe collection
        """
        path = parse_camera_path(data)
        return serialize_camera_path(apply_transform(operation, path, **params))

    def convert_file(self, input_file, output_file, operation, **params):
        """Load a camera file, apply one operation and save the result

        Args:
            input_file: Camera file to read (.json)
            output_file: Destination file (may equal input_file)
            operation: Registered operation name
            **params: Operation parameters

        Returns:
            dict: Results with keys:
                - 'success': bool
                - 'output_file': Path written (on success)
                - 'keyframes': Number of keyframes written (on success)
                - 'message': Summary message
        """
        try:
            self.log(f"\n{'='*60}")
            self.log(f"Camera Path Tool - {operation}")
            self.log(f"{'='*60}")
            self.log(f"Input: {input_file}")
            self.log(f"Output: {output_file}")
            if params:
                self.log(f"Parameters: {', '.join(f'{k}={v}' for k, v in params.items())}")
            self.log(f"{'='*60}\n")

            self.log("Step 1/3: Reading camera file...")
            reader = create_reader(input_file, self.progress_callback)
            path = reader.read()

            self.log(f"\nStep 2/3: Applying {operation}...")
            result_path = apply_transform(operation, path, **params)

            self.log("\nStep 3/3: Writing camera file...")
            exporter = CameraJSONExporter(self.progress_callback)
            export_result = exporter.export(result_path, output_file)
            self.log(exporter.get_export_summary(export_result))

            message = f"{operation} applied to {len(result_path)} keyframes"
            self.log(f"\n✓ {message}")
            return {
                'success': export_result['success'],
                'output_file': str(Path(output_file)),
                'keyframes': len(result_path),
                'message': message,
            }

        except (ValueError, OSError) as e:
            self.log(f"\nERROR: {e}")
            return {
                'success': False,
                'message': f"Conversion failed: {e}"
            }

    def read_stats(self, input_file):
        """Statistics for a camera file

        Returns:
            PathStats
        """
        reader = create_reader(input_file, self.progress_callback)
        return path_ops.path_stats(reader.read())
