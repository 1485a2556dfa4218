#!/usr/bin/env python3
"""
JSON Exporter Module
Writes camera paths in the path editor's JSON format
"""

from config import OUTPUT_CONFIG
from core.serialization import serialize_camera_path

from .base_exporter import BaseExporter


class CameraJSONExporter(BaseExporter):
    """Camera path JSON exporter

    Output is pretty-printed and keeps the keyframe order of the path.
    """

    def get_format_name(self):
        return "Camera JSON"

    def export(self, path, output_file):
        """Export to camera path JSON

        Args:
            path: CameraPath to write
            output_file: Destination .json file

        Returns:
            dict: Export results with keys:
                - 'success': bool
                - 'files': List with the written file path
                - 'message': Status message

        Raises:
            SerializationFailure: If the path holds values JSON cannot represent
            OSError: If the file cannot be written
        """
        output_path = self.validate_output_path(output_file)
        text = serialize_camera_path(path, indent=OUTPUT_CONFIG['indent'])

        try:
            output_path.write_text(text, encoding=OUTPUT_CONFIG['encoding'])
        except OSError as e:
            raise OSError(f"Failed to write file {output_path}: {e}") from e

        self.log(f"  Wrote {len(path)} keyframes to {output_path}")
        return {
            'success': True,
            'files': [str(output_path)],
            'message': f"Exported {len(path)} keyframes",
        }
