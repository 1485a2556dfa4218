#!/usr/bin/env python3
"""
JSON Reader Module
Reads camera path files saved by the path editor
"""

from core.path_data import CameraPath
from core.serialization import parse_camera_path

from .base_reader import BaseReader


class CameraJSONReader(BaseReader):
    """Reader for camera path JSON (object of keyframe id -> keyframe)"""

    def get_format_name(self):
        return "Camera JSON"

    def parse(self, text: str) -> CameraPath:
        return parse_camera_path(text)
