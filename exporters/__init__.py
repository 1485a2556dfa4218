#!/usr/bin/env python3
"""
Exporters Module
Camera path file exporters
"""

from .base_exporter import BaseExporter
from .json_exporter import CameraJSONExporter

__all__ = [
    'BaseExporter',
    'CameraJSONExporter',
]
