#!/usr/bin/env python3
"""
Readers Module
Camera path file readers
"""

from pathlib import Path

from config import JSON_EXTENSIONS, SUPPORTED_EXTENSIONS

from .base_reader import BaseReader
from .json_reader import CameraJSONReader


def create_reader(input_file, progress_callback=None):
    """Factory function to create appropriate reader based on file extension

    Args:
        input_file: Path to input camera file
        progress_callback: Optional progress callback passed to the reader

    Returns:
        BaseReader: Reader instance for the file

    Raises:
        ValueError: If file extension is not supported
    """
    ext = Path(input_file).suffix.lower()

    if ext in JSON_EXTENSIONS:
        return CameraJSONReader(input_file, progress_callback)
    raise ValueError(
        f"Unsupported file format: {ext}\n"
        f"Supported formats: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
    )


def is_supported_format(input_file):
    """Check if a file has a supported format

    Args:
        input_file: Path to input camera file

    Returns:
        bool: True if format is supported
    """
    return Path(input_file).suffix.lower() in SUPPORTED_EXTENSIONS


__all__ = [
    'BaseReader',
    'CameraJSONReader',
    'create_reader',
    'is_supported_format',
]
