#!/usr/bin/env python3
"""
Base Reader Module
Abstract interface for reading camera path files
"""

from abc import ABC, abstractmethod
from pathlib import Path

from core.path_data import CameraPath


class BaseReader(ABC):
    """Abstract base class for camera file readers

    Provides a consistent interface for loading camera paths from disk.
    Format-specific readers implement get_format_name() and parse().
    """

    def __init__(self, file_path, progress_callback=None):
        """Initialize reader with file path

        Args:
            file_path: Path to the camera file
            progress_callback: Optional function to call for progress updates
                              Signature: callback(message: str) -> None
        """
        self.file_path = Path(file_path)
        self.progress_callback = progress_callback

    def log(self, message):
        """Send progress/status message"""
        if self.progress_callback:
            self.progress_callback(message)
        print(message)

    @abstractmethod
    def get_format_name(self) -> str:
        """Return human-readable format name (e.g., 'Camera JSON')"""
        pass

    @abstractmethod
    def parse(self, text: str) -> CameraPath:
        """Parse file contents into a CameraPath

        Raises:
            MalformedInput: If the contents are not a keyframe collection
        """
        pass

    def read_text(self, encoding='utf-8') -> str:
        """Read the raw file contents

        Raises:
            OSError: If the file cannot be read (message names the path)
        """
        try:
            return self.file_path.read_text(encoding=encoding)
        except OSError as e:
            raise OSError(f"Failed to read file {self.file_path}: {e}") from e

    def read(self) -> CameraPath:
        """Read and parse the file

        Returns:
            CameraPath: Parsed keyframe collection
        """
        path = self.parse(self.read_text())
        self.log(f"  Loaded {len(path)} keyframes from {self.file_path.name} ({self.get_format_name()})")
        return path
