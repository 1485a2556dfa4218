#!/usr/bin/env python3
"""
Base Exporter Module
Abstract base class ensuring consistent interface across all exporters
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.path_data import CameraPath


class BaseExporter(ABC):
    """Abstract base class for camera path exporters

    Exporters receive an in-memory CameraPath and write it to disk.
    """

    def __init__(self, progress_callback=None):
        """Initialize exporter

        Args:
            progress_callback: Optional function to call for progress updates
                              Signature: callback(message: str) -> None
        """
        self.progress_callback = progress_callback

    def log(self, message):
        """Send progress/status message

        Args:
            message: Message to log
        """
        if self.progress_callback:
            self.progress_callback(message)
        print(message)

    @abstractmethod
    def export(self, path: 'CameraPath', output_file):
        """Write a camera path to output_file

        Args:
            path: Camera path to write
            output_file: Output file path (Path object or string)

        Returns:
            dict: Export results with at least:
                  - 'success': bool
                  - 'files': list of created file paths
                  - 'message': str status message
        """
        pass

    @abstractmethod
    def get_format_name(self):
        """Return human-readable format name"""
        pass

    def validate_output_path(self, output_file):
        """Create the output file's directory if needed

        Args:
            output_file: File path about to be written

        Returns:
            Path: Validated Path object

        Raises:
            ValueError: If the directory cannot be created
        """
        path = Path(output_file)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ValueError(f"Cannot create output directory {path.parent}: {e}") from e

        if path.is_dir():
            raise ValueError(f"Output path is a directory: {path}")

        return path

    def get_export_summary(self, result):
        """Generate human-readable summary of export results

        Args:
            result: Export result dict from export() method

        Returns:
            str: Formatted summary text
        """
        lines = [f"✓ {self.get_format_name()} Export Complete"]

        files = result.get('files', [])
        lines.append(f"  Files created: {len(files)}")
        for file_path in files:
            lines.append(f"    - {Path(file_path).name}")

        if 'message' in result:
            lines.append(f"  {result['message']}")

        return "\n".join(lines)
