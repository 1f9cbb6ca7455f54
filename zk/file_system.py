"""Local file system operations for notebooks."""

from pathlib import Path
from typing import List, Dict, Any
import logging


logger = logging.getLogger(__name__)


class FileSystemClient:
    """Client for file system operations inside a notebook directory."""

    def __init__(self, root_path: str):
        """
        Initialize file system client.

        Args:
            root_path: Path to the notebook root directory
        """
        self.root_path = Path(root_path).resolve()
        if not self.root_path.is_dir():
            raise ValueError(f"Notebook path is not a directory: {root_path}")

    def list_files(self, file_patterns: List[str] = None,
                   exclude_folders: List[str] = None) -> List[Dict[str, Any]]:
        """
        List files under the notebook root, recursively.

        Args:
            file_patterns: List of glob patterns to match files (e.g., ["*.md"])
            exclude_folders: List of folder names to exclude from traversal

        Returns:
            List of file metadata dictionaries, sorted by relative path
        """
        files = {}

        try:
            for pattern in (file_patterns or ['*']):
                for file_path in self.root_path.rglob(pattern):
                    if not file_path.is_file() or not self._should_include_file(file_path, exclude_folders):
                        continue
                    relative_path = file_path.relative_to(self.root_path).as_posix()
                    if relative_path in files:
                        continue
                    stat = file_path.stat()
                    files[relative_path] = {
                        'path': str(file_path),
                        'name': file_path.name,
                        'relative_path': relative_path,
                        'size': stat.st_size,
                        'modified_time': stat.st_mtime
                    }
        except OSError as e:
            logger.error(f"Error listing files in {self.root_path}: {e}")
            raise

        logger.debug(f"Found {len(files)} files in {self.root_path}")
        return [files[key] for key in sorted(files)]

    def _should_include_file(self, file_path: Path, exclude_folders: List[str]) -> bool:
        """
        Check if a file should be included based on exclude folder rules.

        Hidden folders are always skipped, which keeps .zk out of the listing.
        """
        relative_path = file_path.relative_to(self.root_path)
        for part in relative_path.parts[:-1]:  # Exclude the filename itself
            if part.startswith('.') or (exclude_folders and part in exclude_folders):
                return False
        return True

    def read_file(self, file_path: str) -> bytes:
        """
        Read file content from local file system.

        Args:
            file_path: Path to the file

        Returns:
            File content as bytes
        """
        try:
            content = Path(file_path).read_bytes()
            logger.debug(f"Read {len(content)} bytes from {file_path}")
            return content
        except OSError as e:
            logger.error(f"Error reading file {file_path}: {e}")
            raise
