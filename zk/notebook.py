"""Notebooks: directories marked by a .zk folder."""

import os
import logging
from pathlib import Path
from typing import List, Optional

from .config import Config, CONFIG_FILENAME
from .errors import NotebookExists, NotebookNotFound
from .file_system import FileSystemClient
from .index import INDEX_FILENAME, IndexStats, NoteIndex


logger = logging.getLogger(__name__)

NOTEBOOK_MARKER = ".zk"

STARTER_CONFIG = """\
# zk notebook configuration

note:
  # Extension of the note files to index.
  extension: md
  # Folders skipped when indexing, hidden folders are always skipped.
  ignore: []

tool:
  # Shell used to run aliases, defaults to $SHELL.
  # shell: /bin/bash

# Aliases are run as shell commands from the notebook root.
# Arguments given to the alias are available as $@.
alias:
  # ls: "zk list $@"
"""


def find_notebook_root(path: str) -> Optional[Path]:
    """
    Find the closest directory containing a .zk folder.

    Args:
        path: Directory to start from

    Returns:
        The notebook root, or None if neither path nor a parent is one
    """
    current = Path(os.path.abspath(path))
    for candidate in [current] + list(current.parents):
        if (candidate / NOTEBOOK_MARKER).is_dir():
            return candidate
    return None


class Notebook:
    """A notebook opened from disk."""

    def __init__(self, path: Path, config: Config):
        self.path = str(path)
        self.config = config
        self._index = None

    @classmethod
    def open(cls, path: str, global_config: Optional[Config] = None) -> "Notebook":
        """
        Open the notebook containing path.

        Args:
            path: Notebook directory or any directory inside it
            global_config: User-wide configuration the notebook's is merged over

        Raises:
            NotebookNotFound: If no .zk folder is found in path or its parents
        """
        root = find_notebook_root(path)
        if root is None:
            raise NotebookNotFound(f"no notebook found in {path} or a parent directory")

        base = global_config if global_config is not None else Config()
        config = base.merged_with(root / NOTEBOOK_MARKER / CONFIG_FILENAME)
        logger.debug(f"Opened notebook at {root}")
        return cls(root, config)

    @staticmethod
    def init(path: str) -> Path:
        """
        Create a new notebook in path.

        Args:
            path: Directory to turn into a notebook, created if missing

        Returns:
            Path of the new notebook root

        Raises:
            NotebookExists: If path is already a notebook root
        """
        root = Path(os.path.abspath(path))
        marker = root / NOTEBOOK_MARKER
        if marker.exists():
            raise NotebookExists(f"a notebook already exists in {root}")

        marker.mkdir(parents=True)
        (marker / CONFIG_FILENAME).write_text(STARTER_CONFIG, encoding='utf-8')
        logger.info(f"Created notebook at {root}")
        return root

    @property
    def note_index(self) -> NoteIndex:
        if self._index is None:
            self._index = NoteIndex(
                files=FileSystemClient(self.path),
                index_path=Path(self.path) / NOTEBOOK_MARKER / INDEX_FILENAME,
                file_patterns=self.config.file_patterns,
                exclude_folders=self.config.ignore_folders,
            )
        return self._index

    def index(self, force: bool = False, verbose: bool = False) -> IndexStats:
        """Refresh the note index and return what changed."""
        return self.note_index.update(force=force, verbose=verbose)

    def note_paths(self) -> List[str]:
        """Absolute paths of the indexed notes."""
        return [os.path.join(self.path, p) for p in self.note_index.paths()]
