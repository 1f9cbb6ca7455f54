"""Lightweight file index kept in the notebook's .zk directory."""

import hashlib
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List

import yaml

from .errors import IndexingError
from .file_system import FileSystemClient


logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.yaml"


def calculate_file_hash(content: bytes) -> str:
    """
    Calculate SHA-256 hash of content.

    Args:
        content: Raw file content

    Returns:
        str: SHA-256 hash in format "sha256:hexdigest"
    """
    return f"sha256:{hashlib.sha256(content).hexdigest()}"


@dataclass
class IndexStats:
    """Outcome of an indexing run."""

    added: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    unchanged: int = 0
    duration: float = 0.0

    @property
    def total(self) -> int:
        return len(self.added) + len(self.modified) + self.unchanged

    def __str__(self) -> str:
        return (
            f"Indexed {self.total} notes in {self.duration:.2f}s\n"
            f"  + {len(self.added)} added\n"
            f"  ~ {len(self.modified)} modified\n"
            f"  - {len(self.removed)} removed"
        )


class NoteIndex:
    """Tracks the notes of a notebook by path, modification time and hash."""

    def __init__(self, files: FileSystemClient, index_path: Path,
                 file_patterns: List[str], exclude_folders: List[str]):
        self.files = files
        self.index_path = Path(index_path)
        self.file_patterns = file_patterns
        self.exclude_folders = exclude_folders

    def load(self) -> Dict[str, Dict[str, Any]]:
        """Read the stored entries, keyed by path relative to the notebook root."""
        if not self.index_path.exists():
            return {}
        try:
            with open(self.index_path, 'r', encoding='utf-8') as f:
                entries = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise IndexingError(f"cannot read index {self.index_path}: {e}") from e
        if not isinstance(entries, dict):
            raise IndexingError(f"cannot read index {self.index_path}: not a mapping")
        return entries

    def save(self, entries: Dict[str, Dict[str, Any]]):
        try:
            with open(self.index_path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(entries, f, default_flow_style=False, sort_keys=True)
        except OSError as e:
            raise IndexingError(f"cannot write index {self.index_path}: {e}") from e

    def paths(self) -> List[str]:
        """Relative paths of the indexed notes, sorted."""
        return sorted(self.load())

    def update(self, force: bool = False, verbose: bool = False) -> IndexStats:
        """
        Bring the index in sync with the notes on disk.

        Args:
            force: Re-hash every note even if its modification time is unchanged
            verbose: Log every change at INFO level instead of DEBUG

        Returns:
            IndexStats describing the changes
        """
        start = time.monotonic()
        log = logger.info if verbose else logger.debug
        stats = IndexStats()

        previous = self.load()
        entries = {}

        try:
            files = self.files.list_files(
                file_patterns=self.file_patterns,
                exclude_folders=self.exclude_folders
            )
        except OSError as e:
            raise IndexingError(f"cannot list notes: {e}") from e

        for file_info in files:
            path = file_info['relative_path']
            modified_time = file_info['modified_time']
            entry = previous.pop(path, None)

            if entry and not force and entry.get('modified') == modified_time:
                entries[path] = entry
                stats.unchanged += 1
                continue

            try:
                content_hash = calculate_file_hash(self.files.read_file(file_info['path']))
            except OSError as e:
                raise IndexingError(f"cannot read note {path}: {e}") from e

            entries[path] = {'modified': modified_time, 'hash': content_hash}
            if entry is None:
                stats.added.append(path)
                log(f"Added: {path}")
            elif force or entry.get('hash') != content_hash:
                stats.modified.append(path)
                log(f"Modified: {path}")
            else:
                stats.unchanged += 1

        stats.removed = sorted(previous)
        for path in stats.removed:
            log(f"Removed: {path}")

        self.save(entries)
        stats.duration = time.monotonic() - start
        return stats
