"""Tests for the note index."""

import os
import pytest
import yaml

from zk.errors import IndexingError
from zk.file_system import FileSystemClient
from zk.index import IndexStats, NoteIndex, calculate_file_hash

# Test constants
SHA256_HASH_STRING_LENGTH = 71  # "sha256:" (7) + 64 hex chars


def test_calculate_file_hash():
    """Test hashing simple content."""
    result = calculate_file_hash(b"Hello, world!")
    assert result == "sha256:315f5bdb76d078c43b8ac0064e4a0164612b1fce77c869345bfc94c75894edd3"
    assert len(calculate_file_hash(b"")) == SHA256_HASH_STRING_LENGTH


class TestIndexStats:
    """Test the IndexStats summary."""

    def test_total_and_str(self):
        stats = IndexStats(added=["a.md"], modified=["b.md", "c.md"], removed=["d.md"],
                           unchanged=4, duration=0.5)

        assert stats.total == 7
        assert str(stats) == (
            "Indexed 7 notes in 0.50s\n"
            "  + 1 added\n"
            "  ~ 2 modified\n"
            "  - 1 removed"
        )


class TestNoteIndex:
    """Test the NoteIndex class."""

    @pytest.fixture
    def note_index(self, temp_notebook_dir):
        return NoteIndex(
            files=FileSystemClient(str(temp_notebook_dir)),
            index_path=temp_notebook_dir / ".zk" / "index.yaml",
            file_patterns=["*.md"],
            exclude_folders=["templates"],
        )

    def _touch(self, path, offset):
        stat = path.stat()
        os.utime(path, (stat.st_atime, stat.st_mtime + offset))

    def test_first_run_adds_everything(self, note_index, create_test_files):
        """Test that every note is added on an empty index."""
        create_test_files({"one.md": "One", "two.md": "Two", "skip.txt": "Not a note"})
        create_test_files({"template.md": "Ignored"}, "templates")

        stats = note_index.update()

        assert stats.added == ["one.md", "two.md"]
        assert stats.modified == []
        assert stats.removed == []
        assert note_index.paths() == ["one.md", "two.md"]

    def test_entries_are_saved(self, note_index, create_test_files, temp_notebook_dir):
        """Test the on-disk format of the index."""
        create_test_files({"one.md": "One"})

        note_index.update()

        with open(temp_notebook_dir / ".zk" / "index.yaml", encoding='utf-8') as f:
            entries = yaml.safe_load(f)
        assert entries["one.md"]["hash"] == calculate_file_hash(b"One")
        assert "modified" in entries["one.md"]

    def test_unchanged_run(self, note_index, create_test_files):
        """Test that a second run finds nothing new."""
        create_test_files({"one.md": "One", "two.md": "Two"})
        note_index.update()

        stats = note_index.update()

        assert stats.added == [] and stats.modified == [] and stats.removed == []
        assert stats.unchanged == 2

    def test_modified_and_removed(self, note_index, create_test_files):
        """Test detection of edited and deleted notes."""
        one, two, three = create_test_files({"one.md": "One", "two.md": "Two", "three.md": "Three"})
        note_index.update()

        one.write_text("One, edited", encoding='utf-8')
        self._touch(one, 10)
        self._touch(two, 10)  # Touched but same content
        three.unlink()

        stats = note_index.update()

        assert stats.modified == ["one.md"]
        assert stats.removed == ["three.md"]
        assert stats.unchanged == 1
        assert note_index.paths() == ["one.md", "two.md"]

    def test_force(self, note_index, create_test_files):
        """Test that force re-indexes every note."""
        create_test_files({"one.md": "One", "two.md": "Two"})
        note_index.update()

        stats = note_index.update(force=True)

        assert stats.modified == ["one.md", "two.md"]
        assert stats.unchanged == 0

    def test_corrupt_index(self, note_index, temp_notebook_dir):
        """Test error when the index file is not a mapping."""
        (temp_notebook_dir / ".zk" / "index.yaml").write_text("- a\n- b\n", encoding='utf-8')

        with pytest.raises(IndexingError, match="not a mapping"):
            note_index.update()
