"""Tests for the file system module."""

import pytest

from zk.file_system import FileSystemClient


class TestFileSystemClient:
    """Test the FileSystemClient class."""

    def test_init_valid_path(self, temp_notebook_dir):
        """Test initialization with a valid notebook path."""
        client = FileSystemClient(str(temp_notebook_dir))
        assert client.root_path == temp_notebook_dir.resolve()

    def test_init_invalid_path(self):
        """Test initialization with non-existent path."""
        with pytest.raises(ValueError, match="Notebook path is not a directory"):
            FileSystemClient("/non/existent/path")

    def test_init_file_not_directory(self, temp_notebook_dir):
        """Test initialization with a file instead of directory."""
        test_file = temp_notebook_dir / "test.md"
        test_file.write_text("test")

        with pytest.raises(ValueError, match="Notebook path is not a directory"):
            FileSystemClient(str(test_file))

    def test_list_files_recursive(self, temp_notebook_dir, create_test_files):
        """Test listing files in the root and in subdirectories."""
        create_test_files({"root.md": "Root"})
        create_test_files({"2024-01-01.md": "Day 1", "2024-01-02.md": "Day 2"}, "journal")

        client = FileSystemClient(str(temp_notebook_dir))
        files = client.list_files(file_patterns=["*.md"])

        assert [f['relative_path'] for f in files] == [
            "journal/2024-01-01.md",
            "journal/2024-01-02.md",
            "root.md",
        ]
        assert files[-1]['name'] == "root.md"
        assert files[-1]['size'] == len("Root")

    def test_hidden_folders_skipped(self, temp_notebook_dir, create_test_files):
        """Test that .zk and other hidden folders are never listed."""
        create_test_files({"visible.md": "Visible"})
        create_test_files({"secret.md": "Hidden"}, ".obsidian")

        client = FileSystemClient(str(temp_notebook_dir))
        files = client.list_files()

        names = [f['name'] for f in files]
        assert "visible.md" in names
        assert "secret.md" not in names
        assert "config.yaml" not in names

    def test_exclude_folders_filtering(self, temp_notebook_dir, create_test_files):
        """Test that excluded folders are properly filtered."""
        create_test_files({"visible.md": "Visible"})
        create_test_files({"template.md": "Should be excluded"}, "templates")

        client = FileSystemClient(str(temp_notebook_dir))
        files = client.list_files(file_patterns=["*.md"], exclude_folders=["templates"])

        assert [f['name'] for f in files] == ["visible.md"]

    def test_file_pattern_matching(self, temp_notebook_dir, create_test_files):
        """Test that only matching files are listed, without duplicates."""
        create_test_files({"note.md": "Markdown", "text.txt": "Text", "image.png": "PNG"})

        client = FileSystemClient(str(temp_notebook_dir))
        files = client.list_files(file_patterns=["*.md", "*.txt", "note.*"])

        assert [f['name'] for f in files] == ["note.md", "text.txt"]

    def test_read_file(self, temp_notebook_dir, create_test_files):
        """Test reading raw file content."""
        (path,) = create_test_files({"unicode.md": "Unicode 测试 🎉"})

        client = FileSystemClient(str(temp_notebook_dir))

        assert client.read_file(str(path)) == "Unicode 测试 🎉".encode('utf-8')

    def test_read_missing_file(self, temp_notebook_dir):
        """Test that read errors propagate."""
        client = FileSystemClient(str(temp_notebook_dir))

        with pytest.raises(FileNotFoundError):
            client.read_file(str(temp_notebook_dir / "missing.md"))
