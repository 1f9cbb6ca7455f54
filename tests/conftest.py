"""Test configuration and fixtures for pytest."""

import sys
from pathlib import Path
from typing import Dict
import pytest

# Add the project root to path so we can import zk without installing it
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from zk.container import Container
from zk.dirs import Dirs
from zk.notebook import Notebook


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the user's zk environment and global config."""
    for name in ("ZK_NOTEBOOK_DIR", "ZK_RUNNING_ALIAS", "ZK_SHELL", "ZK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))


@pytest.fixture
def temp_notebook_dir(tmp_path):
    """Create a notebook with a couple of folders."""
    notebook_path = tmp_path / "notebook"
    Notebook.init(str(notebook_path))
    (notebook_path / "journal").mkdir()
    (notebook_path / "ideas").mkdir()
    return notebook_path


@pytest.fixture
def write_notebook_config(temp_notebook_dir):
    """Helper fixture replacing the notebook's .zk/config.yaml."""
    def _write(content: str):
        config_path = temp_notebook_dir / ".zk" / "config.yaml"
        config_path.write_text(content, encoding='utf-8')
        return config_path

    return _write


@pytest.fixture
def create_test_files(temp_notebook_dir):
    """Helper fixture to create notes in the notebook."""
    def _create_files(files: Dict[str, str], folder_path: str = ""):
        target_dir = temp_notebook_dir / folder_path
        target_dir.mkdir(parents=True, exist_ok=True)
        created_files = []

        for filename, content in files.items():
            file_path = target_dir / filename
            file_path.write_text(content, encoding='utf-8')
            created_files.append(file_path)

        return created_files

    return _create_files


@pytest.fixture
def bound_container(temp_notebook_dir):
    """Container with the temporary notebook as current notebook."""
    container = Container()
    container.set_current_notebook([Dirs(str(temp_notebook_dir), str(temp_notebook_dir))])
    return container
