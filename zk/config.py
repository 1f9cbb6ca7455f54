"""Configuration management for zk."""

import os
import copy
import yaml
from pathlib import Path
from typing import Dict, Any, List, Mapping, Optional
from dataclasses import dataclass, field

from .errors import ConfigError

# Default configuration constants
DEFAULT_NOTE_EXTENSION = "md"
CONFIG_FILENAME = "config.yaml"


def global_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Path of the user-wide configuration file.

    Args:
        environ: Environment to read XDG_CONFIG_HOME from, defaults to os.environ

    Returns:
        Path to $XDG_CONFIG_HOME/zk/config.yaml (~/.config when unset)
    """
    if environ is None:
        environ = os.environ
    config_home = environ.get('XDG_CONFIG_HOME') or str(Path.home() / '.config')
    return Path(config_home) / 'zk' / CONFIG_FILENAME


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"{path}: {e}") from e

    if settings is None:
        return {}
    if not isinstance(settings, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return settings


def _section(settings: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = settings[name] or {}
    if not isinstance(section, dict):
        raise ConfigError(f"{name}: expected a mapping")
    return section


@dataclass
class Config:
    """Global or notebook configuration."""

    # Note settings
    note_extension: str = DEFAULT_NOTE_EXTENSION
    ignore_folders: List[str] = field(default_factory=lambda: [".git"])

    # Shell used to run aliases, empty to use $SHELL
    shell: str = ""

    # Alias name -> shell command
    aliases: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """
        Load the global configuration.

        Args:
            path: Configuration file, defaults to global_config_path()

        Returns:
            Config with defaults for anything the file does not set
        """
        config = cls()
        path = Path(path) if path is not None else global_config_path()
        if path.exists():
            config._load_settings(_read_yaml(path))
        return config

    def merged_with(self, path: Path) -> "Config":
        """
        Return a copy of this configuration with another file applied on top.

        Args:
            path: Configuration file to apply, ignored if missing
        """
        config = copy.deepcopy(self)
        path = Path(path)
        if path.exists():
            config._load_settings(_read_yaml(path))
        return config

    def _load_settings(self, settings: Dict[str, Any]):
        """Load settings from YAML configuration."""
        if 'note' in settings:
            note = _section(settings, 'note')
            self.note_extension = str(note.get('extension', self.note_extension)).lstrip('.')
            if 'ignore' in note:
                ignore = note['ignore'] or []
                if not isinstance(ignore, list):
                    raise ConfigError("note.ignore: expected a list of folder names")
                self.ignore_folders = [str(folder) for folder in ignore]

        if 'tool' in settings:
            tool = _section(settings, 'tool')
            self.shell = tool.get('shell', self.shell) or ""

        if 'alias' in settings:
            aliases = _section(settings, 'alias')
            # Aliases from a notebook extend the global ones.
            for name, command in aliases.items():
                self.aliases[str(name)] = str(command)

    @property
    def file_patterns(self) -> List[str]:
        return [f"*.{self.note_extension}"]
