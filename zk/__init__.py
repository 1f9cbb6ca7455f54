"""zk - notebook resolution and command dispatch for a plain-text knowledge base."""

__version__ = "0.1.0"

from .config import Config
from .container import Container
from .dirs import Dirs, parse_dirs, notebook_search_dirs
from .notebook import Notebook
from .aliases import AliasDispatcher, Invocation

__all__ = [
    "Config",
    "Container",
    "Dirs",
    "parse_dirs",
    "notebook_search_dirs",
    "Notebook",
    "AliasDispatcher",
    "Invocation",
]
