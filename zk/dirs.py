"""Pre-parsing of directory flags and notebook candidate lookup."""

import os
import logging
from dataclasses import dataclass, replace
from typing import List, Mapping, Optional, Tuple

from .errors import MissingFlagArgument, PathResolutionError, WorkingDirectoryError


logger = logging.getLogger(__name__)

NOTEBOOK_DIR_ENV = "ZK_NOTEBOOK_DIR"

NOTEBOOK_DIR_FLAG = "--notebook-dir"
WORKING_DIR_FLAG = "--working-dir"
WORKING_DIR_SHORT_FLAG = "-W"


@dataclass(frozen=True)
class Dirs:
    """A (notebook directory, working directory) pair.

    Empty strings mean the directory is not resolved yet.
    """

    notebook_dir: str = ""
    working_dir: str = ""


def _abspath(path: str) -> str:
    try:
        return os.path.abspath(path)
    except OSError as e:
        raise PathResolutionError(f"cannot resolve path {path}: {e}") from e


def _find_flag(long: str, short: Optional[str], args: List[str]) -> Tuple[str, List[str]]:
    """
    Extract the first occurrence of a path-valued flag.

    Args:
        long: Long form of the flag, also accepted as ``--flag=value``
        short: Optional short form of the flag
        args: Arguments to scan

    Returns:
        Tuple of (absolute path or "", remaining arguments)

    Raises:
        MissingFlagArgument: If the flag is the last argument
    """
    names = {long, short} if short else {long}
    prefix = long + "="

    for i, arg in enumerate(args):
        if arg in names:
            if i + 1 >= len(args):
                raise MissingFlagArgument(arg)
            return _abspath(args[i + 1]), args[:i] + args[i + 2:]
        if arg.startswith(prefix):
            value = arg[len(prefix):]
            if not value:
                raise MissingFlagArgument(long)
            return _abspath(value), args[:i] + args[i + 1:]

    return "", list(args)


def parse_dirs(args: List[str]) -> Tuple[Dirs, List[str]]:
    """
    Return the paths given with --notebook-dir and --working-dir.

    These flags are read before the command parser runs, since the
    notebook is needed to resolve aliases.

    Args:
        args: Raw command line arguments, without the program name

    Returns:
        Tuple of (Dirs, remaining arguments)
    """
    notebook_dir, args = _find_flag(NOTEBOOK_DIR_FLAG, None, args)
    working_dir, args = _find_flag(WORKING_DIR_FLAG, WORKING_DIR_SHORT_FLAG, args)
    return Dirs(notebook_dir=notebook_dir, working_dir=working_dir), args


def notebook_search_dirs(dirs: Dirs, environ: Optional[Mapping[str, str]] = None) -> List[Dirs]:
    """
    Return the places where to look for a notebook, by order of precedence.

    1. --notebook-dir flag
    2. current working directory
    3. ZK_NOTEBOOK_DIR environment variable

    Args:
        dirs: Directories read from the command line
        environ: Environment to read the override from, defaults to os.environ

    Returns:
        Candidates to try in order; the first one that opens wins
    """
    if environ is None:
        environ = os.environ

    try:
        cwd = os.getcwd()
    except OSError as e:
        raise WorkingDirectoryError(str(e)) from e

    # Only check the given directory, so "notebook not found" names it.
    if dirs.notebook_dir:
        return [replace(dirs, working_dir=dirs.working_dir or cwd)]

    working_dir = dirs.working_dir or cwd
    candidates = [Dirs(notebook_dir=working_dir, working_dir=working_dir)]

    env_dir = environ.get(NOTEBOOK_DIR_ENV, "")
    if env_dir:
        candidates.append(Dirs(notebook_dir=env_dir, working_dir=dirs.working_dir or env_dir))

    logger.debug(f"Notebook candidates: {candidates}")
    return candidates
