#!/usr/bin/env python3
"""Main entry point for the zk command."""

import logging
import os
import sys
from typing import List, Optional

import click

from .aliases import AliasDispatcher, Invocation
from .cli import run_command
from .config import Config
from .container import Container
from .dirs import notebook_search_dirs, parse_dirs
from .errors import AliasNonZeroExit, ZkError

DEFAULT_LOG_LEVEL = "WARNING"


def setup_logging():
    """
    Configure logging for the application.

    Logs go to stderr so they never mix with command output. The level is
    read from ZK_LOG_LEVEL.

    Returns:
        Logger instance for the main module
    """
    level = os.environ.get('ZK_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )
    return logging.getLogger(__name__)


def fatal(error: Exception):
    """Print error and exit with code 1."""
    click.echo(f"zk: error: {error}", err=True)
    sys.exit(1)


def run(args: List[str]) -> int:
    """
    Resolve the notebook, then run an alias or a built-in command.

    Args:
        args: Command line arguments, without the program name

    Returns:
        Process exit code
    """
    container = Container(Config.load())

    # Open the notebook if there's any.
    dirs, args = parse_dirs(args)
    container.set_current_notebook(notebook_search_dirs(dirs))

    if AliasDispatcher(container, Invocation.from_environ()).run(args):
        return 0
    return run_command(container, args)


def main(argv: Optional[List[str]] = None):
    """Main entry point for the zk command."""
    logger = setup_logging()
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        exit_code = run(args)
    except AliasNonZeroExit as e:
        # The alias already reported its failure.
        sys.exit(e.exit_code)
    except ZkError as e:
        logger.debug("Fatal error", exc_info=True)
        fatal(e)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
