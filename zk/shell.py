"""Running shell command lines with the parent's standard streams."""

import os
import shlex
import logging
import subprocess
from typing import List, Mapping, Optional

from .errors import AliasExecutionError


logger = logging.getLogger(__name__)

DEFAULT_SHELL = "sh"


def resolve_shell(configured: str = "", environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Pick the shell used to run command lines.

    ZK_SHELL wins over the configured shell, which wins over SHELL.
    """
    if environ is None:
        environ = os.environ
    return environ.get("ZK_SHELL") or configured or environ.get("SHELL") or DEFAULT_SHELL


def run_shell(command: str, args: List[str], env: Optional[Mapping[str, str]] = None,
              shell: str = DEFAULT_SHELL) -> int:
    """
    Run a command line and wait for it to finish.

    The extra arguments are passed to the shell as positional parameters,
    so the command line reads them with $@. Standard input, output and error
    are inherited from this process.

    Args:
        command: Shell command line
        args: Positional parameters for the command line
        env: Environment of the child process, defaults to os.environ
        shell: Shell to run, may contain its own arguments (e.g. "bash -e")

    Returns:
        The child's exit code

    Raises:
        AliasExecutionError: If the shell cannot be started or the child is killed by a signal
    """
    argv = shlex.split(shell) + ["-c", command, "--"] + list(args)
    logger.debug(f"Running: {argv}")

    try:
        completed = subprocess.run(argv, env=None if env is None else dict(env))
    except OSError as e:
        raise AliasExecutionError(f"cannot run {command!r}: {e}") from e

    if completed.returncode < 0:
        raise AliasExecutionError(f"{command!r} was terminated by signal {-completed.returncode}")
    return completed.returncode
