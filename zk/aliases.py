"""Running user aliases in place of built-in commands."""

import os
import shlex
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional

from .container import Container
from .errors import AliasNonZeroExit
from .shell import resolve_shell, run_shell


logger = logging.getLogger(__name__)

RUNNING_ALIAS_ENV = "ZK_RUNNING_ALIAS"


@dataclass(frozen=True)
class Invocation:
    """
    Context of the current zk process.

    Attributes:
        running_alias: Name of the alias this process was started from, or ""
        environ: Environment inherited by child processes
    """

    running_alias: str = ""
    environ: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Invocation":
        if environ is None:
            environ = os.environ
        environ = dict(environ)
        return cls(running_alias=environ.get(RUNNING_ALIAS_ENV, ""), environ=environ)

    def child_env(self, alias: str) -> Dict[str, str]:
        """Environment for the process running alias."""
        env = dict(self.environ)
        env[RUNNING_ALIAS_ENV] = alias
        return env


class AliasDispatcher:
    """Runs an alias when the first argument names one."""

    def __init__(self, container: Container, invocation: Invocation,
                 runner: Callable[..., int] = run_shell):
        """
        Initialize the dispatcher.

        Args:
            container: Container providing the aliases and the current notebook
            invocation: Context of the current process
            runner: Callable running a command line, see zk.shell.run_shell
        """
        self.container = container
        self.invocation = invocation
        self.runner = runner

    def run(self, args: List[str]) -> bool:
        """
        Execute the alias named by args[0], if there is one.

        Args:
            args: Command line arguments after the directory flags were removed

        Returns:
            True if an alias was run, False to fall through to the built-in commands

        Raises:
            AliasNonZeroExit: If the alias exited with a non-zero code
            AliasExecutionError: If the alias could not be run
        """
        if not args:
            return False

        alias = args[0]
        command = self.container.aliases.get(alias)
        if command is None:
            return False

        # An alias calling itself runs the built-in command instead.
        if alias == self.invocation.running_alias:
            logger.debug(f"Alias {alias} is already running, not expanding it again")
            return False

        if self.container.has_notebook:
            notebook_dir = self.container.current_notebook().path
            command = f"cd {shlex.quote(notebook_dir)} && {command}"

        logger.info(f"Running alias {alias}: {command}")
        exit_code = self.runner(
            command,
            args[1:],
            env=self.invocation.child_env(alias),
            shell=resolve_shell(self.container.config.shell, self.invocation.environ),
        )
        if exit_code != 0:
            raise AliasNonZeroExit(alias, exit_code)
        return True
