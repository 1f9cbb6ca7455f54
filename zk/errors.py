"""Errors raised while resolving the notebook and dispatching commands."""


class ZkError(Exception):
    """Base class for every error reported as ``zk: error: ...``."""


class MissingFlagArgument(ZkError):
    """A pre-parsed flag was the last argument and has no value."""

    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"{flag} requires a path argument")


class PathResolutionError(ZkError):
    """A path argument could not be made absolute."""


class WorkingDirectoryError(ZkError):
    """The current working directory could not be read."""


class NotebookNotFound(ZkError):
    """No notebook could be opened from the given directory."""


class NotebookExists(ZkError):
    """A notebook already exists where one should be created."""


class ConfigError(ZkError):
    """A configuration file is unreadable or malformed."""


class IndexingError(ZkError):
    """The notebook index could not be refreshed."""


class AliasExecutionError(ZkError):
    """An alias command could not be started or was killed by a signal."""


class AliasNonZeroExit(ZkError):
    """An alias command ran and exited with a failure code.

    Not reported as an error: the process exits with the same code.
    """

    def __init__(self, alias: str, exit_code: int):
        self.alias = alias
        self.exit_code = exit_code
        super().__init__(f"alias {alias} exited with code {exit_code}")


class CommandParseError(ZkError):
    """The command line could not be parsed."""


class CommandRunError(ZkError):
    """A built-in command failed."""
