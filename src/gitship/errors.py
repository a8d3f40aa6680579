"""
Error hierarchy for git-ship.

Everything the core raises derives from ShipError. Nothing below the CLI
catches these; the CLI turns them into a one-line message and exit status.
"""

from typing import Optional, Sequence


class ShipError(Exception):
    """Base class for every abort raised by git-ship."""


class ConfigLoadError(ShipError):
    """The config file could not be read or written."""

    def __init__(self, path: str, cause: Exception, action: str = "Read"):
        self.path = path
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"{action} {path}: {reason}")


class MissingFieldError(ShipError):
    """A required project field could not be resolved."""


class RepositoryNotFoundError(MissingFieldError):
    """No repository URL in config and none among the git remotes."""


class SubprocessError(ShipError):
    """An external command could not be started or exited non-zero."""

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: Optional[int] = None,
    ):
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode


class NotSupportedError(ShipError, NotImplementedError):
    """A lifecycle step was called on a class that does not implement it."""


class PluginNotFoundError(ShipError):
    """A plugin name could not be resolved to a class."""
