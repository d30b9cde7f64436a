"""Exceptions raised by aptclient."""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aptclient.models import Repository


class AptError(Exception):
    """Base class of all errors raised by this library."""

    def __repr__(self):
        return f"<{type(self).__module__}.{type(self).__name__} {self.args}>"

    @property
    def message(self) -> str:
        """Return the message passed as the first argument."""
        return self.args[0] if self.args else ""


class FileAccessError(AptError):
    """A configuration file or directory could not be read or written."""

    def __init__(self, message: str, path: Path | str):
        super().__init__(message, path)
        self.path = Path(path)

    def __str__(self):
        return self.message


class DuplicateRepositoryError(AptError):
    """The repository is already configured."""

    def __init__(self, repo: "Repository"):
        super().__init__(f"The repository is already configured: {repo.config_line()}", repo)
        self.repo = repo

    def __str__(self):
        return self.message


class InvalidPackageError(AptError, ValueError):
    """A package with an empty name was passed to an operation."""


class ExternalToolError(AptError):
    """An external tool could not be started or exited with a non-zero status."""

    def __init__(self, message: str, args: list[str], returncode: int | None = None, output: str = ""):
        super().__init__(message, args, returncode, output)
        self.cmd = list(args)
        self.returncode = returncode
        self.output = output

    def __str__(self):
        if self.output:
            return f"{self.message} - {self.output.strip()}"
        return self.message


class InvalidRepositoryError(AptError, ValueError):
    """A repository cannot be written as a sources.list line that reads back."""
