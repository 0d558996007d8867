"""Error hierarchy for buildnumber.

Every error is fatal for a single build-number run: nothing is retried, and the
CLI turns any FatalError into a diagnostic plus a non-zero exit status.
"""

from __future__ import annotations


class FatalError(Exception):
    """Base class for all errors that abort a build-number run."""


class FormatError(FatalError, ValueError):
    """Raised when a string does not match the version grammar."""

    def __init__(self, message: str, text: str | None = None, column: int | None = None) -> None:
        self.text = text
        self.column = column
        if text is not None and column is not None:
            message = f"{message} at column {column} in {text!r}"
        elif text is not None:
            message = f"{message}: {text!r}"
        super().__init__(message)


class InvalidStateError(FatalError):
    """Raised when a mutation would give a version a build number without a patch."""


class InvalidArgumentError(FatalError, ValueError):
    """Raised for an unknown rendering mode or an unusable numeric field value."""


class ConfigError(FatalError):
    """Raised when the metadata-store path cannot be resolved."""


class ExternalToolError(FatalError):
    """Raised when source control or metadata-store I/O fails."""

    def __init__(self, message: str, command: list[str] | None = None, stderr: str = "") -> None:
        self.command = command
        self.stderr = stderr
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)
