"""Exception classes for 1code-linux operations."""

from collections.abc import Sequence


class OneCodeError(Exception):
    """Base exception for 1code-linux operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class CommandError(OneCodeError):
    """Raised when an external command exits non-zero or cannot start."""

    error_prefix = "Command failed"

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        stderr: str = "",
    ) -> None:
        """Initialize with the failed command and its diagnostics.

        Args:
            command: Argument vector that was executed.
            returncode: Exit status, or None if the command never started.
            stderr: Captured standard error, if any.

        """
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr.strip()
        if returncode is None:
            message = "executable not found"
        else:
            message = f"exit status {returncode}"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message, target=" ".join(self.command))


class DependencyError(OneCodeError):
    """Raised when required build tools are missing."""

    error_prefix = "Missing required dependencies"

    def __init__(self, missing: Sequence[str]) -> None:
        """Initialize with the list of missing dependencies."""
        self.missing = list(missing)
        super().__init__(", ".join(self.missing))


class InstallationError(OneCodeError):
    """Raised when installation fails."""

    error_prefix = "Installation failed"


class UpdateError(OneCodeError):
    """Raised when an update cannot proceed."""

    error_prefix = "Update failed"


class InvalidVersionError(OneCodeError, ValueError):
    """Raised when a version identifier has a non-numeric segment."""

    error_prefix = "Invalid version"
