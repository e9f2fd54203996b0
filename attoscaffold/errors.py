"""Error taxonomy for the attoLLM scaffolder.

Every fatal condition maps to a process exit code so the CLI can translate an
exception into ``sys.exit`` without inspecting message text.  Provisioning
failures are deliberately absent here: they are recorded as
:class:`~attoscaffold.scaffolder.results.ProvisioningWarning` entries on the
result instead of being raised.
"""

from __future__ import annotations

from pathlib import Path

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_TARGET_EXISTS = 3


class ScaffoldError(Exception):
    """Base class for every fatal scaffolder error."""

    exit_code: int = EXIT_FAILURE


# ---------------------------------------------------------------------------
# Usage errors (exit 2)
# ---------------------------------------------------------------------------


class UsageError(ScaffoldError):
    """Raised when the command-line arguments cannot be accepted."""

    exit_code = EXIT_USAGE


class MissingTargetError(UsageError):
    """Raised when no ``<target-dir>`` positional argument was supplied."""

    def __init__(self) -> None:
        super().__init__("Error: <target-dir> is required")


class TooManyArgumentsError(UsageError):
    """Raised on a second positional argument."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unexpected arg: {token}")


class UnknownFlagError(UsageError):
    """Raised on an option that the scaffolder does not recognise."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown flag: {token}")


# ---------------------------------------------------------------------------
# Target / filesystem errors
# ---------------------------------------------------------------------------


class TargetConflictError(ScaffoldError):
    """Raised when the target exists and overwriting it needs ``--force``."""

    exit_code = EXIT_TARGET_EXISTS

    def __init__(self, path: Path, state: str = "") -> None:
        self.path = Path(path)
        self.state = state
        super().__init__(f"Error: {path} exists. Use --force to overwrite.")


class TargetAccessError(ScaffoldError):
    """Raised when the target path cannot even be inspected."""

    exit_code = EXIT_FAILURE

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Error: cannot access {path}"
        super().__init__(f"{message}: {reason}" if reason else message)


class MaterializationError(ScaffoldError):
    """Raised when writing the generated tree fails (permissions, disk full, ...)."""

    exit_code = EXIT_FAILURE

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)
