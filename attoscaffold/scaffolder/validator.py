"""Target directory validation.

Decides, before anything is written, whether scaffolding into a path may go
ahead.  Empty directories are always accepted; anything else that already
exists needs ``--force``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from attoscaffold.errors import TargetAccessError, TargetConflictError


class TargetState(str, Enum):
    """What currently occupies the target path."""

    ABSENT = "absent"
    EMPTY_DIR = "empty-directory"
    NON_EMPTY_DIR = "non-empty-directory"
    NOT_A_DIRECTORY = "not-a-directory"


def inspect_target(path: str | Path) -> TargetState:
    """Classify *path* without modifying it.

    A directory whose listing cannot be read is reported as non-empty.

    Raises:
        TargetAccessError: If the path itself cannot be examined, e.g. a
            parent directory is not searchable.
    """
    target = Path(path)
    try:
        if not target.exists() and not target.is_symlink():
            return TargetState.ABSENT
        if not target.is_dir():
            return TargetState.NOT_A_DIRECTORY
    except OSError as exc:
        raise TargetAccessError(target, exc.strerror or str(exc)) from exc
    try:
        next(target.iterdir())
    except StopIteration:
        return TargetState.EMPTY_DIR
    except PermissionError:
        return TargetState.NON_EMPTY_DIR
    return TargetState.NON_EMPTY_DIR


def validate_target(path: str | Path, force: bool = False) -> TargetState:
    """Check that scaffolding into *path* is allowed.

    Args:
        path: The requested target directory.
        force: Whether the caller consented to overwriting existing content.

    Returns:
        The inspected ``TargetState``.

    Raises:
        TargetConflictError: If *path* exists, is not an empty directory, and
            *force* is false.
    """
    state = inspect_target(path)
    if state in (TargetState.ABSENT, TargetState.EMPTY_DIR):
        return state
    if force:
        return state
    raise TargetConflictError(Path(path), state=state.value)
