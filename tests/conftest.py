"""Shared pytest fixtures for the attoscaffold test suite.

Provides reusable fixtures for:
- Target paths in each state the validator distinguishes
- Filesystem snapshots for "nothing changed" assertions
- A recording fake for the async command runner
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest


# ---------------------------------------------------------------------------
# Target paths
# ---------------------------------------------------------------------------

@pytest.fixture
def missing_target(tmp_path: Path) -> Path:
    """A target path that does not exist yet (nor does its parent)."""
    return tmp_path / "nested" / "proj"


@pytest.fixture
def empty_target(tmp_path: Path) -> Path:
    """An existing, empty target directory."""
    target = tmp_path / "empty-proj"
    target.mkdir()
    return target


@pytest.fixture
def occupied_target(tmp_path: Path) -> Path:
    """An existing target directory that already holds user content."""
    target = tmp_path / "proj"
    target.mkdir()
    (target / "notes.txt").write_text("keep me\n", encoding="utf-8")
    return target


@pytest.fixture
def file_target(tmp_path: Path) -> Path:
    """A target path occupied by a regular file."""
    target = tmp_path / "proj.txt"
    target.write_text("not a directory\n", encoding="utf-8")
    return target


# ---------------------------------------------------------------------------
# Filesystem snapshots
# ---------------------------------------------------------------------------

def snapshot_tree(root: Path) -> dict[str, tuple[bool, bytes | None, int]]:
    """Capture every path under *root* with its type, content and mtime."""
    snapshot: dict[str, tuple[bool, bytes | None, int]] = {}
    if not root.exists():
        return snapshot
    if root.is_file():
        return {".": (False, root.read_bytes(), root.stat().st_mtime_ns)}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames:
            path = Path(dirpath) / name
            snapshot[str(path.relative_to(root))] = (True, None, path.stat().st_mtime_ns)
        for name in filenames:
            path = Path(dirpath) / name
            snapshot[str(path.relative_to(root))] = (
                False,
                path.read_bytes(),
                path.stat().st_mtime_ns,
            )
    return snapshot


@pytest.fixture
def tree_snapshot():
    """Expose :func:`snapshot_tree` to tests."""
    return snapshot_tree


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------

class FakeRunner:
    """Async stand-in for ``attoscaffold.utils.run_command``.

    ``results`` maps a step keyword (matched against the joined command line)
    to the ``(returncode, stdout, stderr)`` that should be returned, or to an
    exception instance that should be raised.  Unmatched commands succeed.
    """

    def __init__(self, results: dict[str, Any] | None = None) -> None:
        self.results = results or {}
        self.calls: list[dict[str, Any]] = []

    async def __call__(self, cmd: list[str], **kwargs: Any) -> tuple[int, str, str]:
        self.calls.append({"cmd": list(cmd), **kwargs})
        joined = " ".join(cmd)
        for keyword, outcome in self.results.items():
            if keyword in joined:
                if isinstance(outcome, BaseException):
                    raise outcome
                return outcome
        return (0, "", "")


@pytest.fixture
def fake_runner():
    """Factory fixture: ``fake_runner({"-m venv": (1, "", "boom")})``."""
    return FakeRunner
