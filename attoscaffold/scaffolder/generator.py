"""Main scaffolding generator.

Creates the attoLLM directory skeleton and writes every file listed in
``PROJECT_FILES``.  Files are fully replaced on every run, so re-running with
``--force`` always converges on the same bytes.
"""

from __future__ import annotations

import asyncio
import stat
from pathlib import Path
from typing import Any

from attoscaffold.errors import MaterializationError

from .manifest import PROJECT_DIRECTORIES, PROJECT_FILES, template_context
from .templates import TemplateRenderer


class ProjectGenerator:
    """Materializes the fixed project tree into a target directory.

    The generator performs no validation of its own; callers are expected to
    have run :func:`~attoscaffold.scaffolder.validator.validate_target` first.
    """

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.context: dict[str, Any] = template_context()

    # -- Public API --------------------------------------------------------

    def render_files(self) -> dict[str, str]:
        """Render every project file without touching the filesystem.

        Returns:
            Mapping of relative path to file content, in write order.
        """
        return {
            rel_path: self.renderer.render(spec.template, self.context)
            for rel_path, spec in PROJECT_FILES.items()
        }

    async def generate(self, target: str | Path) -> Path:
        """Generate the complete project tree under *target*.

        Args:
            target: Project root.  Created (with parents) when missing; if it
                exists as a non-directory it is replaced by a directory.

        Returns:
            The project root path.

        Raises:
            MaterializationError: If any directory or file cannot be written.
        """
        root = Path(target)
        try:
            await asyncio.to_thread(_prepare_root, root)

            # 1. Directory skeleton
            for rel_dir in PROJECT_DIRECTORIES:
                await asyncio.to_thread(
                    (root / rel_dir).mkdir, parents=True, exist_ok=True
                )

            # 2. Files
            for rel_path, spec in PROJECT_FILES.items():
                out = await self.renderer.render_to_file(
                    spec.template, root / rel_path, self.context
                )
                if spec.executable:
                    await asyncio.to_thread(_make_executable, out)
        except OSError as exc:
            failed = Path(exc.filename) if exc.filename else root
            raise MaterializationError(
                f"Failed to write project tree at {failed}: {exc.strerror or exc}",
                path=failed,
            ) from exc

        return root


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _prepare_root(root: Path) -> None:
    """Make sure *root* is a directory, replacing a file or dangling symlink."""
    if (root.exists() or root.is_symlink()) and not root.is_dir():
        root.unlink()
    root.mkdir(parents=True, exist_ok=True)


def _make_executable(path: Path) -> None:
    """Set the executable bit on a file."""
    current = path.stat().st_mode
    path.chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
