"""attoscaffold configuration.

Typed settings for one scaffolding run.  The invocation arguments parsed from
the command line are combined with the settings that would otherwise come
from ambient shell state (which interpreter to use, where the virtual
environment lives, how long a subprocess may take) so that every component
receives them explicitly.  No environment variables are consulted.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ScaffoldArgs(BaseModel):
    """Invocation arguments as parsed from the command line.

    Immutable once constructed.
    """

    model_config = ConfigDict(frozen=True)

    target_path: Path = Field(..., description="Directory to scaffold into")
    force: bool = Field(default=False, description="Allow scaffolding into a non-empty target")
    create_environment: bool = Field(
        default=True, description="Create .venv and install dependencies after scaffolding"
    )


class ScaffoldConfig(BaseModel):
    """Global configuration for a single scaffolding run.

    Instances are typically created once by the CLI entry point (see
    :meth:`from_args`) and passed to :class:`~attoscaffold.pipeline.Scaffolder`.
    """

    target_path: Path
    force: bool = Field(default=False)
    create_environment: bool = Field(default=True)

    # Interpreter used to create the virtual environment.  ``None`` means
    # discover one (see ``attoscaffold.scaffolder.provisioner.find_python``).
    python_executable: str | None = Field(default=None)
    venv_dir: str = Field(default=".venv", min_length=1)
    command_timeout: int = Field(
        default=900, ge=10, description="Per-subprocess timeout in seconds while provisioning"
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def venv_path(self) -> Path:
        """Absolute root of the virtual environment inside the target."""
        return self.target_path.resolve() / self.venv_dir

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_args(cls, args: ScaffoldArgs, **overrides: Any) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from parsed CLI arguments.

        Args:
            args: The parsed invocation arguments.
            **overrides: Any other ``ScaffoldConfig`` field, e.g.
                ``python_executable="/usr/bin/python3.12"``.
        """
        return cls(
            target_path=args.target_path,
            force=args.force,
            create_environment=args.create_environment,
            **overrides,
        )
