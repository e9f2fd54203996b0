"""Scaffolding outcome models.

A run that gets past validation and materialization always succeeds; the
result only distinguishes a clean run from one where the optional virtual
environment could not be fully provisioned.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, computed_field


class ScaffoldStatus(str, Enum):
    SUCCEEDED = "succeeded"
    SUCCEEDED_WITH_WARNINGS = "succeeded-with-warnings"


class ProvisioningWarning(BaseModel):
    """A non-fatal failure of one environment provisioning step."""

    step: str = Field(..., description="'create-venv', 'upgrade-pip', 'install-requirements' or 'install-project'")
    command: str = Field(default="", description="Command line that was attempted")
    returncode: int | None = Field(default=None, description="Exit status; None if the process never started")
    detail: str = Field(default="", description="stderr output or the start-up error")

    def describe(self) -> str:
        """One-line human-readable summary."""
        status = "could not start" if self.returncode is None else f"exit {self.returncode}"
        text = f"{self.step} failed ({status})"
        if self.detail:
            text += f": {self.detail.splitlines()[-1]}"
        return text


class ScaffoldResult(BaseModel):
    """Outcome of a completed scaffolding run."""

    project_root: Path
    files: list[str] = Field(default_factory=list, description="Relative paths of written files")
    environment_requested: bool = Field(default=True)
    environment_created: bool = Field(default=False)
    warnings: list[ProvisioningWarning] = Field(default_factory=list)

    @computed_field  # type: ignore[misc]
    @property
    def status(self) -> ScaffoldStatus:
        if self.warnings:
            return ScaffoldStatus.SUCCEEDED_WITH_WARNINGS
        return ScaffoldStatus.SUCCEEDED
