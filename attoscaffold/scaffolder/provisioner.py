"""Best-effort virtual environment provisioning.

Creates ``<project>/.venv``, upgrades pip, installs ``requirements.txt`` and
installs the scaffolded package in editable mode.  Each step runs exactly
once.  Failures never raise: they are returned as ``ProvisioningWarning``
records so callers can report them and still treat the scaffold as done.
"""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path
from typing import Awaitable, Callable

from attoscaffold.config import ScaffoldConfig
from attoscaffold.utils import format_command, run_command

from .results import ProvisioningWarning

CommandRunner = Callable[..., Awaitable[tuple[int, str, str]]]

# Interpreter names looked up on PATH, in order, when none is configured.
PYTHON_CANDIDATES: tuple[str, ...] = ("python3", "python")


def find_python(
    preferred: str | None = None,
    which: Callable[[str], str | None] = shutil.which,
) -> str:
    """Pick the interpreter used to create the virtual environment.

    Fallback order: *preferred* (resolved on PATH when it is a bare name),
    then ``python3``, then ``python``, then the running interpreter.
    """
    if preferred:
        if "/" in preferred:
            return os.path.abspath(preferred)
        return which(preferred) or preferred
    for name in PYTHON_CANDIDATES:
        found = which(name)
        if found:
            return found
    return sys.executable


class EnvironmentProvisioner:
    """Creates and populates the project's virtual environment."""

    def __init__(
        self,
        config: ScaffoldConfig,
        runner: CommandRunner | None = None,
    ) -> None:
        self.config = config
        self._runner = runner or run_command

    async def provision(self, project_root: str | Path) -> list[ProvisioningWarning]:
        """Run every provisioning step against *project_root*.

        Returns:
            Warnings for the steps that failed; empty when everything worked.
            When venv creation fails it is the only warning, because the
            install steps are not attempted.
        """
        # Every step runs with cwd=root, so all paths must be absolute.
        root = Path(project_root).resolve()
        venv_path = root / self.config.venv_dir
        venv_python = venv_path / "bin" / "python"
        python = find_python(self.config.python_executable)

        failure = await self._step(
            "create-venv", [python, "-m", "venv", str(venv_path)], root
        )
        if failure is not None:
            return [failure]

        warnings: list[ProvisioningWarning] = []
        steps = [
            ("upgrade-pip", ["-m", "pip", "install", "--upgrade", "pip"]),
            ("install-requirements", ["-m", "pip", "install", "-r", "requirements.txt"]),
            ("install-project", ["-m", "pip", "install", "-e", "."]),
        ]
        for step, args in steps:
            failure = await self._step(step, [str(venv_python), *args], root)
            if failure is not None:
                warnings.append(failure)
        return warnings

    async def _step(
        self, step: str, cmd: list[str], cwd: Path
    ) -> ProvisioningWarning | None:
        """Run one command; return a warning if it did not succeed."""
        try:
            returncode, _stdout, stderr = await self._runner(
                cmd, cwd=cwd, timeout=self.config.command_timeout
            )
        except OSError as exc:
            return ProvisioningWarning(
                step=step, command=format_command(cmd), returncode=None, detail=str(exc)
            )
        if returncode != 0:
            return ProvisioningWarning(
                step=step, command=format_command(cmd), returncode=returncode, detail=stderr
            )
        return None
