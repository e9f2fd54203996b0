"""attoscaffold orchestrator.

Runs one scaffolding job end to end:

1. VALIDATE    -- refuse non-empty targets unless ``force`` is set.
2. MATERIALIZE -- write the fixed attoLLM tree.
3. PROVISION   -- optionally create ``.venv`` and install dependencies
                  (best effort; failures become warnings).

Usage::

    from attoscaffold.config import ScaffoldConfig
    from attoscaffold.pipeline import scaffold

    result = scaffold(ScaffoldConfig(target_path=Path("/tmp/proj")))
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from attoscaffold.config import ScaffoldConfig
from attoscaffold.scaffolder.generator import ProjectGenerator
from attoscaffold.scaffolder.manifest import PACKAGE_NAME, PROJECT_FILES, PROJECT_TITLE
from attoscaffold.scaffolder.provisioner import EnvironmentProvisioner
from attoscaffold.scaffolder.results import ScaffoldResult
from attoscaffold.scaffolder.validator import validate_target
from attoscaffold.utils import (
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)


class Scaffolder:
    """Drives validation, tree generation and environment provisioning.

    Attributes:
        config: Settings for this run.
        generator: Writes the project tree.
        provisioner: Creates the virtual environment.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        generator: ProjectGenerator | None = None,
        provisioner: EnvironmentProvisioner | None = None,
    ) -> None:
        self.config = config
        self.generator = generator or ProjectGenerator()
        self.provisioner = provisioner or EnvironmentProvisioner(config)

    async def run(self) -> ScaffoldResult:
        """Scaffold the project described by ``self.config``.

        Raises:
            TargetConflictError: The target is occupied and ``force`` is off.
                Nothing has been written in that case.
            MaterializationError: A directory or file could not be written.
        """
        target = self.config.target_path
        validate_target(target, force=self.config.force)

        root = await self.generator.generate(target)
        print_success(f"Scaffolded {PROJECT_TITLE} project at: {root.resolve()}")

        result = ScaffoldResult(
            project_root=root,
            files=list(PROJECT_FILES),
            environment_requested=self.config.create_environment,
        )

        if self.config.create_environment:
            print_info(f"Creating virtual environment ({self.config.venv_dir})…")
            result.warnings = await self.provisioner.provision(root)
            result.environment_created = not any(
                w.step == "create-venv" for w in result.warnings
            )
            for warning in result.warnings:
                print_warning(warning.describe())
            if result.environment_created:
                print_info(
                    f"Run: source {self.config.venv_dir}/bin/activate"
                    f" && python -m {PACKAGE_NAME}.hello"
                )
            else:
                print_warning("venv creation failed")
        else:
            print_info("Skipped venv creation (--no-venv).")

        print_summary_table(_summary(result), title="Scaffold Summary")
        return result


def scaffold(config: ScaffoldConfig) -> ScaffoldResult:
    """Synchronous convenience wrapper around :meth:`Scaffolder.run`."""
    return asyncio.run(Scaffolder(config).run())


def _summary(result: ScaffoldResult) -> dict[str, str]:
    if not result.environment_requested:
        environment = "skipped"
    elif result.environment_created:
        environment = "created"
    else:
        environment = "failed"
    return {
        "Project root": str(Path(result.project_root).resolve()),
        "Files written": str(len(result.files)),
        "Virtual environment": environment,
        "Warnings": str(len(result.warnings)),
        "Status": result.status.value,
    }
