"""attoscaffold scaffolder -- generates the attoLLM project skeleton.

Quick usage::

    from attoscaffold.scaffolder import ProjectGenerator, validate_target

    validate_target("/tmp/proj", force=False)
    project_path = await ProjectGenerator().generate("/tmp/proj")
"""

from attoscaffold.scaffolder.generator import ProjectGenerator
from attoscaffold.scaffolder.manifest import (
    PACKAGE_NAME,
    PROJECT_DIRECTORIES,
    PROJECT_FILES,
    PROJECT_TITLE,
)
from attoscaffold.scaffolder.provisioner import EnvironmentProvisioner, find_python
from attoscaffold.scaffolder.results import (
    ProvisioningWarning,
    ScaffoldResult,
    ScaffoldStatus,
)
from attoscaffold.scaffolder.templates import TemplateRenderer
from attoscaffold.scaffolder.validator import TargetState, inspect_target, validate_target

__all__ = [
    "EnvironmentProvisioner",
    "PACKAGE_NAME",
    "PROJECT_DIRECTORIES",
    "PROJECT_FILES",
    "PROJECT_TITLE",
    "ProjectGenerator",
    "ProvisioningWarning",
    "ScaffoldResult",
    "ScaffoldStatus",
    "TargetState",
    "TemplateRenderer",
    "find_python",
    "inspect_target",
    "validate_target",
]
