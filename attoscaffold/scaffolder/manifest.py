"""Static description of the attoLLM project skeleton.

``PROJECT_FILES`` maps every generated file (relative to the project root) to
the template that provides its content.  ``PROJECT_DIRECTORIES`` lists the
directories created even when nothing is written into them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PACKAGE_NAME = "attollm"
PROJECT_TITLE = "attoLLM"


@dataclass(frozen=True)
class TemplateFile:
    """Content provider for one generated file."""

    template: str
    executable: bool = False


PROJECT_DIRECTORIES: tuple[str, ...] = (
    f"src/{PACKAGE_NAME}",
    "scripts",
    "configs",
    "data/raw",
    "data/processed",
    "data/cache",
    "checkpoints",
    "tests",
)

# Insertion order is the write order.
PROJECT_FILES: dict[str, TemplateFile] = {
    "README.md": TemplateFile("README.md.j2"),
    ".gitignore": TemplateFile("gitignore.j2"),
    "requirements.txt": TemplateFile("requirements.txt.j2"),
    "pyproject.toml": TemplateFile("pyproject.toml.j2"),
    f"src/{PACKAGE_NAME}/__init__.py": TemplateFile("package/__init__.py.j2"),
    f"src/{PACKAGE_NAME}/hello.py": TemplateFile("package/hello.py.j2"),
    "scripts/train.py": TemplateFile("scripts/train.py.j2", executable=True),
    "scripts/sample.py": TemplateFile("scripts/sample.py.j2", executable=True),
    "configs/default.yaml": TemplateFile("configs/default.yaml.j2"),
    "Makefile": TemplateFile("Makefile.j2"),
}


def template_context() -> dict[str, Any]:
    """Context shared by every template."""
    return {
        "package_name": PACKAGE_NAME,
        "project_title": PROJECT_TITLE,
    }


def executable_files() -> list[str]:
    """Relative paths of the files that get the executable bit."""
    return [path for path, spec in PROJECT_FILES.items() if spec.executable]
