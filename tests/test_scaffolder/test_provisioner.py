"""Tests for virtual environment provisioning (attoscaffold.scaffolder.provisioner).

All subprocesses are faked; no interpreter or pip is actually run.

Covers:
- find_python fallback order
- Step order, commands, cwd and timeout
- venv creation failure stops the remaining steps
- Later failures are recorded and do not stop the run
- Executables that cannot be started
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from attoscaffold.config import ScaffoldConfig
from attoscaffold.scaffolder.provisioner import EnvironmentProvisioner, find_python

pytestmark = pytest.mark.unit


def _which(available: dict[str, str]):
    return lambda name: available.get(name)


# ---------------------------------------------------------------------------
# find_python
# ---------------------------------------------------------------------------


class TestFindPython:
    def test_configured_path_used_verbatim(self):
        assert find_python("/opt/py/bin/python3.12", which=_which({})) == "/opt/py/bin/python3.12"

    def test_configured_relative_path_made_absolute(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert find_python("venvs/base/bin/python3", which=_which({})) == str(
            tmp_path / "venvs" / "base" / "bin" / "python3"
        )

    def test_configured_name_resolved_on_path(self):
        which = _which({"python3.12": "/usr/bin/python3.12"})
        assert find_python("python3.12", which=which) == "/usr/bin/python3.12"

    def test_configured_name_not_on_path_kept(self):
        assert find_python("python3.99", which=_which({})) == "python3.99"

    def test_prefers_python3(self):
        which = _which({"python3": "/usr/bin/python3", "python": "/usr/bin/python"})
        assert find_python(which=which) == "/usr/bin/python3"

    def test_falls_back_to_python(self):
        assert find_python(which=_which({"python": "/usr/bin/python"})) == "/usr/bin/python"

    def test_falls_back_to_running_interpreter(self):
        assert find_python(which=_which({})) == sys.executable


# ---------------------------------------------------------------------------
# EnvironmentProvisioner
# ---------------------------------------------------------------------------


@pytest.fixture
def config(tmp_path: Path) -> ScaffoldConfig:
    return ScaffoldConfig(
        target_path=tmp_path, python_executable="/usr/bin/python3", command_timeout=30
    )


class TestProvision:
    @pytest.mark.asyncio
    async def test_all_steps_succeed(self, config, fake_runner, tmp_path: Path):
        runner = fake_runner()
        warnings = await EnvironmentProvisioner(config, runner=runner).provision(tmp_path)

        assert warnings == []
        venv_python = str(tmp_path / ".venv" / "bin" / "python")
        assert [call["cmd"] for call in runner.calls] == [
            ["/usr/bin/python3", "-m", "venv", str(tmp_path / ".venv")],
            [venv_python, "-m", "pip", "install", "--upgrade", "pip"],
            [venv_python, "-m", "pip", "install", "-r", "requirements.txt"],
            [venv_python, "-m", "pip", "install", "-e", "."],
        ]

    @pytest.mark.asyncio
    async def test_cwd_and_timeout_passed(self, config, fake_runner, tmp_path: Path):
        runner = fake_runner()
        await EnvironmentProvisioner(config, runner=runner).provision(tmp_path)
        for call in runner.calls:
            assert call["cwd"] == tmp_path
            assert call["timeout"] == 30

    @pytest.mark.asyncio
    async def test_custom_venv_dir(self, tmp_path: Path, fake_runner):
        config = ScaffoldConfig(target_path=tmp_path, python_executable="/usr/bin/python3", venv_dir="env")
        runner = fake_runner()
        await EnvironmentProvisioner(config, runner=runner).provision(tmp_path)
        assert runner.calls[0]["cmd"][-1] == str(tmp_path / "env")
        assert runner.calls[1]["cmd"][0] == str(tmp_path / "env" / "bin" / "python")

    @pytest.mark.asyncio
    async def test_venv_creation_failure_skips_installs(self, config, fake_runner, tmp_path: Path):
        runner = fake_runner({"-m venv": (1, "", "Error: ensurepip is not available")})
        warnings = await EnvironmentProvisioner(config, runner=runner).provision(tmp_path)

        assert len(runner.calls) == 1
        assert len(warnings) == 1
        assert warnings[0].step == "create-venv"
        assert warnings[0].returncode == 1
        assert "ensurepip" in warnings[0].detail

    @pytest.mark.asyncio
    async def test_venv_timeout_is_a_failure(self, config, fake_runner, tmp_path: Path):
        runner = fake_runner({"-m venv": (-1, "", "Command timed out after 30s")})
        warnings = await EnvironmentProvisioner(config, runner=runner).provision(tmp_path)
        assert [w.step for w in warnings] == ["create-venv"]

    @pytest.mark.asyncio
    async def test_interpreter_cannot_start(self, tmp_path: Path, fake_runner):
        config = ScaffoldConfig(target_path=tmp_path, python_executable="/missing/python")
        runner = fake_runner({"-m venv": FileNotFoundError(2, "No such file or directory")})
        warnings = await EnvironmentProvisioner(config, runner=runner).provision(tmp_path)

        assert len(warnings) == 1
        assert warnings[0].returncode is None
        assert "No such file" in warnings[0].detail

    @pytest.mark.asyncio
    async def test_install_failure_continues(self, config, fake_runner, tmp_path: Path):
        runner = fake_runner({"-r requirements.txt": (1, "", "Could not find a version")})
        warnings = await EnvironmentProvisioner(config, runner=runner).provision(tmp_path)

        assert len(runner.calls) == 4
        assert [w.step for w in warnings] == ["install-requirements"]
        assert "-r requirements.txt" in warnings[0].command

    @pytest.mark.asyncio
    async def test_every_install_step_fails(self, config, fake_runner, tmp_path: Path):
        runner = fake_runner({"-m pip": (2, "", "offline")})
        warnings = await EnvironmentProvisioner(config, runner=runner).provision(tmp_path)
        assert [w.step for w in warnings] == ["upgrade-pip", "install-requirements", "install-project"]
        assert len(runner.calls) == 4

    @pytest.mark.asyncio
    async def test_relative_root_uses_absolute_paths(self, tmp_path: Path, monkeypatch, fake_runner):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "proj").mkdir()
        config = ScaffoldConfig(target_path=Path("proj"), python_executable="/usr/bin/python3")
        runner = fake_runner()
        await EnvironmentProvisioner(config, runner=runner).provision(Path("proj"))

        project = tmp_path.resolve() / "proj"
        create, *installs = runner.calls
        assert create["cmd"][-1] == str(project / ".venv")
        assert create["cwd"] == project
        for call in installs:
            assert Path(call["cmd"][0]).is_absolute()
            assert call["cmd"][0] == str(project / ".venv" / "bin" / "python")
            assert call["cwd"] == project
