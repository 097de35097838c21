from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pytest

from ubuntu_provisioner.config import ProvisionConfig, deep_merge
from ubuntu_provisioner.context import ProvisionCtx
from ubuntu_provisioner.errors import CommandError
from ubuntu_provisioner.lib.command import CmdResult
from ubuntu_provisioner.lib.manifests import load_provision_manifest


class CommandRecorder:
    """Stand-in for run_cmd: records calls, fails the ones matching ``fail_on``."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.fail_on: dict = {}
        self.on_call = None

    def __call__(self, argv, *, check=True, env=None, cwd=None, input_text=None, dry_run=False):
        argv = list(argv)
        self.calls.append((argv, cwd))
        if self.on_call is not None:
            self.on_call(argv, cwd)
        code = self.fail_on.get(argv[0])
        if code and check:
            raise CommandError(argv, code, "boom")
        return CmdResult(argv=argv, returncode=code or 0, stdout="", stderr="")

    def argvs(self, program: Optional[str] = None) -> List[List[str]]:
        return [a for a, _ in self.calls if program is None or a[0] == program]


@pytest.fixture
def make_cfg(tmp_path):
    def _make(**overrides) -> ProvisionConfig:
        raw = deep_merge(
            load_provision_manifest(),
            {"paths": {"workspace": str(tmp_path / "build")}, "retry": {"delay": 0}},
        )
        return ProvisionConfig(raw=deep_merge(raw, overrides))

    return _make


@pytest.fixture
def ctx(make_cfg, tmp_path) -> ProvisionCtx:
    home = tmp_path / "home"
    home.mkdir()
    return ProvisionCtx(cfg=make_cfg(), home=home, sleep=lambda s: None)


@pytest.fixture
def recorder(monkeypatch) -> CommandRecorder:
    rec = CommandRecorder()
    monkeypatch.setattr("ubuntu_provisioner.lib.actions.run_cmd", rec)
    monkeypatch.setattr("ubuntu_provisioner.lib.docker.run_cmd", rec)
    return rec


@pytest.fixture
def workspace(tmp_path) -> Path:
    ws = tmp_path / "build"
    ws.mkdir()
    return ws
