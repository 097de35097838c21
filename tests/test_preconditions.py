"""Tests for startup precondition checks."""

import pytest

from ubuntu_provisioner.errors import PreconditionError
from ubuntu_provisioner.lib.preconditions import SHELL_EXIT_CODE, require_root, require_shell


class TestRequireRoot:
    def test_root_passes(self, monkeypatch):
        monkeypatch.setattr("ubuntu_provisioner.lib.preconditions.os.geteuid", lambda: 0)
        require_root()

    def test_non_root_fails_with_exit_one(self, monkeypatch):
        monkeypatch.setattr("ubuntu_provisioner.lib.preconditions.os.geteuid", lambda: 1000)
        with pytest.raises(PreconditionError) as exc:
            require_root()
        assert exc.value.exit_code == 1


class TestRequireShell:
    def test_found(self, monkeypatch):
        monkeypatch.setattr("ubuntu_provisioner.lib.preconditions.shutil.which", lambda name: "/bin/bash")
        assert require_shell("bash") == "/bin/bash"

    def test_missing_has_distinct_exit_code(self, monkeypatch):
        monkeypatch.setattr("ubuntu_provisioner.lib.preconditions.shutil.which", lambda name: None)
        with pytest.raises(PreconditionError) as exc:
            require_shell("bash")
        assert exc.value.exit_code == SHELL_EXIT_CODE == 21
