"""Tests for workspace directory lifecycle helpers."""

import pytest

from ubuntu_provisioner.errors import WorkspaceError
from ubuntu_provisioner.lib.fs import append_text, ensure_clean_dir, ensure_dir, remove_dir


class TestEnsureDir:
    def test_creates_missing_parents(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"
        assert ensure_dir(target) == target
        assert target.is_dir()

    def test_second_call_is_a_no_op(self, tmp_path):
        target = tmp_path / "ws"
        ensure_dir(target)
        (target / "keep.txt").write_text("x")

        ensure_dir(target)

        assert target.is_dir()
        assert (target / "keep.txt").read_text() == "x"

    def test_file_in_the_way_is_an_error(self, tmp_path):
        target = tmp_path / "ws"
        target.write_text("not a dir")
        with pytest.raises(WorkspaceError):
            ensure_dir(target)

    def test_dry_run_touches_nothing(self, tmp_path):
        ensure_dir(tmp_path / "ws", dry_run=True)
        assert not (tmp_path / "ws").exists()


class TestEnsureCleanDir:
    def test_absent(self, tmp_path):
        target = tmp_path / "ws"
        ensure_clean_dir(target)
        assert target.is_dir()
        assert list(target.iterdir()) == []

    def test_present_and_empty(self, tmp_path):
        target = tmp_path / "ws"
        target.mkdir()
        ensure_clean_dir(target)
        assert target.is_dir()
        assert list(target.iterdir()) == []

    def test_present_and_populated(self, tmp_path):
        target = tmp_path / "ws"
        (target / "samtools" / "src").mkdir(parents=True)
        (target / "samtools" / "src" / "main.c").write_text("int main;")
        (target / "stray.log").write_text("x")

        ensure_clean_dir(target)

        assert target.is_dir()
        assert list(target.iterdir()) == []

    def test_replaces_a_file(self, tmp_path):
        target = tmp_path / "ws"
        target.write_text("oops")
        ensure_clean_dir(target)
        assert target.is_dir()

    def test_failure_is_reported_as_workspace_error(self, tmp_path, monkeypatch):
        target = tmp_path / "ws"
        target.mkdir()

        def _denied(path, *args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr("ubuntu_provisioner.lib.fs.shutil.rmtree", _denied)
        with pytest.raises(WorkspaceError):
            ensure_clean_dir(target)


class TestRemoveAndAppend:
    def test_remove_missing_is_fine(self, tmp_path):
        remove_dir(tmp_path / "nope")

    def test_remove_tree(self, tmp_path):
        target = tmp_path / "ws"
        (target / "x").mkdir(parents=True)
        remove_dir(target)
        assert not target.exists()

    def test_append_repeats_content(self, tmp_path):
        rc = tmp_path / ".bashrc"
        append_text(rc, "A\n")
        append_text(rc, "A\n")
        assert rc.read_text() == "A\nA\n"
