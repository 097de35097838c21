"""Tests for APT and Docker host helpers."""

import pytest

from ubuntu_provisioner.lib.docker import docker_sources_line, os_codename, parse_os_release
from ubuntu_provisioner.lib.pkg import apt_install, rewrite_mirror, set_apt_mirror

ARCHIVE = "http://archive.ubuntu.com/ubuntu"
MIRROR = "https://us.archive.ubuntu.com/ubuntu"

SOURCES = f"""\
# main archive
deb {ARCHIVE} jammy main restricted
deb-src {ARCHIVE} jammy main
deb http://security.ubuntu.com/ubuntu jammy-security main
# see {ARCHIVE} jammy for details
"""


class TestMirror:
    def test_rewrites_only_archive_entries(self):
        out = rewrite_mirror(SOURCES, ARCHIVE, MIRROR)
        assert f"deb {MIRROR} jammy main restricted" in out
        assert f"deb-src {MIRROR} jammy main" in out
        assert "deb http://security.ubuntu.com/ubuntu jammy-security main" in out
        assert f"# see {ARCHIVE} jammy for details" in out

    def test_set_mirror_backs_up_first(self, tmp_path):
        sources = tmp_path / "sources.list"
        sources.write_text(SOURCES)

        assert set_apt_mirror(str(sources), archive_url=ARCHIVE, mirror_url=MIRROR) is True

        assert (tmp_path / "sources.list.bkp").read_text() == SOURCES
        assert MIRROR in sources.read_text()

    def test_already_mirrored_is_left_alone(self, tmp_path):
        sources = tmp_path / "sources.list"
        sources.write_text(rewrite_mirror(SOURCES, ARCHIVE, MIRROR))

        assert set_apt_mirror(str(sources), archive_url=ARCHIVE, mirror_url=MIRROR) is False
        assert not (tmp_path / "sources.list.bkp").exists()

    def test_missing_sources_list(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            set_apt_mirror(str(tmp_path / "none"), archive_url=ARCHIVE, mirror_url=MIRROR)


class TestApt:
    def test_install_command(self):
        cmd = apt_install(["git", "vim"])
        assert cmd.argv == ("apt-get", "install", "-y", "git", "vim")
        assert cmd.env["DEBIAN_FRONTEND"] == "noninteractive"

    def test_install_needs_packages(self):
        with pytest.raises(ValueError):
            apt_install([])


class TestDockerSource:
    def test_parse_os_release_quotes(self):
        info = parse_os_release('NAME="Ubuntu"\nVERSION_CODENAME=jammy\n# comment\n')
        assert info == {"NAME": "Ubuntu", "VERSION_CODENAME": "jammy"}

    def test_codename_prefers_ubuntu_codename(self, tmp_path):
        p = tmp_path / "os-release"
        p.write_text("VERSION_CODENAME=vera\nUBUNTU_CODENAME=jammy\n")
        assert os_codename(str(p)) == "jammy"

    def test_codename_falls_back(self, tmp_path):
        p = tmp_path / "os-release"
        p.write_text("VERSION_CODENAME=focal\n")
        assert os_codename(str(p)) == "focal"

    def test_sources_line(self):
        line = docker_sources_line(
            arch="amd64",
            keyring="/etc/apt/keyrings/docker.asc",
            repo_url="https://download.docker.com/linux/ubuntu",
            codename="jammy",
        )
        assert line == (
            "deb [arch=amd64 signed-by=/etc/apt/keyrings/docker.asc] "
            "https://download.docker.com/linux/ubuntu jammy stable\n"
        )
