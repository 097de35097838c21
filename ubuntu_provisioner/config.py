from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .errors import ConfigError
from .lib.manifests import load_provision_manifest, load_yaml
from .lib.source import BuildTask, InstallGlob, RecipeCommand, RecipeItem


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into a copy of ``base``. Mappings merge, everything else replaces."""

    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _str_list(value: Any, where: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"{where} must be a list")
    return [str(v).strip() for v in value if str(v).strip()]


def _number(kind: Any, value: Any, where: str) -> Any:
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{where} must be a number, got {value!r}") from e


def _parse_recipe_item(item: Any, where: str) -> RecipeItem:
    if not isinstance(item, dict):
        raise ConfigError(f"{where}: recipe items must be mappings")
    subdir = item.get("subdir")
    if "run" in item:
        argv = _str_list(item["run"], f"{where}.run")
        if not argv:
            raise ConfigError(f"{where}.run must not be empty")
        return RecipeCommand(tuple(argv), subdir=subdir)
    if "install" in item:
        dest = item.get("dest")
        if not dest:
            raise ConfigError(f"{where}.install requires dest")
        return InstallGlob(str(item["install"]), str(dest), subdir=subdir)
    raise ConfigError(f"{where}: recipe item needs 'run' or 'install'")


@dataclass(frozen=True)
class ProvisionConfig:
    raw: Dict[str, Any]

    def _section(self, name: str) -> Dict[str, Any]:
        sec = self.raw.get(name) or {}
        if not isinstance(sec, dict):
            raise ConfigError(f"{name} must be a mapping")
        return sec

    def validate(self) -> "ProvisionConfig":
        """Read every setting once so mistakes surface before the host is touched."""

        for name, attr in vars(type(self)).items():
            if isinstance(attr, property):
                getattr(self, name)
        return self

    @property
    def workspace(self) -> Path:
        return Path(str(self._section("paths").get("workspace") or "/tmp/build"))

    @property
    def retry_attempts(self) -> int:
        attempts = _number(int, self._section("retry").get("attempts", 3), "retry.attempts")
        if attempts < 1:
            raise ConfigError("retry.attempts must be >= 1")
        return attempts

    @property
    def retry_delay(self) -> float:
        delay = _number(float, self._section("retry").get("delay", 2), "retry.delay")
        if delay < 0:
            raise ConfigError("retry.delay must be >= 0")
        return delay

    @property
    def apt_sources_list(self) -> str:
        return str(self._section("apt").get("sources_list") or "/etc/apt/sources.list")

    @property
    def apt_archive_url(self) -> str:
        return str(self._section("apt").get("archive_url") or "http://archive.ubuntu.com/ubuntu")

    @property
    def apt_mirror_url(self) -> Optional[str]:
        mirror = self._section("apt").get("mirror_url")
        return str(mirror) if mirror else None

    @property
    def base_packages(self) -> List[str]:
        return _str_list(self._section("apt").get("base_packages"), "apt.base_packages")

    @property
    def docker_keyring_dir(self) -> str:
        return str(self._section("docker").get("keyring_dir") or "/etc/apt/keyrings")

    @property
    def docker_gpg_url(self) -> str:
        return str(self._section("docker").get("gpg_url") or "https://download.docker.com/linux/ubuntu/gpg")

    @property
    def docker_repo_url(self) -> str:
        return str(self._section("docker").get("repo_url") or "https://download.docker.com/linux/ubuntu")

    @property
    def docker_sources_list(self) -> str:
        return str(self._section("docker").get("sources_list") or "/etc/apt/sources.list.d/docker.list")

    @property
    def docker_packages(self) -> List[str]:
        return _str_list(self._section("docker").get("packages"), "docker.packages")

    @property
    def docker_images(self) -> List[str]:
        return _str_list(self._section("docker").get("images"), "docker.images")

    @property
    def vim_plug_url(self) -> str:
        return str(
            self._section("dotfiles").get("vim_plug_url")
            or "https://raw.githubusercontent.com/junegunn/vim-plug/master/plug.vim"
        )

    @property
    def conda_installer_url(self) -> str:
        url = self._section("conda").get("installer_url")
        if not url:
            raise ConfigError("conda.installer_url is required")
        return str(url)

    @property
    def conda_prefix(self) -> str:
        """Install prefix, relative to the target user's home unless absolute."""
        return str(self._section("conda").get("prefix") or "miniconda3")

    @property
    def conda_channels(self) -> List[str]:
        return _str_list(self._section("conda").get("channels"), "conda.channels")

    @property
    def conda_envs(self) -> List[Tuple[str, List[str]]]:
        envs = self._section("conda").get("envs") or []
        if not isinstance(envs, list):
            raise ConfigError("conda.envs must be a list")
        out: List[Tuple[str, List[str]]] = []
        for i, env in enumerate(envs):
            if not isinstance(env, dict) or not env.get("name"):
                raise ConfigError(f"conda.envs[{i}] needs a name")
            out.append((str(env["name"]), _str_list(env.get("specs"), f"conda.envs[{i}].specs")))
        return out

    @property
    def source_tools(self) -> List[BuildTask]:
        tools = self.raw.get("source_tools") or []
        if not isinstance(tools, list):
            raise ConfigError("source_tools must be a list")
        out: List[BuildTask] = []
        seen: set[str] = set()
        for i, tool in enumerate(tools):
            where = f"source_tools[{i}]"
            if not isinstance(tool, dict) or not tool.get("name") or not tool.get("url"):
                raise ConfigError(f"{where} needs name and url")
            name = str(tool["name"])
            if "/" in name or name in {".", ".."}:
                raise ConfigError(f"{where}.name must be a plain directory name: {name}")
            if name in seen:
                raise ConfigError(f"{where}.name duplicated: {name}")
            seen.add(name)
            recipe = tool.get("recipe") or []
            if not isinstance(recipe, list):
                raise ConfigError(f"{where}.recipe must be a list")
            items = tuple(_parse_recipe_item(r, f"{where}.recipe[{j}]") for j, r in enumerate(recipe))
            out.append(BuildTask(source_url=str(tool["url"]), local_name=name, recipe=items))
        return out


def load_config(path: Optional[str] = None) -> ProvisionConfig:
    """Load the packaged manifest, with ``path`` (YAML) merged over it."""

    raw = load_provision_manifest()
    if path:
        p = Path(path)
        if not p.exists():
            raise ConfigError(f"Config file not found: {path}")
        if p.suffix.lower() not in {".yaml", ".yml"}:
            raise ConfigError("provision config must be YAML")
        raw = deep_merge(raw, load_yaml(p))
    return ProvisionConfig(raw=raw).validate()
