from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from ..errors import ConfigError


def _package_root() -> Path:
    # ubuntu_provisioner/lib/manifests.py -> ubuntu_provisioner
    return Path(__file__).resolve().parents[1]


def load_yaml(path: str | Path) -> Dict[str, Any]:
    """Load a YAML mapping from ``path``."""
    try:
        import yaml  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("PyYAML required to load manifests") from e

    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Manifest must be a mapping/dict: {p}")
    return data


def load_yaml_rel(rel_path: str) -> Dict[str, Any]:
    """Load a YAML file shipped inside the package (manifests/...)."""
    return load_yaml(_package_root() / rel_path.lstrip("/"))


def load_provision_manifest() -> Dict[str, Any]:
    return load_yaml_rel("manifests/provision.yaml")
