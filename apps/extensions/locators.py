# apps/extensions/locators.py
from __future__ import annotations

import importlib.util
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigError, ResolutionError

MANIFEST_FILENAMES = ("extension.yml", "extension.yaml")


@dataclass(frozen=True)
class StaticLocator:
    base_alias: Optional[str] = None
    base_path: Optional[str] = None

    def alias(self) -> Optional[str]:
        return self.base_alias

    def path(self) -> Optional[str]:
        return self.base_path


class PackageLocator:
    """Alias = nom pointé du package, path = dossier du package."""

    def __init__(self, package: str) -> None:
        try:
            spec = importlib.util.find_spec(package)
        except (ImportError, ValueError):
            spec = None
        locations = list(spec.submodule_search_locations or []) if spec else []
        if not locations:
            raise ResolutionError(f'Package "{package}" cannot be located.')
        self.package = package
        self._path = locations[0]

    def alias(self) -> Optional[str]:
        return self.package

    def path(self) -> Optional[str]:
        return self._path


def _optional_str(data: dict, key: str, manifest: Path) -> Optional[str]:
    value: Any = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{manifest}: '{key}' doit être une chaîne non vide.")
    return value.strip()


def load_manifest(path: str | Path) -> StaticLocator:
    """
    Lit un manifest d'extension YAML:

        alias: apps.demo
        path: .          # relatif au dossier du manifest

    Un dossier est accepté: on y cherche extension.yml / extension.yaml.
    """
    manifest = Path(path)
    if manifest.is_dir():
        for name in MANIFEST_FILENAMES:
            if (manifest / name).is_file():
                manifest = manifest / name
                break
        else:
            raise ConfigError(f"Aucun manifest {MANIFEST_FILENAMES} dans {manifest}.")
    if not manifest.is_file():
        raise ConfigError(f"Manifest introuvable: {manifest}")

    try:
        data = yaml.safe_load(manifest.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{manifest}: YAML invalide ({exc}).") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{manifest}: un mapping est attendu (type={type(data).__name__}).")

    base_path = _optional_str(data, "path", manifest)
    if base_path is not None and not Path(base_path).is_absolute():
        base_path = str((manifest.parent / base_path).resolve())
    return StaticLocator(base_alias=_optional_str(data, "alias", manifest), base_path=base_path)
