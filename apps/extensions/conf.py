# apps/extensions/conf.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS

DEFAULT_ASSET_MANAGER = "asset_manager"
DEFAULT_CLIENT_SCRIPT = "client_script"
DEFAULT_EXCLUDE = (".svn", ".git", ".gitignore")

DEFAULT_COMPONENTS: Dict[str, Any] = {
    DEFAULT_ASSET_MANAGER: {
        "BACKEND": "apps.extensions.publisher.StaticAssetPublisher",
        "OPTIONS": {},
    },
}


@dataclass(frozen=True)
class ExtensionSettings:
    connection_id: str
    asset_manager: str
    client_script: str
    components: Dict[str, Any]
    assets_base_dir: str
    assets_exclude: List[str]


def get_settings() -> ExtensionSettings:
    c = getattr(settings, "EXTENSIONS", {}) or {}
    assets = c.get("ASSETS", {}) or {}
    components = c.get("COMPONENTS")
    if components is None:
        components = DEFAULT_COMPONENTS
    return ExtensionSettings(
        connection_id=str(c.get("CONNECTION_ID") or DEFAULT_DB_ALIAS),
        asset_manager=str(c.get("ASSET_MANAGER") or DEFAULT_ASSET_MANAGER),
        client_script=str(c.get("CLIENT_SCRIPT") or DEFAULT_CLIENT_SCRIPT),
        components=dict(components),
        assets_base_dir=str(assets.get("BASE_DIR", "assets")).strip("/"),
        assets_exclude=list(assets.get("EXCLUDE", DEFAULT_EXCLUDE)),
    )
