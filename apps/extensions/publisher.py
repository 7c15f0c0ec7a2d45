# apps/extensions/publisher.py
from __future__ import annotations

import logging
import os
import shutil
from hashlib import sha256
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from django.conf import settings
from django.core.files.storage import FileSystemStorage

from .conf import get_settings
from .errors import ConfigError, PublishError

log = logging.getLogger("extensions.publisher")


class StaticAssetPublisher:
    """
    Publie un fichier ou un dossier d'extension sous STATIC_ROOT/<base_dir>/<hash>/.

    - Le hash dépend du dossier publié (dossier parent pour un fichier), et de
      son mtime si use_timestamp.
    - Copie incrémentale: un fichier n'est recopié que s'il manque, s'il est plus
      ancien que la source, ou si force_copy.
    - Les URLs sont servies par WhiteNoise comme n'importe quel fichier statique.
    - Mémo par (path, use_timestamp): copy_depth n'en fait pas partie, un second
      appel avec une profondeur plus grande renvoie l'URL déjà publiée sans
      recopier (force_copy pour republier).
    """

    def __init__(
        self,
        base_dir: Optional[str] = None,
        location: Optional[str] = None,
        base_url: Optional[str] = None,
        exclude: Optional[Iterable[str]] = None,
    ) -> None:
        cfg = get_settings()
        base_dir = (base_dir if base_dir is not None else cfg.assets_base_dir).strip("/")
        if location is None:
            if not settings.STATIC_ROOT:
                raise ConfigError("STATIC_ROOT must be set to publish extension assets.")
            location = os.path.join(str(settings.STATIC_ROOT), base_dir)
        if base_url is None:
            base_url = f"{settings.STATIC_URL.rstrip('/')}/{base_dir}/" if base_dir else settings.STATIC_URL
        self.storage = FileSystemStorage(location=location, base_url=base_url)
        self.exclude = set(exclude if exclude is not None else cfg.assets_exclude)
        self._published: Dict[Tuple[str, bool], str] = {}

    def publish(
        self,
        path: str,
        use_timestamp: bool = False,
        copy_depth: int = -1,
        force_copy: bool = False,
    ) -> str:
        key = (str(path), bool(use_timestamp))
        if not force_copy and key in self._published:
            return self._published[key]

        src = Path(path)
        if not src.exists():
            raise PublishError(f'The asset "{path}" to be published does not exist.')
        src = src.resolve()

        if src.is_file():
            dir_name = self._hash(src.parent, use_timestamp)
            self._copy_file(src, Path(self.storage.path(dir_name)) / src.name, force_copy)
            url = self.storage.url(f"{dir_name}/{src.name}")
        else:
            dir_name = self._hash(src, use_timestamp)
            self._copy_tree(src, Path(self.storage.path(dir_name)), copy_depth, force_copy)
            url = self.storage.url(dir_name).rstrip("/")

        self._published[key] = url
        log.debug("Published %s -> %s (force_copy=%s)", src, url, force_copy)
        return url

    def get_published_url(self, path: str, use_timestamp: bool = False) -> Optional[str]:
        return self._published.get((str(path), bool(use_timestamp)))

    @staticmethod
    def _hash(directory: Path, use_timestamp: bool) -> str:
        h = sha256(str(directory).encode("utf-8"))
        if use_timestamp:
            h.update(str(int(directory.stat().st_mtime)).encode("ascii"))
        return h.hexdigest()[:8]

    def _copy_tree(self, src: Path, dst: Path, depth: int, force_copy: bool) -> None:
        dst.mkdir(parents=True, exist_ok=True)
        for entry in sorted(src.iterdir()):
            if entry.name in self.exclude:
                continue
            if entry.is_dir():
                if depth == 0:
                    continue
                self._copy_tree(entry, dst / entry.name, depth - 1 if depth > 0 else depth, force_copy)
            else:
                self._copy_file(entry, dst / entry.name, force_copy)

    @staticmethod
    def _copy_file(src: Path, dst: Path, force_copy: bool) -> None:
        if not force_copy and dst.exists() and dst.stat().st_mtime >= src.stat().st_mtime:
            return
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dst)
