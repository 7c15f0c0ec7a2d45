# apps/extensions/client_script.py
from __future__ import annotations

import logging
from typing import Dict, Optional

from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString

log = logging.getLogger("extensions.client_script")

POS_HEAD = "head"
POS_BEGIN = "begin"
POS_END = "end"
POSITIONS = (POS_HEAD, POS_BEGIN, POS_END)


class ClientScript:
    """
    Registre des CSS/JS d'une requête.

    Une URL n'apparaît qu'une fois: un nouvel enregistrement remplace le
    précédent (média/position) sans changer l'ordre d'apparition.
    """

    default_script_position = POS_HEAD

    def __init__(self, default_script_position: Optional[str] = None) -> None:
        if default_script_position is not None:
            self.default_script_position = self._check_position(default_script_position)
        self.css_files: Dict[str, str] = {}
        self.script_files: Dict[str, Dict[str, str]] = {pos: {} for pos in POSITIONS}

    @staticmethod
    def _check_position(position: str) -> str:
        if position not in POSITIONS:
            raise ValueError(f"Position inconnue: {position!r}. Attendu: {', '.join(POSITIONS)}")
        return position

    def register_css_file(self, url: str, media: str = "") -> "ClientScript":
        self.css_files[url] = media or ""
        log.debug("CSS registered: %s", url)
        return self

    def register_script_file(self, url: str, position: Optional[str] = None) -> "ClientScript":
        position = self._check_position(position or self.default_script_position)
        for pos, files in self.script_files.items():
            if pos != position:
                files.pop(url, None)
        self.script_files[position][url] = url
        log.debug("Script registered: %s (%s)", url, position)
        return self

    def is_css_file_registered(self, url: str) -> bool:
        return url in self.css_files

    def is_script_file_registered(self, url: str, position: Optional[str] = None) -> bool:
        if position is None:
            return any(url in files for files in self.script_files.values())
        return url in self.script_files.get(position, {})

    def render_css(self) -> SafeString:
        return format_html_join(
            "\n",
            "{}",
            (
                (
                    format_html('<link rel="stylesheet" href="{}" media="{}">', url, media)
                    if media
                    else format_html('<link rel="stylesheet" href="{}">', url),
                )
                for url, media in self.css_files.items()
            ),
        )

    def render_scripts(self, position: str = POS_HEAD) -> SafeString:
        files = self.script_files[self._check_position(position)]
        return format_html_join("\n", '<script src="{}"></script>', ((url,) for url in files))

    def reset(self) -> None:
        self.css_files.clear()
        for files in self.script_files.values():
            files.clear()
