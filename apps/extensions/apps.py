# apps/extensions/apps.py
from django.apps import AppConfig
import logging

log = logging.getLogger("extensions.apps")


class ExtensionsConfig(AppConfig):
    name = "apps.extensions"
    verbose_name = "Extensions"

    def ready(self):
        # Enregistre les checks et le reset du registre sur setting_changed
        from . import checks, components  # noqa: F401

        log.debug("ExtensionsConfig ready.")
