"""Publish the assets of an extension described by an extension.yml manifest."""
from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from apps.extensions.behaviors import ExtensionBehavior, ExtensionConfig
from apps.extensions.errors import ConfigError, PublishError
from apps.extensions.locators import load_manifest


class Command(BaseCommand):
    help = "Publish extension assets under STATIC_ROOT and print the resulting URL."

    def add_arguments(self, parser) -> None:
        parser.add_argument("manifest", help="extension.yml file or the directory holding it")
        parser.add_argument("path", nargs="?", default="assets", help="assets path relative to the extension")
        parser.add_argument("--force-copy", action="store_true", help="copy files even if already published")

    def handle(self, *args, **options) -> None:
        try:
            locator = load_manifest(options["manifest"])
            behavior = ExtensionBehavior(locator, ExtensionConfig.from_settings())
            url = behavior.publish(options["path"], force_copy=options["force_copy"])
        except (ConfigError, PublishError) as exc:
            raise CommandError(str(exc)) from exc

        if url is None:
            raise CommandError("No asset manager component is configured.")
        if options["verbosity"] >= 2:
            self.stdout.write(f"alias: {locator.alias() or '(unset)'}")
            self.stdout.write(f"path: {locator.path() or '(unset)'}")
        self.stdout.write(url)
