from __future__ import annotations

import threading

from django.db import connections
from django.test import SimpleTestCase, override_settings

from apps.extensions.client_script import ClientScript
from apps.extensions.components import ComponentRegistry, build_factory, default_components
from apps.extensions.errors import ConfigError
from apps.extensions.publisher import StaticAssetPublisher


class ComponentRegistryTests(SimpleTestCase):
    def test_has_get_set(self) -> None:
        registry = ComponentRegistry()
        self.assertFalse(registry.has("cache"))
        marker = object()
        registry.set("cache", marker)
        self.assertTrue(registry.has("cache"))
        self.assertIs(registry.get("cache"), marker)

    def test_unknown_component_raises(self) -> None:
        with self.assertRaises(ConfigError):
            ComponentRegistry().get("nope")

    def test_factories_are_lazy_and_cached(self) -> None:
        calls = []

        def factory():
            calls.append(1)
            return object()

        registry = ComponentRegistry(factories={"thing": factory})
        self.assertTrue(registry.has("thing"))
        self.assertEqual(calls, [])
        first = registry.get("thing")
        self.assertIs(registry.get("thing"), first)
        self.assertEqual(calls, [1])

    def test_lookups_are_called_on_every_get(self) -> None:
        calls = []

        def lookup():
            calls.append(1)
            return object()

        registry = ComponentRegistry(lookups={"db": lookup})
        self.assertTrue(registry.has("db"))
        self.assertIsNot(registry.get("db"), registry.get("db"))
        self.assertEqual(calls, [1, 1])
        self.assertEqual(registry.names(), ["db"])

    def test_scoped_overlay_leaves_parent_untouched(self) -> None:
        parent = ComponentRegistry(components={"a": 1})
        child = parent.scoped(b=2)
        self.assertEqual(child.get("a"), 1)
        self.assertEqual(child.get("b"), 2)
        self.assertFalse(parent.has("b"))
        self.assertEqual(child.names(), ["a", "b"])


class BuildFactoryTests(SimpleTestCase):
    def test_dotted_string(self) -> None:
        self.assertIsInstance(build_factory("cs", "apps.extensions.client_script.ClientScript")(), ClientScript)

    def test_backend_with_options(self) -> None:
        cs = build_factory(
            "cs",
            {"BACKEND": "apps.extensions.client_script.ClientScript", "OPTIONS": {"default_script_position": "end"}},
        )()
        self.assertEqual(cs.default_script_position, "end")

    def test_invalid_definitions(self) -> None:
        with self.assertRaises(ConfigError):
            build_factory("x", 42)
        with self.assertRaises(ConfigError):
            build_factory("x", {"OPTIONS": {}})

    def test_import_failure_surfaces_on_first_use(self) -> None:
        factory = build_factory("x", {"BACKEND": "apps.extensions.nope.Missing"})
        with self.assertRaises(ConfigError):
            factory()


class DefaultComponentsTests(SimpleTestCase):
    def test_databases_and_asset_manager_are_registered(self) -> None:
        registry = default_components()
        self.assertIs(registry.get("default"), connections["default"])
        self.assertIsInstance(registry.get("asset_manager"), StaticAssetPublisher)
        self.assertFalse(registry.has("client_script"))

    def test_registry_is_rebuilt_when_settings_change(self) -> None:
        before = default_components()
        with override_settings(EXTENSIONS={"COMPONENTS": {}}):
            inside = default_components()
            self.assertIsNot(inside, before)
            self.assertFalse(inside.has("asset_manager"))
        self.assertTrue(default_components().has("asset_manager"))

    def test_connection_lookup_follows_calling_thread(self) -> None:
        registry = default_components()
        self.assertIs(registry.get("default"), connections["default"])
        seen = {}

        def worker() -> None:
            seen["same"] = registry.get("default") is connections["default"]

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()
        self.assertTrue(seen["same"])
