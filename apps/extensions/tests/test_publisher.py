from __future__ import annotations

import tempfile
from pathlib import Path

from django.test import SimpleTestCase, override_settings

from apps.extensions.errors import PublishError
from apps.extensions.publisher import StaticAssetPublisher


class StaticAssetPublisherTests(SimpleTestCase):
    def setUp(self) -> None:
        self._src = tempfile.TemporaryDirectory()
        self._dst = tempfile.TemporaryDirectory()
        self.addCleanup(self._src.cleanup)
        self.addCleanup(self._dst.cleanup)

        self.src = Path(self._src.name) / "gallery" / "assets"
        (self.src / "css").mkdir(parents=True)
        (self.src / "js" / "lib").mkdir(parents=True)
        (self.src / ".git").mkdir()
        (self.src / "css" / "gallery.css").write_text("body{}")
        (self.src / "js" / "gallery.js").write_text("var g;")
        (self.src / "js" / "lib" / "swipe.js").write_text("var s;")
        (self.src / ".git" / "HEAD").write_text("ref")
        (self.src / "README").write_text("readme")

        self.dst = Path(self._dst.name)
        self.publisher = StaticAssetPublisher(location=str(self.dst), base_url="/static/assets/")

    def _published_dir(self, url: str) -> Path:
        return self.dst / url.rsplit("/", 1)[-1]

    def test_directory_is_copied_under_hash(self) -> None:
        url = self.publisher.publish(str(self.src))

        self.assertRegex(url, r"^/static/assets/[0-9a-f]{8}$")
        target = self._published_dir(url)
        self.assertEqual((target / "css" / "gallery.css").read_text(), "body{}")
        self.assertTrue((target / "js" / "lib" / "swipe.js").is_file())
        self.assertTrue((target / "README").is_file())
        self.assertFalse((target / ".git").exists())

    def test_copy_depth_limits_recursion(self) -> None:
        url = self.publisher.publish(str(self.src), copy_depth=0)
        target = self._published_dir(url)
        self.assertTrue((target / "README").is_file())
        self.assertFalse((target / "css").exists())

        with tempfile.TemporaryDirectory() as other_dst:
            publisher = StaticAssetPublisher(location=other_dst, base_url="/static/assets/")
            url = publisher.publish(str(self.src), copy_depth=1)
            target = Path(other_dst) / url.rsplit("/", 1)[-1]
            self.assertTrue((target / "js" / "gallery.js").is_file())
            self.assertFalse((target / "js" / "lib").exists())

    def test_memo_ignores_copy_depth_until_force_copy(self) -> None:
        url = self.publisher.publish(str(self.src), copy_depth=0)
        target = self._published_dir(url)

        self.assertEqual(self.publisher.publish(str(self.src), copy_depth=-1), url)
        self.assertFalse((target / "css").exists())

        self.publisher.publish(str(self.src), copy_depth=-1, force_copy=True)
        self.assertTrue((target / "css" / "gallery.css").is_file())

    def test_single_file(self) -> None:
        url = self.publisher.publish(str(self.src / "css" / "gallery.css"))
        self.assertTrue(url.startswith("/static/assets/"))
        self.assertTrue(url.endswith("/gallery.css"))
        hash_dir = url.split("/")[-2]
        self.assertTrue((self.dst / hash_dir / "gallery.css").is_file())

    def test_hash_is_stable_across_instances(self) -> None:
        other = StaticAssetPublisher(location=str(self.dst), base_url="/static/assets/")
        self.assertEqual(self.publisher.publish(str(self.src)), other.publish(str(self.src)))
        self.assertEqual(self.publisher.get_published_url(str(self.src)), other.get_published_url(str(self.src)))

    def test_force_copy_overwrites_published_files(self) -> None:
        url = self.publisher.publish(str(self.src))
        published = self._published_dir(url) / "css" / "gallery.css"
        published.write_text("tampered")

        self.publisher.publish(str(self.src))
        self.assertEqual(published.read_text(), "tampered")

        self.publisher.publish(str(self.src), force_copy=True)
        self.assertEqual(published.read_text(), "body{}")

    def test_missing_path(self) -> None:
        with self.assertRaises(PublishError):
            self.publisher.publish(str(self.src / "nope"))

    @override_settings(STATIC_URL="/s/", EXTENSIONS={"ASSETS": {"BASE_DIR": "ext", "EXCLUDE": ["README"]}})
    def test_defaults_come_from_settings(self) -> None:
        with override_settings(STATIC_ROOT=str(self.dst)):
            publisher = StaticAssetPublisher()
            url = publisher.publish(str(self.src))
        self.assertTrue(url.startswith("/s/ext/"))
        target = self.dst / "ext" / url.rsplit("/", 1)[-1]
        self.assertTrue((target / "css" / "gallery.css").is_file())
        self.assertFalse((target / "README").exists())
        self.assertTrue((target / ".git").exists())
