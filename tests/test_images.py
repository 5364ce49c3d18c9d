import importlib
import io
import sys
import tempfile
import unittest
from pathlib import Path

from PIL import Image

from pangolin_io.errors import DecodeError, InvalidArgumentError, ResourceNotFoundError
from pangolin_io.images import load_image, load_image_from_resource

PACKAGE = "pio_image_fixture"


def _png_bytes(size=(4, 3), color="red") -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


class TestLoadImage(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_decodes_png(self):
        target = self.root / "pixel.png"
        target.write_bytes(_png_bytes())
        img = load_image(target)
        self.assertEqual(img.size, (4, 3))
        self.assertEqual(img.format, "PNG")
        self.assertEqual(img.getpixel((0, 0)), (255, 0, 0))

    def test_file_can_be_removed_after_loading(self):
        target = self.root / "pixel.png"
        target.write_bytes(_png_bytes())
        img = load_image(target)
        target.unlink()
        self.assertEqual(img.getpixel((1, 1)), (255, 0, 0))

    def test_unreadable_path(self):
        with self.assertRaises(ResourceNotFoundError) as ctx:
            load_image(self.root / "absent.png")
        self.assertIn("is not readable", str(ctx.exception))
        with self.assertRaises(ResourceNotFoundError):
            load_image(self.root)

    def test_garbage_is_a_decode_error(self):
        target = self.root / "fake.png"
        target.write_bytes(b"definitely not an image")
        with self.assertRaises(DecodeError):
            load_image(target)

    def test_truncated_image_is_a_decode_error(self):
        target = self.root / "cut.png"
        buffer = io.BytesIO()
        Image.effect_noise((64, 64), 64).save(buffer, format="PNG")
        data = buffer.getvalue()
        target.write_bytes(data[: len(data) // 2])
        with self.assertRaises(DecodeError):
            load_image(target)

    def test_none_path(self):
        with self.assertRaises(InvalidArgumentError):
            load_image(None)


class TestLoadImageFromResource(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls._tmp = tempfile.TemporaryDirectory()
        pkg = Path(cls._tmp.name) / PACKAGE / "icons"
        pkg.mkdir(parents=True)
        (pkg.parent / "__init__.py").write_text("", encoding="utf-8")
        (pkg / "logo.png").write_bytes(_png_bytes(size=(2, 2), color="blue"))
        sys.path.insert(0, cls._tmp.name)
        importlib.invalidate_caches()

    @classmethod
    def tearDownClass(cls):
        sys.path.remove(cls._tmp.name)
        sys.modules.pop(PACKAGE, None)
        cls._tmp.cleanup()

    def test_loads_bundled_image(self):
        img = load_image_from_resource(PACKAGE, "icons/logo.png")
        self.assertEqual(img.size, (2, 2))
        self.assertEqual(img.getpixel((0, 0)), (0, 0, 255))

    def test_missing_bundled_image(self):
        with self.assertRaises(ResourceNotFoundError):
            load_image_from_resource(PACKAGE, "icons/absent.png")


if __name__ == "__main__":
    unittest.main()
