import importlib
import sys
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path

from pangolin_io.errors import DecodeError, InvalidArgumentError, ResourceNotFoundError
from pangolin_io.properties import (
    DEFAULT_COMMENT,
    dump_properties,
    load_properties,
    load_properties_from_resource,
    load_resource_bundle,
    parse_properties,
    write_properties,
)

SAMPLE = r"""
# a comment
! another comment
key1=value1
key2 = value2
key3:value3
key4 value4
   spaced.key   =   padded value  
multi = first \
        second
escaped\ key=a\=b
unicode=caf\u00e9
tabs=a\tb
windows=C:\\
empty
"""

PACKAGE = "pio_properties_fixture"


class TestParseProperties(unittest.TestCase):
    def setUp(self):
        self.props = parse_properties(SAMPLE)

    def test_separators(self):
        self.assertEqual(self.props["key1"], "value1")
        self.assertEqual(self.props["key2"], "value2")
        self.assertEqual(self.props["key3"], "value3")
        self.assertEqual(self.props["key4"], "value4")

    def test_whitespace_handling(self):
        self.assertEqual(self.props["spaced.key"], "padded value  ")
        self.assertEqual(self.props["empty"], "")

    def test_comments_are_skipped(self):
        self.assertFalse(any(key.startswith(("#", "!")) for key in self.props))

    def test_line_continuation(self):
        self.assertEqual(self.props["multi"], "first second")

    def test_escapes(self):
        self.assertEqual(self.props["escaped key"], "a=b")
        self.assertEqual(self.props["unicode"], "café")
        self.assertEqual(self.props["tabs"], "a\tb")
        # an even number of trailing backslashes does not continue the line
        self.assertEqual(self.props["windows"], "C:\\")

    def test_into_existing_mapping(self):
        target = {"keep": "me", "key1": "old"}
        result = parse_properties("key1=new\n", target)
        self.assertIs(result, target)
        self.assertEqual(target, {"keep": "me", "key1": "new"})

    def test_malformed_unicode_escape(self):
        with self.assertRaises(DecodeError):
            parse_properties("bad=\\u12")
        with self.assertRaises(DecodeError):
            parse_properties("bad=\\uZZZZ")


class TestDumpProperties(unittest.TestCase):
    def test_header_lines(self):
        stamp = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        text = dump_properties({"a": "1"}, "hello\nworld", timestamp=stamp)
        self.assertEqual(
            text.splitlines(),
            ["#hello", "#world", "#Fri Jan 02 03:04:05 UTC 2026", "a=1"],
        )

    def test_special_characters_survive_parse(self):
        original = {
            "a key": " leading space",
            "x=y": "1:2#3!4",
            "multi": "line1\nline2",
            "path": "C:\\temp",
            "umlaut": "straße",
        }
        self.assertEqual(parse_properties(dump_properties(original, "c")), original)


class TestPropertiesFiles(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_load_from_path(self):
        target = self.root / "app.properties"
        target.write_text("name=demo\nversion=2\n", encoding="utf-8")
        self.assertEqual(load_properties(target), {"name": "demo", "version": "2"})

    def test_load_latin1_file(self):
        target = self.root / "legacy.properties"
        target.write_bytes(b"name=caf\xe9\n")
        self.assertEqual(load_properties(target)["name"], "café")

    def test_load_file_with_byte_order_mark(self):
        target = self.root / "bom.properties"
        target.write_bytes(b"\xef\xbb\xbfname=demo\n")
        self.assertEqual(load_properties(target), {"name": "demo"})

    def test_load_errors(self):
        with self.assertRaises(InvalidArgumentError):
            load_properties(None)
        with self.assertRaises(ResourceNotFoundError) as ctx:
            load_properties(self.root / "absent.properties")
        self.assertIn("absent.properties", str(ctx.exception))
        with self.assertRaises(InvalidArgumentError) as ctx:
            load_properties(self.root)
        self.assertIn("dir", str(ctx.exception))

    def test_write_then_load(self):
        target = self.root / "out.properties"
        messages = []
        write_properties(target, {"colour": "blue", "size": "10"}, log=messages.append)

        lines = target.read_text(encoding="utf-8").splitlines()
        self.assertEqual(lines[0], "#" + DEFAULT_COMMENT)
        self.assertTrue(lines[1].startswith("#"))
        self.assertEqual(load_properties(target), {"colour": "blue", "size": "10"})
        self.assertEqual(messages, [f"Wrote to '{target}' okay!"])

    def test_write_requires_arguments(self):
        with self.assertRaises(InvalidArgumentError):
            write_properties(None, {})
        with self.assertRaises(InvalidArgumentError):
            write_properties(self.root / "x.properties", None)


class TestPropertiesResources(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls._tmp = tempfile.TemporaryDirectory()
        pkg = Path(cls._tmp.name) / PACKAGE
        pkg.mkdir()
        (pkg / "__init__.py").write_text("", encoding="utf-8")
        (pkg / "messages.properties").write_text("greeting=Hello\nfarewell=Bye\n", encoding="utf-8")
        sys.path.insert(0, cls._tmp.name)
        importlib.invalidate_caches()

    @classmethod
    def tearDownClass(cls):
        sys.path.remove(cls._tmp.name)
        sys.modules.pop(PACKAGE, None)
        cls._tmp.cleanup()

    def test_load_from_resource_logs(self):
        messages = []
        props = load_properties_from_resource(PACKAGE, "messages.properties", log=messages.append)
        self.assertEqual(props["greeting"], "Hello")
        self.assertEqual(
            messages,
            [f"try to load 'messages.properties' from '{PACKAGE}'", "'messages.properties' loaded Okay!"],
        )

    def test_resource_bundle_is_read_only(self):
        bundle = load_resource_bundle(PACKAGE, "messages.properties")
        self.assertEqual(bundle["farewell"], "Bye")
        with self.assertRaises(TypeError):
            bundle["farewell"] = "Ciao"  # type: ignore[index]

    def test_missing_resource(self):
        with self.assertRaises(ResourceNotFoundError):
            load_properties_from_resource(PACKAGE, "absent.properties")


if __name__ == "__main__":
    unittest.main()
