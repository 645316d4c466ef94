import base64
import hashlib
import io
import os
import tempfile
import unittest

from s3mini.util import (
    LenWrapperStream,
    LocalFile,
    content_md5,
    guess_content_type,
    stringify,
)


class TestStringify(unittest.TestCase):
    def test_values(self):
        self.assertEqual(stringify(b"abc"), "abc")
        self.assertEqual(stringify("abc"), "abc")
        self.assertEqual(stringify(12), "12")


class TestContentMd5(unittest.TestCase):
    def test_empty_payload(self):
        self.assertEqual(content_md5(b""), "1B2M2Y8AsgTpgAmY7PhCfg==")

    def test_text_is_utf8_encoded(self):
        expected = base64.b64encode(hashlib.md5("é".encode("utf-8")).digest()).decode("ascii")
        self.assertEqual(content_md5("é"), expected)


class TestGuessContentType(unittest.TestCase):
    def test_known_extension(self):
        self.assertEqual(guess_content_type("abc.txt"), "text/plain")
        self.assertEqual(guess_content_type("dir/page.html"), "text/html")

    def test_unknown(self):
        self.assertIsNone(guess_content_type("no-extension"))
        self.assertIsNone(guess_content_type(""))
        self.assertIsNone(guess_content_type(None))


class TestLenWrapperStream(unittest.TestCase):
    def test_explicit_length(self):
        w = LenWrapperStream(io.BytesIO(b"abcdef"), 6)
        self.assertEqual(len(w), 6)
        self.assertEqual(w.read(2), b"ab")
        self.assertEqual(w.tell(), 2)
        w.seek(0)
        self.assertEqual(w.read(), b"abcdef")

    def test_measured_length_from_current_position(self):
        b = io.BytesIO(b"abcdef")
        b.seek(2)
        w = LenWrapperStream(b)
        self.assertEqual(len(w), 4)
        self.assertEqual(w.tell(), 2)

    def test_iteration(self):
        w = LenWrapperStream(io.BytesIO(b"abc"))
        self.assertEqual(b"".join(w), b"abc")

    def test_equality_and_repr(self):
        b = io.BytesIO(b"abc")
        w = LenWrapperStream(b)
        self.assertTrue(w == b)
        self.assertTrue(w == LenWrapperStream(b))
        self.assertFalse(w != b)
        self.assertFalse(w.closed)
        self.assertIn("BytesIO", repr(w))


class TestLocalFile(unittest.TestCase):
    def setUp(self):
        fd, self.path = tempfile.mkstemp(suffix=".json")
        with os.fdopen(fd, "wb") as fp:
            fp.write(b'{"a": 1}')

    def tearDown(self):
        os.remove(self.path)

    def test_properties(self):
        local_file = LocalFile(self.path)
        self.assertTrue(local_file.check())
        self.assertEqual(local_file.size, 8)
        self.assertEqual(local_file.md5_base64(), content_md5(b'{"a": 1}'))
        self.assertEqual(local_file.content_type(), "application/json")
        with local_file.open() as fp:
            self.assertEqual(fp.read(), b'{"a": 1}')

    def test_missing(self):
        self.assertFalse(LocalFile(self.path + ".gone").check())
