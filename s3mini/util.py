# -*- coding: utf-8 -*-
"""
s3mini.util
~~~~~~~~~~~

Small helpers shared by the request and connection layers: text coercion,
length-aware upload streams, local file access, payload hashing and MIME
type guessing.
"""

import base64
import hashlib
import mimetypes
import os

CHUNK_SIZE = 64 * 1024


def stringify(value):
    """
    Coerce keys, bucket names and header values to text.

    Bytes are decoded as UTF-8, anything else goes through ``str()``.
    """
    if isinstance(value, bytes):
        return value.decode("utf-8")
    if isinstance(value, str):
        return value
    return str(value)


def content_md5(data):
    """
    Base64 of the raw MD5 digest of ``data``, as sent in ``Content-MD5``.

    Args:
        data (bytes or str): Payload; text is UTF-8 encoded first
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(hashlib.md5(data).digest()).decode("ascii")


def guess_content_type(name):
    """
    Best-guess MIME type for a file name or object key.

    Returns:
        str or None: Bare MIME type without parameters
    """
    if not name:
        return None
    guessed_type, _ = mimetypes.guess_type(stringify(name))
    if guessed_type:
        return guessed_type.split(";", 1)[0].strip()
    return None


class LenWrapperStream(object):
    """
    Expose the byte length of an upload stream through ``len()``.

    requests uses ``len()`` to send a ``Content-Length`` header instead of
    falling back to chunked transfer encoding. When ``length`` is not given
    it is measured by seeking to the end of the stream.
    """

    def __init__(self, stream, length=None):
        self.stream = stream
        if length is None:
            length = self._measure(stream)
        self.length = length

    @staticmethod
    def _measure(stream):
        position = stream.tell()
        stream.seek(0, os.SEEK_END)
        end = stream.tell()
        stream.seek(position, os.SEEK_SET)
        return end - position

    def read(self, n=-1):
        return self.stream.read(n)

    def seek(self, pos, mode=os.SEEK_SET):
        return self.stream.seek(pos, mode)

    def tell(self):
        return self.stream.tell()

    def __iter__(self):
        while True:
            chunk = self.stream.read(CHUNK_SIZE)
            if not chunk:
                break
            yield chunk

    def __len__(self):
        return self.length

    def __eq__(self, other):
        if isinstance(other, LenWrapperStream):
            return self.stream is other.stream
        return self.stream is other

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = object.__hash__

    @property
    def closed(self):
        return self.stream.closed

    def __repr__(self):
        return "<LenWrapperStream {0!r} length={1}>".format(self.stream, self.length)


class LocalFile(object):
    """
    A file on local disk that is about to be uploaded.

    Everything the upload needs (readability, size, digest) is taken from
    the file before the PUT starts.
    """

    def __init__(self, path):
        self.path = path

    def check(self):
        """Return True when the path is an existing, readable regular file."""
        return os.path.isfile(self.path) and os.access(self.path, os.R_OK)

    @property
    def size(self):
        return os.path.getsize(self.path)

    def open(self):
        return open(self.path, "rb")

    def md5_base64(self):
        digest = hashlib.md5()
        with self.open() as fp:
            for chunk in iter(lambda: fp.read(CHUNK_SIZE), b""):
                digest.update(chunk)
        return base64.b64encode(digest.digest()).decode("ascii")

    def content_type(self):
        return guess_content_type(os.path.basename(self.path))

    def __repr__(self):
        return "<LocalFile {0!r}>".format(self.path)
