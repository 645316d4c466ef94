# -*- coding: utf-8 -*-
"""
s3mini.exceptions
~~~~~~~~~~~~~~~~~

Errors raised or recorded by s3mini.

``LocalInputError`` and ``InvalidOperation`` are raised immediately.
``TransportError`` and ``ServiceError`` are never raised by the public
operations: they are stored on the connection and can be inspected through
``Connection.last_error`` or ``Connection.error_info()``.
"""


class S3MiniError(Exception):
    """Base class for all s3mini errors."""


class LocalInputError(S3MiniError, IOError):
    """A local file handed to a store operation is missing or unreadable."""

    def __init__(self, filename):
        super(LocalInputError, self).__init__("Cannot access file: {0}".format(filename))
        self.path = filename


class InvalidOperation(S3MiniError, ValueError):
    """An HTTP verb the client does not support reached the executor."""

    def __init__(self, method):
        super(InvalidOperation, self).__init__("Invalid S3 action: {0!r}".format(method))
        self.method = method


class TransportError(S3MiniError):
    """
    The request never produced an HTTP response.

    Args:
        original: The exception raised by the transport
        url (str): The URL that was being requested
    """

    code = None
    response = None

    def __init__(self, original, url=None):
        super(TransportError, self).__init__(
            "Transport failure for {0}: {1}".format(url, original)
        )
        self.original = original
        self.info = {"url": url, "error": type(original).__name__}

    def as_dict(self):
        return {"response": self.response, "response_info": self.info, "code": self.code}


class ServiceError(S3MiniError):
    """
    The service answered with a status code that does not mean success.

    Args:
        code (int): HTTP status code
        response (bytes): Raw response body
        info (dict): Transport diagnostics (url, reason, elapsed, headers)
    """

    def __init__(self, code, response=b"", info=None):
        super(ServiceError, self).__init__("S3 responded with status {0}".format(code))
        self.code = code
        self.response = response
        self.info = info or {}

    def as_dict(self):
        return {"response": self.response, "response_info": self.info, "code": self.code}
