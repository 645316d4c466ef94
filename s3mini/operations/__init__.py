# -*- coding: utf-8 -*-
"""
s3mini.operations
~~~~~~~~~~~~~~~~~

Base classes for S3 request implementations.
"""

import enum
import logging

import requests

from ..exceptions import InvalidOperation, ServiceError, TransportError
from ..util import stringify

logger = logging.getLogger(__name__)


class Method(enum.Enum):
    """HTTP verbs the executor knows how to send."""

    GET = "GET"
    PUT = "PUT"
    HEAD = "HEAD"
    DELETE = "DELETE"

    @classmethod
    def coerce(cls, method):
        """
        Turn a verb token into a ``Method``.

        Raises:
            InvalidOperation: For anything but GET, PUT, HEAD or DELETE
        """
        if isinstance(method, cls):
            return method
        try:
            return cls(stringify(method).upper())
        except (ValueError, TypeError, UnicodeDecodeError):
            raise InvalidOperation(method)


class Outcome(object):
    """
    Classified result of one request.

    Attributes:
        method (Method): Verb that was sent
        status_code (int or None): None when the transport failed
        payload: Response body for a successful GET, True for other successes,
            None on failure
        error (ServiceError or TransportError or None)
    """

    def __init__(self, method, status_code=None, payload=None, error=None):
        self.method = method
        self.status_code = status_code
        self.payload = payload
        self.error = error

    @property
    def ok(self):
        return self.error is None

    @property
    def exists(self):
        """A HEAD succeeded; any failure counts as not existing."""
        return self.ok and self.status_code == 200

    def __repr__(self):
        return "<Outcome {0} status={1} ok={2}>".format(
            self.method.value, self.status_code, self.ok
        )


def response_info(response):
    """Diagnostic metadata kept alongside a failed response."""
    elapsed = getattr(response, "elapsed", None)
    return {
        "url": getattr(response, "url", None),
        "status_code": response.status_code,
        "reason": getattr(response, "reason", None),
        "elapsed": elapsed.total_seconds() if elapsed is not None else None,
        "headers": dict(getattr(response, "headers", None) or {}),
    }


def classify(method, response):
    """
    Map an HTTP response onto an ``Outcome``.

    200 is a success for every verb, 204 only for DELETE. Any other code is
    a failure carrying a ``ServiceError``.
    """
    code = response.status_code
    if code == 200 or (code == 204 and method is Method.DELETE):
        payload = response.content if method is Method.GET else True
        return Outcome(method, code, payload=payload)

    body = response.content if method is not Method.HEAD else b""
    error = ServiceError(code, body, response_info(response))
    return Outcome(method, code, error=error)


class S3Request(object):
    """
    Base class for all S3 requests.

    Handles common functionality like URL generation, authentication,
    and sending that all S3 operations need. Every request object owns the
    headers of exactly one operation.

    Args:
        conn: The S3 connection object
    """

    def __init__(self, conn):
        """
        Initialize the S3 request.

        Args:
            conn: The connection object with auth, endpoint, etc.
        """
        self.auth = conn.auth
        self.tls = conn.tls
        self.endpoint = conn.endpoint
        self.verify = conn.verify

    def bucket_url(self, key, bucket):
        """
        Generate the complete URL for an S3 request.

        Constructs URLs in the format: protocol://bucket.endpoint/key

        Args:
            key (str): The S3 object key (can be empty for bucket operations)
            bucket (str): The S3 bucket name

        Returns:
            str: Complete URL for the S3 request

        Examples:
            >>> request.bucket_url('my-file.txt', 'my-bucket')
            'https://my-bucket.s3.amazonaws.com/my-file.txt'
            >>> request.bucket_url('', 'my-bucket')  # Bucket operation
            'https://my-bucket.s3.amazonaws.com/'
        """
        protocol = "https" if self.tls else "http"
        key = stringify(key) if key else ""
        bucket = stringify(bucket) if bucket else ""

        return "{0}://{1}.{2}/{3}".format(protocol, bucket, self.endpoint, key.lstrip("/"))

    def adapter(self):
        """
        Get the HTTP adapter for making requests.

        Returns the requests module by default, but can be overridden
        for testing with mock adapters.

        Returns:
            module: The requests module or a mock adapter
        """
        return requests

    def run(self):
        """
        Execute the S3 request.

        This method must be implemented by subclasses to define
        the specific HTTP operation to perform.

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError("Subclasses must implement the run() method")

    def execute(self, method, url, headers=None, data=None):
        """
        Send one request and classify what came back.

        Args:
            method (Method or str): GET, PUT, HEAD or DELETE
            url (str): Request URL
            headers (dict, optional): Content and x-amz-* headers; Date and
                Authorization are added by the auth hook
            data (bytes or LenWrapperStream, optional): Request body

        Returns:
            Outcome: Classified result

        Raises:
            InvalidOperation: If ``method`` is not a supported verb
        """
        method = Method.coerce(method)

        kwargs = {
            "headers": dict(headers or {}),
            "auth": self.auth,
            "verify": self.verify,
        }
        if data is not None:
            kwargs["data"] = data

        logger.debug("%s %s", method.value, url)

        adapter = self.adapter()
        try:
            response = getattr(adapter, method.value.lower())(url, **kwargs)
        except requests.exceptions.RequestException as exc:
            logger.warning("%s %s failed: %s", method.value, url, exc)
            return Outcome(method, error=TransportError(exc, url))

        outcome = classify(method, response)
        # A failed HEAD is how existence checks say "no"
        if outcome.ok or method is Method.HEAD:
            logger.debug("%s %s -> %s", method.value, url, outcome.status_code)
        else:
            logger.warning("%s %s -> %s", method.value, url, outcome.status_code)
        return outcome
