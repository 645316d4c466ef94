# -*- coding: utf-8 -*-
"""
s3mini.connection
~~~~~~~~~~~~~~~~~

The public client. Every operation builds one request object, runs it and
turns the classified outcome into a plain return value. Failures are not
raised: the detail of the last one is kept on the connection.

A connection is not safe to share between threads running operations at
the same time, because ``last_error`` belongs to the instance. Use one
connection per thread.
"""

import logging

from .auth import S3Auth
from .options import ACL_PRIVATE
from .request_factory import create_request
from .util import stringify

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "s3.amazonaws.com"


class Base(object):
    """
    Shared state and operations of an S3 connection.

    Args:
        access_key (str): Public access key identifier
        secret_key (str or bytes): Secret key used to sign requests
        endpoint (str): Storage host, optionally with a port
        tls (bool): Use https (default) or plain http
        verify (bool or str): TLS verification setting passed to requests
        default_bucket (str, optional): Bucket used when an operation is
            called without one
    """

    def __init__(
        self,
        access_key,
        secret_key,
        endpoint=DEFAULT_ENDPOINT,
        tls=True,
        verify=True,
        default_bucket=None,
    ):
        self.auth = S3Auth(access_key, secret_key, endpoint)
        self.tls = tls
        self.verify = verify
        self.default_bucket = default_bucket
        self.last_error = None

    @property
    def endpoint(self):
        return self.auth.endpoint

    def set_host(self, host):
        """Point the connection (and its signer) at another storage host."""
        logger.debug("Switching endpoint from %s to %s", self.endpoint, host)
        self.auth.endpoint = host

    def bucket(self, bucket):
        """
        Resolve the bucket for an operation.

        Raises:
            ValueError: If neither ``bucket`` nor a default bucket is set
        """
        if bucket is None:
            bucket = self.default_bucket
        if bucket is None:
            raise ValueError("You must specify a bucket or set a default bucket")
        return stringify(bucket)

    def error_info(self):
        """
        Detail of the last failed operation.

        Returns:
            dict: ``response``, ``response_info`` and ``code``; empty when
            the last operation succeeded
        """
        if self.last_error is None:
            return {}
        return self.last_error.as_dict()

    def run(self, request):
        self.last_error = None
        outcome = self._handle_request(request)
        self.last_error = outcome.error
        return outcome

    def _handle_request(self, request):
        raise NotImplementedError("Subclasses must implement _handle_request")

    def create_bucket(self, bucket=None, acl=ACL_PRIVATE, region=None):
        """
        Create a bucket.

        Args:
            bucket (str, optional): Bucket name
            acl (str): Canned ACL for the bucket
            region (str, optional): Location constraint

        Returns:
            bool: True if the service created the bucket
        """
        request = create_request(
            "create_bucket", self, self.bucket(bucket), acl=acl, region=region
        )
        return self.run(request).ok

    def delete_bucket(self, bucket=None):
        """
        Delete an empty bucket.

        Returns:
            True on success, the HTTP status code when the service refused
            (409 for a bucket that still holds objects), or False when no
            response was received
        """
        outcome = self.run(create_request("delete_bucket", self, self.bucket(bucket)))
        if outcome.ok:
            return True
        if outcome.status_code is not None:
            return outcome.status_code
        return False

    def bucket_exists(self, bucket=None):
        """Return True if a HEAD on the bucket answers 200."""
        return self.run(create_request("head_bucket", self, self.bucket(bucket))).exists

    def store_string(self, data, key, bucket=None, options=None):
        """
        Store an in-memory payload under ``key``.

        Args:
            data (bytes or str): Object contents
            key (str): Object key
            bucket (str, optional): Bucket name
            options (StoreOptions, optional): Upload settings

        Returns:
            bool: True if the service accepted the payload
        """
        request = create_request(
            "upload", self, key, data, self.bucket(bucket), options=options
        )
        return self.run(request).ok

    def store_file(self, filename, key, bucket=None, options=None):
        """
        Stream a local file to ``key``.

        Raises:
            LocalInputError: If ``filename`` is missing or unreadable

        Returns:
            bool: True if the service accepted the file
        """
        request = create_request(
            "upload_file", self, key, filename, self.bucket(bucket), options=options
        )
        return self.run(request).ok

    def get(self, key, bucket=None):
        """
        Download an object.

        Returns:
            bytes or None: Object contents, None on failure
        """
        outcome = self.run(create_request("get", self, key, self.bucket(bucket)))
        return outcome.payload if outcome.ok else None

    def exists(self, key, bucket=None):
        """Return True if a HEAD on the object answers 200."""
        return self.run(create_request("head", self, key, self.bucket(bucket))).exists

    def delete(self, key, bucket=None):
        """
        Delete an object. Deleting a missing key is reported as success by
        the service.
        """
        return self.run(create_request("delete", self, key, self.bucket(bucket))).ok


class Connection(Base):
    """
    Blocking S3 connection: each operation returns once the service has
    answered or the transport has failed.
    """

    def _handle_request(self, request):
        return request.run()

    def __repr__(self):
        return "<Connection endpoint={0!r} tls={1!r}>".format(self.endpoint, self.tls)
