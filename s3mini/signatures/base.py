# -*- coding: utf-8 -*-
"""
s3mini.signatures.base
~~~~~~~~~~~~~~~~~~~~~~

Base class for request signature implementations.
"""


class BaseSignature(object):
    """Base class for request signature implementations."""

    def __init__(self, access_key, secret_key, endpoint="s3.amazonaws.com"):
        """
        Initialize the signature implementation.

        Args:
            access_key (str): Public access key identifier
            secret_key (str or bytes): Secret key used as the HMAC key
            endpoint (str): Base storage host, optionally with a port
        """
        self.access_key = access_key
        self.secret_key = secret_key
        self.endpoint = endpoint

    def sign_request(self, request):
        """
        Sign the given request.

        Args:
            request: The request object to sign

        Returns:
            The signed request object
        """
        raise NotImplementedError("Subclasses must implement sign_request")
