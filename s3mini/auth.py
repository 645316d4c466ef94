# -*- coding: utf-8 -*-
"""
s3mini.auth
~~~~~~~~~~~

requests authentication hook that stamps and signs every outgoing request.
"""

from requests.auth import AuthBase

from .datetime_utils import http_date
from .signatures import SignatureV2


class S3Auth(AuthBase):
    """
    Attach ``Date`` and ``Authorization`` headers to a prepared request.

    The ``Date`` value is computed once here and the signer reads it back
    from the request headers, so the transmitted and signed dates always
    agree.

    Args:
        access_key (str): Public access key identifier
        secret_key (str or bytes): Secret key
        endpoint (str): Base storage host used to spot virtual-hosted buckets
    """

    def __init__(self, access_key, secret_key, endpoint="s3.amazonaws.com"):
        self.access_key = access_key
        self.signer = SignatureV2(access_key, secret_key, endpoint)

    @property
    def endpoint(self):
        return self.signer.endpoint

    @endpoint.setter
    def endpoint(self, value):
        self.signer.endpoint = value

    def __call__(self, request):
        request.headers["Date"] = http_date()
        return self.signer.sign_request(request)

    def __repr__(self):
        return "<S3Auth access_key={0!r} endpoint={1!r}>".format(
            self.access_key, self.endpoint
        )
