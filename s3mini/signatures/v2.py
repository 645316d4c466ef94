# -*- coding: utf-8 -*-
"""
s3mini.signatures.v2
~~~~~~~~~~~~~~~~~~~~

AWS Signature Version 2 (HMAC-SHA1) implementation.

The string to sign is built line by line: verb, Content-MD5, Content-Type,
Date, the sorted ``x-amz-*`` headers and finally the resource. The service
recomputes the same string, so the order and the header casing rules below
must not change.
"""

import base64
import hashlib
import hmac
import re
from urllib.parse import urlparse

from ..util import stringify
from .base import BaseSignature

AMZ_HEADER_PREFIX = "x-amz-"


def _header(headers, name):
    """Case-insensitive header lookup that also works on plain dicts."""
    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                value = candidate
                break
    return stringify(value) if value is not None else ""


class SignatureV2(BaseSignature):
    """
    AWS Signature Version 2 implementation.

    Produces ``Authorization: AWS {access_key}:{signature}``.
    """

    def sign_request(self, request):
        """
        Sign request using AWS Signature Version 2.

        Args:
            request: Object with ``method``, ``url`` and ``headers``; the
                ``Date`` header must already be set

        Returns:
            The same request with the Authorization header added
        """
        signature = self.sign(self.string_to_sign(request))
        request.headers["Authorization"] = "AWS {0}:{1}".format(self.access_key, signature)
        return request

    def string_to_sign(self, request):
        """
        Create the string to sign for Signature Version 2.

        Args:
            request: The request object

        Returns:
            str: String ready to be signed
        """
        headers = request.headers
        lines = [
            request.method.upper(),
            _header(headers, "Content-MD5"),
            _header(headers, "Content-Type"),
            _header(headers, "Date"),
        ]
        return (
            "\n".join(lines)
            + "\n"
            + self._get_canonicalized_amz_headers(headers)
            + self._get_canonicalized_resource(request.url)
        )

    def sign(self, string_to_sign):
        """
        Generate the HMAC-SHA1 signature of ``string_to_sign``.

        Returns:
            str: Base64 of the raw digest
        """
        if not isinstance(string_to_sign, bytes):
            string_to_sign = string_to_sign.encode("utf-8")

        key = self.secret_key
        if not isinstance(key, bytes):
            key = key.encode("utf-8")

        digest = hmac.new(key, msg=string_to_sign, digestmod=hashlib.sha1).digest()
        return base64.b64encode(digest).decode("ascii")

    def _get_canonicalized_amz_headers(self, headers):
        """
        Get canonicalized x-amz-* headers.

        Args:
            headers (dict): Request headers

        Returns:
            str: One ``key:value\\n`` line per header, sorted by key
        """
        amz_headers = {}

        for key, value in headers.items():
            key_lower = stringify(key).lower()
            if key_lower.startswith(AMZ_HEADER_PREFIX):
                value = stringify(value).strip()
                if key_lower in amz_headers:
                    amz_headers[key_lower] += "," + value
                else:
                    amz_headers[key_lower] = value

        result = ""
        for key in sorted(amz_headers.keys()):
            result += "{0}:{1}\n".format(key, amz_headers[key])

        return result

    def _get_canonicalized_resource(self, url):
        """
        Get canonicalized resource string.

        A host other than the endpoint is a virtual-hosted bucket: the part
        in front of ``.endpoint`` is moved into the path.

        Args:
            url (str): Request URL

        Returns:
            str: Canonicalized resource string
        """
        parsed_url = urlparse(url)
        path = parsed_url.path or "/"
        host = parsed_url.netloc

        if host.lower() == self.endpoint.lower():
            return path

        bucket = re.sub(
            r"\." + re.escape(self.endpoint) + "$", "", host, flags=re.IGNORECASE
        )
        return "/{0}/{1}".format(bucket, path.lstrip("/"))
