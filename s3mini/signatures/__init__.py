# -*- coding: utf-8 -*-
"""
s3mini.signatures
~~~~~~~~~~~~~~~~~

Request signature implementations.
"""

from .base import BaseSignature
from .v2 import SignatureV2

__all__ = ["BaseSignature", "SignatureV2"]
