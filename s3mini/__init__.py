# -*- coding: utf-8 -*-
import logging

from .connection import Connection
from .exceptions import (
    InvalidOperation,
    LocalInputError,
    S3MiniError,
    ServiceError,
    TransportError,
)
from .options import (
    ACL_AUTHENTICATED_READ,
    ACL_PRIVATE,
    ACL_PUBLIC_READ,
    ACL_PUBLIC_READ_WRITE,
    STORAGE_CLASS_RRS,
    STORAGE_CLASS_STANDARD,
    StoreOptions,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__title__ = 's3mini'
__version__ = '0.1.0'
__license__ = 'MIT'
__all__ = [
    "Connection",
    "StoreOptions",
    "S3MiniError",
    "LocalInputError",
    "InvalidOperation",
    "TransportError",
    "ServiceError",
    "ACL_PRIVATE",
    "ACL_PUBLIC_READ",
    "ACL_PUBLIC_READ_WRITE",
    "ACL_AUTHENTICATED_READ",
    "STORAGE_CLASS_STANDARD",
    "STORAGE_CLASS_RRS",
]
