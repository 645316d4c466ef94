# -*- coding: utf-8 -*-
"""
s3mini.request_factory
~~~~~~~~~~~~~~~~~~~~~~

Look up request classes by operation name.
"""

from .operations import S3Request
from .operations.bucket_requests import (
    CreateBucketRequest,
    DeleteBucketRequest,
    HeadBucketRequest,
)
from .operations.object_requests import (
    DeleteRequest,
    GetRequest,
    HeadRequest,
    UploadFileRequest,
    UploadRequest,
)

REQUEST_TYPES = {
    "create_bucket": CreateBucketRequest,
    "delete_bucket": DeleteBucketRequest,
    "head_bucket": HeadBucketRequest,
    "get": GetRequest,
    "upload": UploadRequest,
    "upload_file": UploadFileRequest,
    "delete": DeleteRequest,
    "head": HeadRequest,
}


def create_request(request_type, *args, **kwargs):
    """
    Build the request object registered under ``request_type``.

    Args:
        request_type (str): One of the keys of ``REQUEST_TYPES``
        *args, **kwargs: Forwarded to the request class

    Raises:
        ValueError: If ``request_type`` is unknown
    """
    try:
        request_class = REQUEST_TYPES[request_type]
    except KeyError:
        raise ValueError("Unknown request type: {0}".format(request_type))
    return request_class(*args, **kwargs)


__all__ = [
    "S3Request",
    "CreateBucketRequest",
    "DeleteBucketRequest",
    "HeadBucketRequest",
    "GetRequest",
    "UploadRequest",
    "UploadFileRequest",
    "DeleteRequest",
    "HeadRequest",
    "create_request",
]
