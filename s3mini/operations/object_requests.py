# -*- coding: utf-8 -*-
"""
s3mini.operations.object_requests
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

S3 object-level operations (upload, download, delete, head).
"""

import logging

from ..exceptions import LocalInputError
from ..options import DEFAULT_CONTENT_TYPE, StoreOptions
from ..util import LenWrapperStream, LocalFile, content_md5, guess_content_type
from . import Method, S3Request

logger = logging.getLogger(__name__)


class GetRequest(S3Request):
    """
    Download an object from S3.

    Args:
        conn: S3 connection object
        key (str): S3 object key to download
        bucket (str): S3 bucket name
    """

    def __init__(self, conn, key, bucket):
        super(GetRequest, self).__init__(conn)
        self.key = key
        self.bucket = bucket

    def run(self):
        """
        Execute the download request.

        Returns:
            Outcome: payload holds the object bytes on success
        """
        url = self.bucket_url(self.key, self.bucket)
        return self.execute(Method.GET, url)


class UploadRequest(S3Request):
    """
    Upload an in-memory payload to S3.

    Args:
        conn: S3 connection object
        key (str): S3 object key for the upload
        data (bytes or str): Object contents; text is stored as UTF-8
        bucket (str): S3 bucket name
        options (StoreOptions, optional): ACL, storage class, encryption and
            content type settings
    """

    def __init__(self, conn, key, data, bucket, options=None):
        super(UploadRequest, self).__init__(conn)
        self.key = key
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.data = data
        self.bucket = bucket
        self.options = options or StoreOptions()

    def run(self):
        """
        Execute the upload request.

        Returns:
            Outcome: Result of the PUT
        """
        headers = self._build_headers(content_md5(self.data))
        url = self.bucket_url(self.key, self.bucket)
        return self.execute(Method.PUT, url, headers=headers, data=self.data)

    def _build_headers(self, md5):
        """
        Build HTTP headers for the upload request.

        Returns:
            dict: Content and x-amz-* headers for the upload
        """
        headers = self.options.amz_headers()
        headers["Content-Type"] = self._determine_content_type()
        headers["Content-MD5"] = md5
        return headers

    def _guess_content_type(self):
        return guess_content_type(self.key)

    def _determine_content_type(self):
        """
        Determine the content type for the upload.

        Returns:
            str: MIME content type
        """
        if self.options.content_type:
            return self.options.content_type
        return self._guess_content_type() or DEFAULT_CONTENT_TYPE


class UploadFileRequest(UploadRequest):
    """
    Stream a local file to S3.

    The file is checked, hashed and measured before the PUT starts; its
    length is declared up front so the body is sent with Content-Length.

    Args:
        conn: S3 connection object
        key (str): S3 object key for the upload
        filename (str): Path of the local file
        bucket (str): S3 bucket name
        options (StoreOptions, optional): Upload settings

    Raises:
        LocalInputError: If the file is missing or unreadable
    """

    def __init__(self, conn, key, filename, bucket, options=None):
        local_file = LocalFile(filename)
        if not local_file.check():
            raise LocalInputError(filename)

        super(UploadFileRequest, self).__init__(conn, key, b"", bucket, options)
        self.local_file = local_file

    def _guess_content_type(self):
        return self.local_file.content_type() or guess_content_type(self.key)

    def run(self):
        headers = self._build_headers(self.local_file.md5_base64())
        size = self.local_file.size
        url = self.bucket_url(self.key, self.bucket)

        logger.debug("Uploading %s (%d bytes) to %s", self.local_file.path, size, url)

        # requests falls back to chunked encoding for zero-length streams
        if size == 0:
            return self.execute(Method.PUT, url, headers=headers, data=b"")

        with self.local_file.open() as fp:
            data = LenWrapperStream(fp, size)
            return self.execute(Method.PUT, url, headers=headers, data=data)


class DeleteRequest(S3Request):
    """
    Delete an object from S3.

    Args:
        conn: S3 connection object
        key (str): S3 object key to delete
        bucket (str): S3 bucket name
    """

    def __init__(self, conn, key, bucket):
        super(DeleteRequest, self).__init__(conn)
        self.key = key
        self.bucket = bucket

    def run(self):
        url = self.bucket_url(self.key, self.bucket)
        return self.execute(Method.DELETE, url)


class HeadRequest(S3Request):
    """
    Get metadata for an S3 object without downloading content.

    Args:
        conn: S3 connection object
        key (str): S3 object key
        bucket (str): S3 bucket name
    """

    def __init__(self, conn, key, bucket):
        super(HeadRequest, self).__init__(conn)
        self.key = key
        self.bucket = bucket

    def run(self):
        url = self.bucket_url(self.key, self.bucket)
        return self.execute(Method.HEAD, url)
