# -*- coding: utf-8 -*-
"""
s3mini.options
~~~~~~~~~~~~~~

Canned ACLs, storage classes and the per-upload options structure.
"""

ACL_PRIVATE = "private"
ACL_PUBLIC_READ = "public-read"
ACL_PUBLIC_READ_WRITE = "public-read-write"
ACL_AUTHENTICATED_READ = "authenticated-read"

STORAGE_CLASS_STANDARD = "STANDARD"
STORAGE_CLASS_RRS = "REDUCED_REDUNDANCY"

ENCRYPTION_AES256 = "AES256"

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class StoreOptions(object):
    """
    Settings applied to a single object upload.

    Args:
        acl (str): Canned ACL sent as ``x-amz-acl`` (default: private)
        storage_class (str): Sent as ``x-amz-storage-class`` (default: STANDARD)
        encrypt (bool): Ask for AES256 server-side encryption (default: True)
        content_type (str, optional): Explicit MIME type; guessed when omitted
    """

    def __init__(
        self,
        acl=ACL_PRIVATE,
        storage_class=STORAGE_CLASS_STANDARD,
        encrypt=True,
        content_type=None,
    ):
        self.acl = acl or ACL_PRIVATE
        self.storage_class = storage_class or STORAGE_CLASS_STANDARD
        self.encrypt = encrypt
        self.content_type = content_type

    def amz_headers(self):
        """Service headers for an upload using these options."""
        headers = {
            "x-amz-acl": self.acl,
            "x-amz-storage-class": self.storage_class,
        }
        if self.encrypt:
            headers["x-amz-server-side-encryption"] = ENCRYPTION_AES256
        return headers

    def __repr__(self):
        return "<StoreOptions acl={0!r} storage_class={1!r} encrypt={2!r} content_type={3!r}>".format(
            self.acl, self.storage_class, self.encrypt, self.content_type
        )
