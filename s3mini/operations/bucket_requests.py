# -*- coding: utf-8 -*-
"""
Bucket management operations for s3mini.
"""

import xml.etree.ElementTree as ET

from ..options import ACL_PRIVATE
from . import Method, S3Request

S3_XML_NAMESPACE = "http://s3.amazonaws.com/doc/2006-03-01/"


def location_constraint_xml(region):
    """
    Serialize the CreateBucketConfiguration document for ``region``.

    Returns:
        bytes: XML without a declaration
    """
    root = ET.Element("CreateBucketConfiguration", {"xmlns": S3_XML_NAMESPACE})
    ET.SubElement(root, "LocationConstraint").text = region
    return ET.tostring(root, encoding="utf-8", xml_declaration=False)


class CreateBucketRequest(S3Request):
    """
    S3 request to create a bucket.

    Args:
        conn: S3 Connection object
        bucket_name (str): Name of the bucket to create
        acl (str): Canned ACL for the bucket (default: private)
        region (str, optional): Location constraint; the service default
            region is used when omitted
    """

    def __init__(self, conn, bucket_name, acl=ACL_PRIVATE, region=None):
        super(CreateBucketRequest, self).__init__(conn)
        self.bucket_name = bucket_name
        self.acl = acl or ACL_PRIVATE
        self.region = region

    def run(self):
        """Execute the bucket creation request."""
        url = self.bucket_url("", self.bucket_name)
        headers = {
            "Content-Type": "application/xml",
            "x-amz-acl": self.acl,
        }
        data = location_constraint_xml(self.region) if self.region else b""
        return self.execute(Method.PUT, url, headers=headers, data=data)


class DeleteBucketRequest(S3Request):
    """
    S3 request to delete a bucket.

    This request deletes an empty bucket; a bucket that still holds objects
    is refused by the service with 409 Conflict.
    """

    def __init__(self, conn, bucket_name):
        super(DeleteBucketRequest, self).__init__(conn)
        self.bucket_name = bucket_name

    def run(self):
        """Execute the bucket deletion request."""
        url = self.bucket_url("", self.bucket_name)
        return self.execute(Method.DELETE, url)


class HeadBucketRequest(S3Request):
    """S3 request checking that a bucket exists and is reachable."""

    def __init__(self, conn, bucket_name):
        super(HeadBucketRequest, self).__init__(conn)
        self.bucket_name = bucket_name

    def run(self):
        url = self.bucket_url("", self.bucket_name)
        return self.execute(Method.HEAD, url)
