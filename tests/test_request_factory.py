import unittest

from flexmock import flexmock

from s3mini import Connection
from s3mini.operations import Method, Outcome
from s3mini.request_factory import (
    REQUEST_TYPES,
    CreateBucketRequest,
    DeleteBucketRequest,
    DeleteRequest,
    GetRequest,
    HeadBucketRequest,
    HeadRequest,
    UploadRequest,
    create_request,
)


class DummyConn(Connection):
    def __init__(self):
        super(DummyConn, self).__init__("key", "secret", endpoint="localhost:9000", tls=False)


def expect(req, method, url):
    flexmock(req).should_receive("execute").with_args(method, url).and_return(
        Outcome(method, 200, True)
    ).once()


class TestRequestFactory(unittest.TestCase):
    def setUp(self):
        self.conn = DummyConn()

    def test_unknown_type(self):
        with self.assertRaises(ValueError):
            create_request("list", self.conn)

    def test_known_types(self):
        self.assertIsInstance(create_request("get", self.conn, "k", "b"), GetRequest)
        self.assertIsInstance(
            create_request("upload", self.conn, "k", b"x", "b"), UploadRequest
        )
        self.assertIsInstance(
            create_request("create_bucket", self.conn, "b"), CreateBucketRequest
        )
        self.assertEqual(len(REQUEST_TYPES), 8)

    def test_get_request(self):
        req = GetRequest(self.conn, "key", "bucket")
        expect(req, Method.GET, "http://bucket.localhost:9000/key")
        req.run()

    def test_delete_request(self):
        req = DeleteRequest(self.conn, "key", "bucket")
        expect(req, Method.DELETE, "http://bucket.localhost:9000/key")
        req.run()

    def test_head_request(self):
        req = HeadRequest(self.conn, "key", "bucket")
        expect(req, Method.HEAD, "http://bucket.localhost:9000/key")
        req.run()

    def test_head_bucket_request(self):
        req = HeadBucketRequest(self.conn, "bucket")
        expect(req, Method.HEAD, "http://bucket.localhost:9000/")
        req.run()

    def test_delete_bucket_request(self):
        req = DeleteBucketRequest(self.conn, "bucket")
        expect(req, Method.DELETE, "http://bucket.localhost:9000/")
        req.run()
