import unittest

from s3mini.exceptions import (
    InvalidOperation,
    LocalInputError,
    S3MiniError,
    ServiceError,
    TransportError,
)
from s3mini.options import StoreOptions


class TestErrorBranches(unittest.TestCase):
    def test_hierarchy(self):
        for error_class in (LocalInputError, InvalidOperation, TransportError, ServiceError):
            self.assertTrue(issubclass(error_class, S3MiniError))
        self.assertTrue(issubclass(LocalInputError, IOError))
        self.assertTrue(issubclass(InvalidOperation, ValueError))

    def test_local_input_error_message(self):
        error = LocalInputError("/tmp/nope")
        self.assertEqual(error.path, "/tmp/nope")
        self.assertEqual(str(error), "Cannot access file: /tmp/nope")

    def test_invalid_operation_message(self):
        self.assertIn("'POST'", str(InvalidOperation("POST")))

    def test_service_error_as_dict(self):
        error = ServiceError(403, b"<Error/>", {"url": "u"})
        self.assertEqual(
            error.as_dict(), {"response": b"<Error/>", "response_info": {"url": "u"}, "code": 403}
        )
        self.assertEqual(ServiceError(500).info, {})

    def test_transport_error_has_no_code(self):
        error = TransportError(OSError("boom"), "https://b.s3.test/")
        self.assertIsNone(error.code)
        self.assertEqual(error.info, {"url": "https://b.s3.test/", "error": "OSError"})


class TestStoreOptions(unittest.TestCase):
    def test_defaults(self):
        options = StoreOptions()
        self.assertEqual(
            options.amz_headers(),
            {
                "x-amz-acl": "private",
                "x-amz-storage-class": "STANDARD",
                "x-amz-server-side-encryption": "AES256",
            },
        )
        self.assertIsNone(options.content_type)

    def test_empty_values_fall_back(self):
        options = StoreOptions(acl="", storage_class=None)
        self.assertEqual(options.acl, "private")
        self.assertEqual(options.storage_class, "STANDARD")
        self.assertIn("StoreOptions", repr(options))
