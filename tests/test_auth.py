import datetime
import unittest

import requests
from flexmock import flexmock

from s3mini import auth as auth_module
from s3mini.auth import S3Auth
from s3mini.datetime_utils import get_utc_datetime, http_date

DATE = "Tue, 27 Mar 2007 19:36:42 GMT"


class TestS3Auth(unittest.TestCase):
    def prepare(self, method="PUT", url="https://b.s3.amazonaws.com/k.txt", **kwargs):
        return requests.Request(method, url, **kwargs).prepare()

    def test_sets_date_and_authorization(self):
        flexmock(auth_module).should_receive("http_date").and_return(DATE).once()
        auth = S3Auth("AKID", "secret")
        prepared = self.prepare(
            headers={"Content-Type": "text/plain", "x-amz-acl": "private"}, data=b"x"
        )
        signed = auth(prepared)

        self.assertEqual(signed.headers["Date"], DATE)
        self.assertTrue(signed.headers["Authorization"].startswith("AWS AKID:"))

    def test_signed_date_matches_sent_date(self):
        flexmock(auth_module).should_receive("http_date").and_return(DATE)
        auth = S3Auth("AKID", "secret")
        prepared = auth(self.prepare(method="GET"))

        string_to_sign = auth.signer.string_to_sign(prepared)
        self.assertIn("\n" + DATE + "\n", string_to_sign)
        self.assertEqual(
            prepared.headers["Authorization"],
            "AWS AKID:" + auth.signer.sign(string_to_sign),
        )

    def test_endpoint_property_updates_signer(self):
        auth = S3Auth("AKID", "secret", endpoint="s3.amazonaws.com")
        auth.endpoint = "minio.local:9000"
        self.assertEqual(auth.signer.endpoint, "minio.local:9000")

    def test_repr_hides_secret(self):
        r = repr(S3Auth("AKID", "topsecret"))
        self.assertIn("S3Auth", r)
        self.assertNotIn("topsecret", r)


class TestDatetimeUtils(unittest.TestCase):
    def test_http_date_format(self):
        dt = datetime.datetime(2007, 3, 27, 19, 36, 42)
        self.assertEqual(http_date(dt), DATE)

    def test_http_date_converts_to_gmt(self):
        tz = datetime.timezone(datetime.timedelta(hours=2))
        dt = datetime.datetime(2007, 3, 27, 21, 36, 42, tzinfo=tz)
        self.assertEqual(http_date(dt), DATE)

    def test_http_date_defaults_to_now(self):
        self.assertTrue(http_date().endswith(" GMT"))

    def test_get_utc_datetime_is_aware(self):
        self.assertEqual(get_utc_datetime().utcoffset(), datetime.timedelta(0))
