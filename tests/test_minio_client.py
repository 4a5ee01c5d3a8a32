import os
import tempfile
import unittest
from unittest.mock import patch


class RecordingMinio:
    instances = []
    bucket_present = False
    fail_bucket_check = False

    def __init__(self, endpoint, **kwargs):
        self.endpoint = endpoint
        self.kwargs = kwargs
        self.made_buckets = []
        RecordingMinio.instances.append(self)

    def bucket_exists(self, bucket):
        if RecordingMinio.fail_bucket_check:
            raise ConnectionError("minio unreachable")
        return RecordingMinio.bucket_present

    def make_bucket(self, bucket):
        self.made_buckets.append(bucket)


class TestMinioClient(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        db_fd, cls.db_path = tempfile.mkstemp(suffix=".db")
        os.close(db_fd)

        from postfeed import create_app
        from postfeed.extensions import minio_client

        cls.app = create_app({
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{cls.db_path}",
            "JWT_SECRET_KEY": "test-secret",
            "TESTING": True,
        })
        cls.minio_client = minio_client

    @classmethod
    def tearDownClass(cls):
        cls.minio_client.reset_clients()
        if os.path.exists(cls.db_path):
            os.remove(cls.db_path)

    def setUp(self):
        RecordingMinio.instances = []
        RecordingMinio.bucket_present = False
        RecordingMinio.fail_bucket_check = False
        self.minio_client.reset_clients()

        self.ctx = self.app.app_context()
        self.ctx.push()
        self.patcher = patch.object(self.minio_client, "Minio", RecordingMinio)
        self.patcher.start()

    def tearDown(self):
        self.patcher.stop()
        self.ctx.pop()
        self.minio_client.reset_clients()

    def test_missing_bucket_is_created_once(self):
        first = self.minio_client.get_minio_client()
        second = self.minio_client.get_minio_client()

        self.assertIs(first, second)
        self.assertEqual(len(RecordingMinio.instances), 1)
        self.assertEqual(first.made_buckets, [self.app.config["MINIO_BUCKET"]])

    def test_existing_bucket_is_left_alone(self):
        RecordingMinio.bucket_present = True

        client = self.minio_client.get_minio_client()

        self.assertEqual(client.made_buckets, [])
        self.assertEqual(client.endpoint, self.app.config["MINIO_ENDPOINT"])

    def test_failed_bucket_check_is_not_cached(self):
        RecordingMinio.fail_bucket_check = True
        with self.assertRaises(ConnectionError):
            self.minio_client.get_minio_client()

        RecordingMinio.fail_bucket_check = False
        client = self.minio_client.get_minio_client()

        self.assertEqual(len(RecordingMinio.instances), 2)
        self.assertEqual(client.made_buckets, [self.app.config["MINIO_BUCKET"]])

    def test_changed_bucket_gets_its_own_client(self):
        first = self.minio_client.get_minio_client()

        original = self.app.config["MINIO_BUCKET"]
        self.app.config["MINIO_BUCKET"] = "other-bucket"
        try:
            second = self.minio_client.get_minio_client()
        finally:
            self.app.config["MINIO_BUCKET"] = original

        self.assertIsNot(first, second)
        self.assertEqual(second.made_buckets, ["other-bucket"])


if __name__ == "__main__":
    unittest.main()
