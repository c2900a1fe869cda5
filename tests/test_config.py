"""Settings validation."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        s = Settings()
        self.assertEqual(s.JWT_EXPIRE_MINUTES, 1440)
        self.assertEqual(s.JWT_LEEWAY_SECONDS, 0)
        self.assertTrue(s.REJECT_UNCHANGED_PASSWORD)
        self.assertFalse(s.CREATE_USER_ENDPOINT_ENABLED)

    def test_non_postgres_database_url_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="mysql://u:p@localhost/db")

    def test_log_level_normalized(self) -> None:
        self.assertEqual(Settings(LOG_LEVEL=" debug ").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            Settings(LOG_LEVEL="LOUD")

    def test_blank_jwt_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(JWT_SECRET="   ")

    def test_bcrypt_rounds_bounds(self) -> None:
        for rounds in (3, 17):
            with self.subTest(rounds=rounds):
                with self.assertRaises(ValidationError):
                    Settings(BCRYPT_ROUNDS=rounds)

    def test_cors_origins_split(self) -> None:
        s = Settings(CORS_ORIGINS="http://a.test, ,http://b.test ")
        self.assertEqual(s.cors_origins, ["http://a.test", "http://b.test"])

    def test_storage_configured_needs_endpoint_and_bucket(self) -> None:
        self.assertFalse(Settings(OSS_ENDPOINT="minio:9000", OSS_BUCKET="  ").storage_configured)
        self.assertTrue(Settings(OSS_ENDPOINT="minio:9000", OSS_BUCKET="gallery").storage_configured)

    def test_oss_endpoint_with_scheme_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(OSS_ENDPOINT="http://minio:9000")


if __name__ == "__main__":
    unittest.main()
