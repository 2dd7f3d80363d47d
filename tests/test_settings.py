import unittest

from s3_gateway.settings import AppSettings, load_settings


class LoadSettingsTests(unittest.TestCase):
    def test_defaults_when_environment_is_empty(self):
        self.assertEqual(AppSettings(), load_settings({}))

    def test_reads_environment(self):
        settings = load_settings(
            {
                "HOST": "0.0.0.0",
                "PORT": "9000",
                "AWS_REGION": "eu-central-1",
                "S3_ENDPOINT_URL": "http://localhost:9000",
                "S3_GATEWAY_MAX_KEYS": "200",
                "LOG_LEVEL": "debug",
            }
        )

        self.assertEqual(
            AppSettings(
                host="0.0.0.0",
                port=9000,
                region_name="eu-central-1",
                endpoint_url="http://localhost:9000",
                max_keys=200,
                log_level="DEBUG",
            ),
            settings,
        )

    def test_sanitizes_invalid_values(self):
        settings = load_settings(
            {
                "PORT": "nope",
                "S3_GATEWAY_MAX_KEYS": "-5",
                "LOG_LEVEL": "chatty",
                "AWS_REGION": "",
                "S3_ENDPOINT_URL": "",
            }
        )

        self.assertEqual(AppSettings.port, settings.port)
        self.assertEqual(AppSettings.max_keys, settings.max_keys)
        self.assertEqual(AppSettings.log_level, settings.log_level)
        self.assertIsNone(settings.region_name)
        self.assertIsNone(settings.endpoint_url)

    def test_zero_port_falls_back_to_default(self):
        self.assertEqual(8787, load_settings({"PORT": "0"}).port)


if __name__ == "__main__":
    unittest.main()
