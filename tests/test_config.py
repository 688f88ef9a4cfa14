import logging
import unittest

from adminfields.config import Settings


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        self.assertEqual(settings, Settings())
        self.assertEqual(settings.host, "127.0.0.1")
        self.assertEqual(settings.port, 8000)
        self.assertEqual(settings.log_level_number, logging.WARNING)

    def test_environment_values(self) -> None:
        settings = Settings.from_env(
            {
                "ADMINFIELDS_HOST": "0.0.0.0",
                "ADMINFIELDS_PORT": "9000",
                "ADMINFIELDS_LOG_LEVEL": "debug",
            }
        )
        self.assertEqual(settings.host, "0.0.0.0")
        self.assertEqual(settings.port, 9000)
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.log_level_number, logging.DEBUG)

    def test_empty_values_keep_defaults(self) -> None:
        settings = Settings.from_env({"ADMINFIELDS_HOST": "", "ADMINFIELDS_PORT": ""})
        self.assertEqual(settings, Settings())

    def test_invalid_port(self) -> None:
        with self.assertRaisesRegex(ValueError, "ADMINFIELDS_PORT"):
            Settings.from_env({"ADMINFIELDS_PORT": "eighty"})

    def test_unknown_log_level_falls_back_to_warning(self) -> None:
        settings = Settings.from_env({"ADMINFIELDS_LOG_LEVEL": "chatty"})
        self.assertEqual(settings.log_level_number, logging.WARNING)

    def test_override_ignores_none(self) -> None:
        settings = Settings(port=9000).override(host="localhost", port=None)
        self.assertEqual(settings.host, "localhost")
        self.assertEqual(settings.port, 9000)


if __name__ == "__main__":
    unittest.main()
