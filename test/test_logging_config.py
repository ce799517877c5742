#!/usr/bin/env python3
import unittest
from unittest.mock import patch

from webhook_bridge.logging_config import build_logging_config


class TestLoggingConfig(unittest.TestCase):
    def test_levels(self):
        self.assertEqual(build_logging_config("info")["root"]["level"], "INFO")
        self.assertEqual(build_logging_config("WARN")["root"]["level"], "WARNING")
        self.assertEqual(build_logging_config("error")["root"]["level"], "ERROR")
        self.assertEqual(build_logging_config("bogus")["root"]["level"], "INFO")

    def test_debug_mode_forces_debug(self):
        with patch('webhook_bridge.logging_config.DEBUG_MODE', True):
            self.assertEqual(build_logging_config("error")["root"]["level"], "DEBUG")


if __name__ == '__main__':
    unittest.main()
