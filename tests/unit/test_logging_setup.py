"""
Unit tests for the logging configuration.
"""

import logging
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path
from tempfile import TemporaryDirectory

from drone_riot_conv.logging_setup import setup_logging


class TestSetupLogging(unittest.TestCase):
    """Test root logger configuration."""

    def setUp(self):
        self.root = logging.getLogger()
        self.saved_handlers = list(self.root.handlers)
        self.saved_level = self.root.level

    def tearDown(self):
        for handler in list(self.root.handlers):
            self.root.removeHandler(handler)
            if handler not in self.saved_handlers:
                handler.close()
        for handler in self.saved_handlers:
            self.root.addHandler(handler)
        self.root.setLevel(self.saved_level)

    def test_console_handlers(self):
        setup_logging("warning")

        self.assertEqual(self.root.level, logging.WARNING)
        self.assertEqual(len(self.root.handlers), 2)
        self.assertTrue(all(isinstance(h, logging.StreamHandler) for h in self.root.handlers))

    def test_invalid_level_falls_back_to_info(self):
        setup_logging("chatty")
        self.assertEqual(self.root.level, logging.INFO)

    def test_log_file(self):
        with TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "server.log"
            setup_logging("debug", log_file=log_file)

            file_handlers = [h for h in self.root.handlers if isinstance(h, RotatingFileHandler)]
            self.assertEqual(len(file_handlers), 1)

            logging.getLogger("drone_riot_conv.test").info("hello")
            file_handlers[0].flush()
            self.assertIn("hello", log_file.read_text(encoding="utf-8"))

            self.root.removeHandler(file_handlers[0])
            file_handlers[0].close()


if __name__ == "__main__":
    unittest.main()
