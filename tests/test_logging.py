"""Tests for logging configuration."""

import logging
import os
import unittest
from unittest import mock

from erfacore.logging import get_logger, set_log_level


class TestLogging(unittest.TestCase):
    """Test cases for get_logger and set_log_level."""

    def tearDown(self):
        set_log_level(logging.WARNING)

    def test_get_logger_configures_once(self):
        logger = get_logger("erfacore.tests.once")
        again = get_logger("erfacore.tests.once")
        self.assertIs(logger, again)
        self.assertEqual(len(logger.handlers), 1)

    def test_environment_level(self):
        logging.getLogger("erfacore").setLevel(logging.NOTSET)
        with mock.patch.dict(os.environ, {"ERFACORE_LOG_LEVEL": "debug"}):
            logger = get_logger("erfacore.tests.env")
        self.assertEqual(logger.level, logging.DEBUG)

    def test_set_log_level_updates_children(self):
        logger = get_logger("erfacore.tests.children")
        set_log_level(logging.ERROR)
        self.assertEqual(logger.level, logging.ERROR)
        self.assertEqual(logging.getLogger("erfacore").level, logging.ERROR)


if __name__ == "__main__":
    unittest.main()
