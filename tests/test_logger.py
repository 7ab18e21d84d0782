"""
Tests for the central logger module.
"""
import logging
import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils.logger import get_logger, resolve_log_level


class TestLogger(unittest.TestCase):

    def test_get_logger_is_cached(self):
        self.assertIs(get_logger("word.count.test"), get_logger("word.count.test"))

    def test_get_logger_default_name(self):
        self.assertEqual(get_logger().name, "word-count-tally")

    def test_resolve_log_level(self):
        self.assertEqual(resolve_log_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_log_level(" WARNING "), logging.WARNING)

    def test_resolve_unknown_log_level(self):
        with self.assertRaises(ValueError):
            resolve_log_level("chatty")


if __name__ == '__main__':
    unittest.main()
