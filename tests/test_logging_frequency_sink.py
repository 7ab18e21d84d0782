"""
Tests for the logging frequency sink.
"""
import logging
from datetime import datetime
import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.frequency_snapshot_models import FrequencyGroup, FrequencySnapshot
from services.logging_frequency_sink import LoggingFrequencySink


class TestLoggingFrequencySink(unittest.TestCase):

    def setUp(self):
        self.logger = logging.getLogger("tests.frequency_sink")
        self.sink = LoggingFrequencySink(logger=self.logger)

    def make_snapshot(self, groups, total_words):
        return FrequencySnapshot(
            run_number=2,
            timestamp=datetime(2024, 5, 1, 9, 0, 0),
            total_words=total_words,
            distinct_words=len(groups),
            min_count_threshold=1,
            groups=groups
        )

    def test_logs_summary_then_listing(self):
        snapshot = self.make_snapshot([FrequencyGroup(count=3, words=["owl"])], total_words=4)

        with self.assertLogs(self.logger, level="INFO") as captured:
            self.sink.publish(snapshot)

        self.assertEqual(len(captured.records), 2)
        self.assertEqual(
            captured.records[0].getMessage(),
            "At 2024-05-01 09:00:00, total # of words received in run#2: 4"
        )
        listing = captured.records[1].getMessage()
        self.assertTrue(listing.startswith("\n"))
        self.assertIn("==> [owl]", listing)

    def test_empty_listing_only_logs_summary_at_info(self):
        snapshot = self.make_snapshot([], total_words=1)

        with self.assertLogs(self.logger, level="DEBUG") as captured:
            self.sink.publish(snapshot)

        levels = [record.levelno for record in captured.records]
        self.assertEqual(levels, [logging.INFO, logging.DEBUG])
        self.assertIn("run#2: 1", captured.records[0].getMessage())

    def test_default_logger(self):
        sink = LoggingFrequencySink()

        self.assertEqual(sink.logger.name, "services.logging_frequency_sink")


if __name__ == '__main__':
    unittest.main()
