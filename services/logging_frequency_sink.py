"""
Logging Frequency Sink.

Default sink for the word count aggregator: writes the summary line and the
grouped listing of each snapshot through the central logger.
"""
import logging
from typing import Optional

from models.frequency_snapshot_models import FrequencySnapshot
from services.frequency_snapshot_formatter import format_listing, format_summary
from services.interfaces.frequency_sink_interface import IFrequencySink
from utils.logger import get_logger


class LoggingFrequencySink(IFrequencySink):
    """Writes each snapshot to a logger as two INFO records."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Args:
            logger: Logger to write to (default: this module's logger)
        """
        self.logger = logger or get_logger(__name__)

    def publish(self, snapshot: FrequencySnapshot) -> None:
        self.logger.info(format_summary(snapshot))

        listing = format_listing(snapshot)
        if listing:
            self.logger.info("\n%s", listing)
        else:
            self.logger.debug(
                "No words above count %d in run#%d",
                snapshot.min_count_threshold,
                snapshot.run_number
            )
