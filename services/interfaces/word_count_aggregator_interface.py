"""
Word Count Aggregator Interface.

This interface defines the contract for tallying word batches in memory and
periodically flushing a ranked frequency snapshot to a sink.
"""
from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Optional

from models.frequency_snapshot_models import FrequencySnapshot


class IWordCountAggregator(ABC):
    """
    Abstract interface for word count aggregator operations.

    This interface defines methods for:
    - Ingesting batches of words
    - Ingesting delivered messages that carry a word batch
    - Flushing the running tally to the sink
    """

    @abstractmethod
    def ingest(self, words: Iterable[str]) -> Optional[FrequencySnapshot]:
        """
        Count a batch of words, flushing if the flush interval has elapsed.

        Args:
            words: Words to count; duplicates allowed, may be empty

        Returns:
            The snapshot if this call triggered a flush, otherwise None

        Raises:
            MalformedInputError: If words is None or holds a non-string
        """
        pass

    @abstractmethod
    def ingest_message(self, message: Mapping[str, Any]) -> Optional[FrequencySnapshot]:
        """
        Count the batch carried in the "words" field of a delivered message.

        Args:
            message: Delivered message with a "words" field

        Returns:
            The snapshot if this call triggered a flush, otherwise None

        Raises:
            MalformedInputError: If the "words" field is missing or malformed
        """
        pass

    @abstractmethod
    def flush(self) -> FrequencySnapshot:
        """
        Publish the current tally to the sink and reset it.

        Returns:
            The snapshot handed to the sink
        """
        pass
