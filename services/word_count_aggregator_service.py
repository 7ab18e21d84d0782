"""
Word Count Aggregator Service.

This service keeps a running tally of words delivered in batches and, once
the configured flush interval has elapsed, publishes a ranked snapshot of the
most frequent words to a sink and resets the tally.

The elapsed-time check is a poll performed inside ingest(), not a timer
thread, so a flush is only as prompt as the next ingested batch.

Thread-safe implementation using threading.Lock: ingest and flush are
serialized, and a flush always runs to completion inside the call that
triggered it.
"""
import threading
import time
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from models.frequency_snapshot_models import FrequencySnapshot
from models.word_count_config import WordCountConfig
from services.frequency_ranking import group_by_count, rank_groups
from services.interfaces.frequency_sink_interface import IFrequencySink
from services.interfaces.word_count_aggregator_interface import IWordCountAggregator
from services.logging_frequency_sink import LoggingFrequencySink
from services.word_count_errors import MalformedInputError
from utils.logger import get_logger

logger = get_logger(__name__)

WORDS_FIELD = "words"


class WordCountAggregator(IWordCountAggregator):
    """
    Thread-safe implementation of IWordCountAggregator.

    Word counts accumulate in a dictionary between flushes:
        {"the": 12, "cat": 3, "dog": 3}

    On flush they are grouped by count, ranked highest count first, filtered
    to counts strictly above min_count_threshold and published as a
    FrequencySnapshot. The dictionary is then cleared and the run counter
    advanced.
    """

    def __init__(
        self,
        flush_interval_seconds: int,
        min_count_threshold: int,
        sink: Optional[IFrequencySink] = None,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now
    ):
        """
        Initialize the word count aggregator.

        Args:
            flush_interval_seconds: Seconds between flushes (>= 0)
            min_count_threshold: Exclusive lower bound a count must exceed to
                                 be listed in a snapshot (>= 0)
            sink: Receiver of flushed snapshots (default: LoggingFrequencySink)
            clock: Monotonic seconds source used for the flush interval
            now: Wall clock used to timestamp snapshots

        Raises:
            InvalidConfigurationError: If either value is negative or not an integer
        """
        self._config = WordCountConfig.create(
            flush_interval_seconds=flush_interval_seconds,
            min_count_threshold=min_count_threshold
        )
        self._sink = sink or LoggingFrequencySink()
        self._clock = clock
        self._now = now
        self._word_counts: Dict[str, int] = {}
        self._run_counter = 0
        self._lock = threading.Lock()
        self._last_flush_at = self._clock()

        logger.info(
            f"WordCountAggregator initialized with {self._config.flush_interval_seconds}s "
            f"flush interval and min count threshold {self._config.min_count_threshold}"
        )

    @classmethod
    def from_config(
        cls,
        config: WordCountConfig,
        sink: Optional[IFrequencySink] = None,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now
    ) -> "WordCountAggregator":
        """Create an aggregator from a loaded WordCountConfig."""
        return cls(
            config.flush_interval_seconds,
            config.min_count_threshold,
            sink=sink,
            clock=clock,
            now=now
        )

    @property
    def flush_interval_seconds(self) -> int:
        return self._config.flush_interval_seconds

    @property
    def min_count_threshold(self) -> int:
        return self._config.min_count_threshold

    @property
    def run_counter(self) -> int:
        """Number of flushes performed so far."""
        with self._lock:
            return self._run_counter

    def ingest(self, words: Iterable[str]) -> Optional[FrequencySnapshot]:
        """
        Count a batch of words, flushing if the flush interval has elapsed.

        Thread-safe: Protected by internal lock. The whole batch is validated
        before any count changes, so a malformed batch leaves the tally as it was.

        Args:
            words: Words to count; duplicates allowed, may be empty

        Returns:
            The snapshot if this call triggered a flush, otherwise None

        Raises:
            MalformedInputError: If words is None, a bare string, or holds a
                                 non-string element
        """
        batch = _validate_batch(words)

        with self._lock:
            for word in batch:
                self._word_counts[word] = self._word_counts.get(word, 0) + 1

            elapsed = self._clock() - self._last_flush_at
            if elapsed >= self._config.flush_interval_seconds:
                logger.debug(f"Flush interval elapsed after {elapsed:.3f}s, flushing")
                return self._flush_internal()
            return None

    def ingest_message(self, message: Mapping[str, Any]) -> Optional[FrequencySnapshot]:
        """
        Count the batch carried in the "words" field of a delivered message.

        Raises:
            MalformedInputError: If message is not a mapping, or its "words"
                                 field is missing or malformed
        """
        if not isinstance(message, Mapping):
            raise MalformedInputError(
                f"Expected a message mapping, got {type(message).__name__}"
            )
        if message.get(WORDS_FIELD) is None:
            raise MalformedInputError(f"Message has no '{WORDS_FIELD}' field")
        return self.ingest(message[WORDS_FIELD])

    def flush(self) -> FrequencySnapshot:
        """
        Publish the current tally to the sink and reset it (public method).

        Thread-safe: Acquires lock before flushing. Also restarts the flush
        interval timer.
        """
        with self._lock:
            return self._flush_internal()

    def _flush_internal(self) -> FrequencySnapshot:
        """
        Internal flush implementation (called while lock is held).

        Must only be called when self._lock is already acquired.

        If the sink raises, nothing is committed: the run number is not
        used up, the counts are kept and the timer keeps running, so the
        next flush republishes them under the same run number.
        """
        frequency_groups = group_by_count(self._word_counts)
        groups = rank_groups(frequency_groups, self._config.min_count_threshold)

        snapshot = FrequencySnapshot(
            run_number=self._run_counter + 1,
            timestamp=self._now(),
            total_words=sum(self._word_counts.values()),
            distinct_words=len(self._word_counts),
            min_count_threshold=self._config.min_count_threshold,
            groups=groups
        )

        self._sink.publish(snapshot)

        # Start the next accumulation period
        self._run_counter = snapshot.run_number
        self._word_counts.clear()
        frequency_groups.clear()
        self._last_flush_at = self._clock()
        return snapshot

    # Helper methods for testing and diagnostics

    def get_word_counts(self) -> Dict[str, int]:
        """
        Get a copy of the counts accumulated since the last flush.

        Thread-safe helper method.
        """
        with self._lock:
            return dict(self._word_counts)

    def get_total_word_count(self) -> int:
        """
        Get the number of words ingested since the last flush.

        Thread-safe helper method.
        """
        with self._lock:
            return sum(self._word_counts.values())

    def seconds_until_flush(self) -> float:
        """
        Get the time left before the next ingest will trigger a flush.

        Returns:
            Remaining seconds, or 0.0 if the interval has already elapsed
        """
        with self._lock:
            elapsed = self._clock() - self._last_flush_at
            return max(0.0, self._config.flush_interval_seconds - elapsed)


def _validate_batch(words: Iterable[str]) -> List[str]:
    if words is None:
        raise MalformedInputError("Word batch is None")
    if isinstance(words, (str, bytes)):
        raise MalformedInputError(
            "Word batch must be a collection of words, not a single string"
        )
    try:
        batch = list(words)
    except TypeError as e:
        raise MalformedInputError(
            f"Word batch is not iterable: {type(words).__name__}"
        ) from e

    for index, word in enumerate(batch):
        if not isinstance(word, str):
            raise MalformedInputError(
                f"Word at position {index} is {type(word).__name__}, expected str"
            )
    return batch
