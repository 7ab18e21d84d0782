"""
Frequency Sink Interface.

A sink is the outbound observer of the word count aggregator: it receives
one fully-built snapshot per flush.
"""
from abc import ABC, abstractmethod

from models.frequency_snapshot_models import FrequencySnapshot


class IFrequencySink(ABC):
    """
    Abstract interface for receiving word frequency snapshots.
    """

    @abstractmethod
    def publish(self, snapshot: FrequencySnapshot) -> None:
        """
        Receive the snapshot produced by a flush.

        Args:
            snapshot: Ranked, threshold-filtered frequencies for one interval
        """
        pass
