"""
Pydantic models for word frequency snapshots.

A snapshot is built once per flush of the WordCountAggregator and handed,
fully formed, to a frequency sink.
"""
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class FrequencyGroup(BaseModel):
    """All distinct words that share one occurrence count."""
    count: int = Field(ge=1, description="Occurrence count shared by every word in the group")
    words: List[str] = Field(description="Distinct words with this count, sorted ascending")


class FrequencySnapshot(BaseModel):
    """
    Ranked word frequencies for one flush interval.

    groups only holds counts strictly above min_count_threshold, ordered by
    count descending. total_words covers every ingested word, including the
    ones that were filtered out of groups.
    """
    run_number: int = Field(ge=1, description="Flush sequence number, starting at 1")
    timestamp: datetime = Field(description="When the flush happened")
    total_words: int = Field(ge=0, description="Words ingested since the previous flush")
    distinct_words: int = Field(ge=0, description="Distinct words ingested since the previous flush")
    min_count_threshold: int = Field(ge=0, description="Exclusive lower bound used to filter groups")
    groups: List[FrequencyGroup] = Field(
        default_factory=list,
        description="Groups above the threshold, highest count first"
    )
