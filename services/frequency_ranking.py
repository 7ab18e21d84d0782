"""
Grouping and ranking of word counts.

Turns the running WordCounts mapping into FrequencyGroups (count -> words)
and then into the ranked, threshold-filtered rows of a snapshot.
"""
from collections import defaultdict
from typing import Dict, List, Mapping

from models.frequency_snapshot_models import FrequencyGroup


def group_by_count(word_counts: Mapping[str, int]) -> Dict[int, List[str]]:
    """
    Group words by their occurrence count.

    Args:
        word_counts: Mapping of word to occurrence count

    Returns:
        Dictionary mapping each distinct count to the words that have it
        (unordered)
    """
    grouped = defaultdict(list)
    for word, count in word_counts.items():
        grouped[count].append(word)
    return dict(grouped)


def rank_groups(
    frequency_groups: Mapping[int, List[str]],
    min_count_threshold: int
) -> List[FrequencyGroup]:
    """
    Rank frequency groups by count, dropping those at or below the threshold.

    The comparison is strict: a group whose count equals min_count_threshold
    is excluded.

    Args:
        frequency_groups: Mapping of count to words, as built by group_by_count
        min_count_threshold: Exclusive lower bound for a group to be kept

    Returns:
        FrequencyGroup list ordered by count descending, each with its words
        sorted ascending
    """
    ranked = []
    for count in sorted(frequency_groups, reverse=True):
        if count <= min_count_threshold:
            # Counts are descending, nothing after this can qualify
            break
        ranked.append(FrequencyGroup(count=count, words=sorted(frequency_groups[count])))
    return ranked
