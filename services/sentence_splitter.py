"""
Sentence splitting for the word stream.

Turns a line of free text into the word batch the aggregator ingests:
punctuation is stripped, words are lowercased and split on whitespace.
"""
import string
from typing import List

_PUNCTUATION_TABLE = str.maketrans(string.punctuation, " " * len(string.punctuation))


def split_sentence(sentence: str) -> List[str]:
    """
    Split a sentence into lowercase words.

    Args:
        sentence: Line of free text

    Returns:
        Words in their original order, empty for blank or punctuation-only lines

    Examples:
        - "The cat, the hat." -> ["the", "cat", "the", "hat"]
        - "  " -> []
    """
    return sentence.translate(_PUNCTUATION_TABLE).lower().split()
