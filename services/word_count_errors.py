"""
Exceptions raised by the word count aggregator.

Both are programmer/configuration errors rather than runtime conditions:
they are raised where bad data enters and are never retried.
"""


class InvalidConfigurationError(ValueError):
    """Raised when the flush interval or count threshold is invalid."""


class MalformedInputError(ValueError):
    """Raised when an ingested batch has no usable word list."""
