#!/usr/bin/env python3
"""
Tally word frequencies from text lines.

Each input line is split into words and ingested as one batch, so the
aggregator flushes a ranked snapshot to the log whenever its flush interval
elapses. A final flush is forced at end of input.

Flush interval and threshold default to the WORD_COUNT_FLUSH_INTERVAL_SECONDS
and WORD_COUNT_MIN_COUNT_THRESHOLD environment variables.

Usage:
    cat book.txt | python tally_words.py --min-count 5
    python tally_words.py --flush-interval 2 chapter1.txt chapter2.txt
"""
import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from models.word_count_config import WordCountConfig
from services.interfaces.word_count_aggregator_interface import IWordCountAggregator
from services.sentence_splitter import split_sentence
from services.word_count_aggregator_service import WordCountAggregator
from services.word_count_errors import InvalidConfigurationError, MalformedInputError
from utils.logger import get_logger, initialize_central_logging, resolve_log_level

logger = get_logger(__name__)


def feed_lines(aggregator: IWordCountAggregator, lines: Iterable[str]) -> int:
    """
    Ingest each line as one word batch.

    Returns:
        Number of lines ingested
    """
    line_count = 0
    for line in lines:
        aggregator.ingest(split_sentence(line))
        line_count += 1
    return line_count


def build_config(args: argparse.Namespace) -> WordCountConfig:
    """Merge command line overrides onto the environment configuration."""
    config = WordCountConfig.from_env()
    return WordCountConfig.create(
        flush_interval_seconds=(
            args.flush_interval if args.flush_interval is not None
            else config.flush_interval_seconds
        ),
        min_count_threshold=(
            args.min_count if args.min_count is not None
            else config.min_count_threshold
        )
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Tally word frequencies from text lines')
    parser.add_argument('files', nargs='*', help='Input files (default: stdin)')
    parser.add_argument('--flush-interval', type=int,
                        help='Seconds between frequency snapshots')
    parser.add_argument('--min-count', type=int,
                        help='Only list words seen more than this many times')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin) -> int:
    """Main function."""
    args = parse_args(argv)
    initialize_central_logging(log_level=resolve_log_level(args.log_level), force=True)

    try:
        aggregator = WordCountAggregator.from_config(build_config(args))
    except InvalidConfigurationError as e:
        logger.error(str(e))
        return 2

    try:
        if args.files:
            for path in args.files:
                with open(path, encoding='utf-8') as f:
                    line_count = feed_lines(aggregator, f)
                logger.info(f"Ingested {line_count} lines from {path}")
        else:
            feed_lines(aggregator, stdin)
    except MalformedInputError as e:
        logger.error(f"Rejected input: {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read input: {e}")
        return 1
    finally:
        aggregator.flush()

    return 0


if __name__ == '__main__':
    sys.exit(main())
