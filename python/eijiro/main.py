"""eijiro CLI - English-Japanese dictionary lookup.

Usage:
    python -m eijiro.main cat
    python -m eijiro.main cat --distance 2 --limit 10
    python -m eijiro.main                 # interactive, ":exit" to quit
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from . import config as cfg
from .errors import EijiroError, IndexConstructionError
from .index import check_distance
from .loader import load_dictionary
from .lookup import lookup
from .render import format_header, format_result
from .schema import Dictionary

EXIT_COMMAND = ":exit"
PROMPT = "=> "


def print_lookup(
    dictionary: Dictionary,
    word: str,
    max_distance: int,
    limit: Optional[int] = None,
    distance_limit: Optional[int] = None,
    out: TextIO = sys.stdout,
) -> int:
    """Look up a word and print every match.

    Returns:
        Number of matched headwords.
    """
    print(format_header(word), file=out)
    results = lookup(
        dictionary,
        word,
        max_distance=max_distance,
        limit=limit,
        distance_limit=distance_limit,
    )
    for result in results:
        if max_distance:
            print(f"■{result.headword}", file=out)
        print(format_result(result), file=out)
    return len(results)


def interactive(
    dictionary: Dictionary,
    max_distance: int,
    limit: Optional[int] = None,
    distance_limit: Optional[int] = None,
    stdin: TextIO = sys.stdin,
    out: TextIO = sys.stdout,
) -> None:
    """Prompt for words until ":exit" or end of input."""
    while True:
        print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            print(file=out)
            break
        word = line.rstrip()
        if word == EXIT_COMMAND:
            break
        print_lookup(dictionary, word, max_distance, limit, distance_limit, out=out)


def non_negative_int(value: str) -> int:
    """argparse type for counts that must not be negative."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with defaults from config.json."""
    parser = argparse.ArgumentParser(
        description="eijiro - English-Japanese dictionary (using EIJIRO)"
    )
    parser.add_argument(
        "word",
        nargs="?",
        help="Word to look up (omit for interactive mode)",
    )
    parser.add_argument(
        "--distance",
        "-d",
        type=int,
        default=cfg.default_max_distance(),
        help=f"Maximum edit distance (default: {cfg.default_max_distance()})",
    )
    parser.add_argument(
        "--corpus",
        type=Path,
        default=Path(cfg.default_corpus_path()),
        help=f"Corpus text file (default: {cfg.default_corpus_path()})",
    )
    parser.add_argument(
        "--cache",
        type=Path,
        default=Path(cfg.default_cache_path()),
        help=f"Cache file (default: {cfg.default_cache_path()})",
    )
    parser.add_argument(
        "--encoding",
        default=cfg.default_encoding(),
        help=f"Corpus encoding (default: {cfg.default_encoding()})",
    )
    parser.add_argument(
        "--limit",
        "-n",
        type=non_negative_int,
        default=cfg.default_result_limit(),
        help="Show at most this many headwords (0 for all)",
    )
    parser.add_argument(
        "--rebuild",
        action="store_true",
        help="Ignore the cache and rebuild it from the corpus",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        default=not cfg.default_use_cache(),
        help="Neither read nor write the cache",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=cfg.default_on_parse_error() == "abort",
        help="Abort on the first malformed corpus line",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else cfg.default_log_level(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger("eijiro")

    distance_limit = cfg.max_distance_limit()
    try:
        check_distance(args.distance, distance_limit)
    except IndexConstructionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        dictionary = load_dictionary(
            corpus_path=args.corpus,
            cache_path=args.cache,
            encoding=args.encoding,
            on_error="abort" if args.strict else "skip",
            use_cache=not args.no_cache,
            rebuild=args.rebuild,
        )
    except (EijiroError, OSError) as e:
        logger.error("Failed to load dictionary: %s", e)
        return 1

    if args.word is not None:
        print_lookup(dictionary, args.word, args.distance, args.limit, distance_limit)
    else:
        interactive(dictionary, args.distance, args.limit, distance_limit)

    return 0


if __name__ == "__main__":
    sys.exit(main())
