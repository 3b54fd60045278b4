"""Load the dictionary from cache, or build it from the corpus.

Called once at startup; the returned Dictionary is passed explicitly to
every lookup.
"""

from pathlib import Path
from typing import Optional
import logging
import time

from .builder import DictionaryBuilder
from .cache import CacheStore, source_fingerprint
from .errors import CacheError, CorpusNotFoundError
from .ingest import get_parser
from .schema import Dictionary

logger = logging.getLogger(__name__)

# How many parse errors are echoed to the log
MAX_REPORTED_ERRORS = 5


def build_from_corpus(
    corpus_path: Path | str,
    encoding: str = "utf-8",
    on_error: str = "skip",
    parser: str = "eijiro",
) -> Dictionary:
    """Parse a corpus file and build the Dictionary.

    Args:
        corpus_path: Path to the corpus text file.
        encoding: Corpus text encoding.
        on_error: "skip" or "abort" for malformed lines.
        parser: Registered parser name.

    Returns:
        Built Dictionary.

    Raises:
        CorpusNotFoundError: If the corpus file does not exist.
        ParseError: On a malformed line when on_error="abort".
        EmptyCorpusError: If the corpus has no valid entry.
    """
    corpus_path = Path(corpus_path)
    if not corpus_path.is_file():
        raise CorpusNotFoundError(f"Corpus not found: {corpus_path}")

    logger.info("Parsing %s", corpus_path)
    start_time = time.perf_counter()

    result = get_parser(parser)(on_error=on_error).parse_file(corpus_path, encoding=encoding)

    if result.replaced_chars:
        logger.warning(
            "Replaced %d undecodable characters in %s (encoding %s)",
            result.replaced_chars,
            corpus_path,
            encoding,
        )

    if result.errors:
        logger.warning(
            "Skipped %d malformed lines in %s", result.total_errors, corpus_path
        )
        for error in result.errors[:MAX_REPORTED_ERRORS]:
            logger.debug("  %s", error)

    builder = DictionaryBuilder()
    builder.add_entries(result)
    dictionary = builder.build()

    duration = time.perf_counter() - start_time
    logger.info("Dictionary built in %.2f seconds", duration)
    return dictionary


def load_dictionary(
    corpus_path: Path | str,
    cache_path: Optional[Path | str] = None,
    encoding: str = "utf-8",
    on_error: str = "skip",
    use_cache: bool = True,
    rebuild: bool = False,
    parser: str = "eijiro",
) -> Dictionary:
    """Return a ready-to-query Dictionary.

    Tries the cache first; on any cache failure, parses the corpus and
    builds the Dictionary, then saves the cache on a best-effort basis.

    Args:
        corpus_path: Path to the corpus text file.
        cache_path: Path to the cache file (None disables caching).
        encoding: Corpus text encoding.
        on_error: "skip" or "abort" for malformed lines.
        use_cache: Read and write the cache.
        rebuild: Ignore an existing cache and rebuild it.
        parser: Registered parser name.

    Returns:
        Dictionary.

    Raises:
        CorpusNotFoundError: If neither cache nor corpus is usable.
    """
    store = CacheStore(cache_path) if use_cache and cache_path else None
    source = source_fingerprint(corpus_path)
    if source is not None:
        # Settings that change the parse result invalidate the cache too
        source.update(encoding=encoding, on_error=on_error, parser=parser)

    if store is not None and not rebuild:
        try:
            return store.load(expected_source=source)
        except CacheError as e:
            logger.info("Cache not used: %s", e)

    dictionary = build_from_corpus(
        corpus_path, encoding=encoding, on_error=on_error, parser=parser
    )

    if store is not None:
        try:
            store.save(dictionary, source=source)
        except CacheError as e:
            logger.warning("%s", e)

    return dictionary
