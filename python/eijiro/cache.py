"""Persisted dictionary cache.

Stores a built Dictionary as a JSON document so later runs skip parsing:

    {
        "format": "eijiro-dict",
        "version": 1,
        "generated_at": "2026-10-18T09:00:00+00:00",
        "source": {"size": 123456, "mtime_ns": 1700000000000000000,
                   "encoding": "utf-8", "on_error": "skip", "parser": "eijiro"},
        "key_count": 2,
        "keys": ["cat", "catalog"],
        "field_groups": [[{...}, {...}], [{...}]]
    }

Any failure to read or write raises CacheError. Callers treat that as
"rebuild from the corpus", never as fatal.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional
import json
import logging
import os

from .errors import BuildError, CacheError
from .schema import Dictionary

logger = logging.getLogger(__name__)

CACHE_FORMAT = "eijiro-dict"
CACHE_VERSION = 1


def source_fingerprint(corpus_path: Path | str) -> Optional[dict[str, Any]]:
    """Fingerprint a corpus file by size and modification time.

    Returns:
        {"size": ..., "mtime_ns": ...} or None if the file is missing.
    """
    try:
        st = Path(corpus_path).stat()
    except OSError:
        return None
    return {"size": st.st_size, "mtime_ns": st.st_mtime_ns}


class CacheStore:
    """Reads and writes a Dictionary cache file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, dictionary: Dictionary, source: Optional[dict[str, Any]] = None) -> None:
        """Write the dictionary to the cache file.

        The file is written next to the target and renamed into place, so a
        crash never leaves a half-written cache behind.

        Args:
            dictionary: Dictionary to persist.
            source: Corpus fingerprint to store with it.

        Raises:
            CacheError: If the file cannot be written.
        """
        data: dict[str, Any] = {
            "format": CACHE_FORMAT,
            "version": CACHE_VERSION,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "source": source,
        }
        data.update(dictionary.to_dict())

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, separators=(",", ":"))
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise CacheError(f"Failed to write cache {self.path}: {e}") from e

        logger.info("Saved cache: %d headwords to %s", dictionary.count(), self.path)

    def load(self, expected_source: Optional[dict[str, Any]] = None) -> Dictionary:
        """Read the dictionary from the cache file.

        Args:
            expected_source: If given, the stored corpus fingerprint must
                match it.

        Returns:
            The cached Dictionary.

        Raises:
            CacheError: If the cache is missing, corrupt, from another
                format version, or stale.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise CacheError(f"No cache at {self.path}") from e
        except (OSError, ValueError) as e:
            raise CacheError(f"Unreadable cache {self.path}: {e}") from e

        if not isinstance(data, dict) or data.get("format") != CACHE_FORMAT:
            raise CacheError(f"Not an eijiro cache: {self.path}")
        if data.get("version") != CACHE_VERSION:
            raise CacheError(
                f"Incompatible cache version {data.get('version')!r} "
                f"(expected {CACHE_VERSION}): {self.path}"
            )
        if expected_source is not None and data.get("source") != expected_source:
            raise CacheError(f"Stale cache, corpus or parse settings changed: {self.path}")

        try:
            dictionary = Dictionary.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError, BuildError) as e:
            raise CacheError(f"Corrupt cache {self.path}: {e}") from e

        if data.get("key_count", dictionary.count()) != dictionary.count():
            raise CacheError(f"Corrupt cache {self.path}: key count mismatch")

        logger.info("Loaded cache: %d headwords from %s", dictionary.count(), self.path)
        return dictionary

    def clear(self) -> None:
        """Delete the cache file if present."""
        self.path.unlink(missing_ok=True)
