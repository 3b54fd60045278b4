"""Configuration loader for eijiro.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
from pathlib import Path
from typing import Any

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "corpus_path": "EIJIRO.txt",
    "cache_path": "dict_dump.json",
    "encoding": "utf-8",
    "max_distance": 0,
    "max_distance_limit": 3,
    "result_limit": 0,
    "on_parse_error": "skip",
    "use_cache": True,
    "log_level": "INFO",
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/eijiro -> root
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Forget the loaded configuration so the next load() reads it again."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_corpus_path() -> str:
    return get_default("corpus_path", FALLBACK_DEFAULTS["corpus_path"])


def default_cache_path() -> str:
    return get_default("cache_path", FALLBACK_DEFAULTS["cache_path"])


def default_encoding() -> str:
    return get_default("encoding", FALLBACK_DEFAULTS["encoding"])


def default_max_distance() -> int:
    return get_default("max_distance", FALLBACK_DEFAULTS["max_distance"])


def max_distance_limit() -> int:
    return get_default("max_distance_limit", FALLBACK_DEFAULTS["max_distance_limit"])


def default_result_limit() -> int:
    return get_default("result_limit", FALLBACK_DEFAULTS["result_limit"])


def default_on_parse_error() -> str:
    return get_default("on_parse_error", FALLBACK_DEFAULTS["on_parse_error"])


def default_use_cache() -> bool:
    return get_default("use_cache", FALLBACK_DEFAULTS["use_cache"])


def default_log_level() -> str:
    return get_default("log_level", FALLBACK_DEFAULTS["log_level"])
