"""Dictionary builder module.

Groups parsed entries by headword and produces the immutable Dictionary:
- sorted, unique headwords
- a parallel table of Fields per headword, in corpus order
"""

from .dictionary import BuildStats, DictionaryBuilder, build

__all__ = [
    "BuildStats",
    "DictionaryBuilder",
    "build",
]
