"""eijiro - English-Japanese dictionary lookup toolkit.

Parses the EIJIRO flat-text corpus, groups senses by headword and answers
exact or approximate (bounded edit distance) lookups.

Core concepts:
    - Each corpus line is one sense (Field) of one headword
    - Headwords are sorted and indexed once; the Dictionary is immutable
    - Fuzzy matches list prefix matches before everything else

Example:
    "cat" with distance 1 matches "bat", "cat", "cats", "cut".
    "cat" and "cats" come first because they start with the query.

Usage:
    from eijiro.loader import load_dictionary
    from eijiro.lookup import lookup

    dictionary = load_dictionary("EIJIRO.txt", "dict_dump.json")
    for result in lookup(dictionary, "cat", max_distance=1):
        print(result.headword, len(result.fields))
"""

__version__ = "0.1.1"
