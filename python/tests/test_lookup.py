"""Tests for the query façade."""

import itertools

import pytest

from eijiro.errors import IndexConstructionError, QueryError
from eijiro.lookup import LookupResult, iter_matches, lookup


class TestLookup:
    """Tests for lookup()."""

    def test_exact_only(self, sample_dictionary):
        """Test distance 0 returns the exact headword only."""
        results = lookup(sample_dictionary, "cat", 0)
        assert [r.headword for r in results] == ["cat"]
        assert len(results[0].fields) == 2

    def test_fuzzy_prefix_first(self, sample_dictionary):
        """Test distance 2 on the sample scenario."""
        results = lookup(sample_dictionary, "cat", 2)
        # "catalog" is distance 4 away, so only "cat" survives
        assert [r.headword for r in results] == ["cat"]

        results = lookup(sample_dictionary, "catal", 2)
        assert [r.headword for r in results] == ["catalog", "cat"]

    def test_ranking(self, rich_dictionary):
        """Test that prefix matches precede every other match."""
        results = lookup(rich_dictionary, "cat", 1)
        headwords = [r.headword for r in results]
        assert headwords == ["cat", "cats", "bat", "cut"]

    @pytest.mark.parametrize("query", ["cat", "ca", "c", "ab", "Caf"])
    @pytest.mark.parametrize("distance", [0, 1, 2, 3])
    def test_ranking_property(self, rich_dictionary, query, distance):
        """Test the prefix/non-prefix partition for many queries."""
        flags = [
            r.headword.startswith(query)
            for r in lookup(rich_dictionary, query, distance)
        ]
        assert flags == sorted(flags, reverse=True)

    def test_groups_keep_index_order(self, rich_dictionary):
        """Test that each ranked group stays in sorted-key order."""
        results = lookup(rich_dictionary, "cats", 2)
        headwords = [r.headword for r in results]
        prefixed = [h for h in headwords if h.startswith("cats")]
        others = [h for h in headwords if not h.startswith("cats")]
        assert headwords == prefixed + others
        assert others == sorted(others)

    def test_fields_joined(self, rich_dictionary):
        """Test that each result carries the headword's Fields."""
        (result,) = lookup(rich_dictionary, "abandon", 0)
        assert result.fields == rich_dictionary.get("abandon")
        assert result.fields[0].examples == (
            "She abandoned her dreams. 彼女は夢を捨てた。",
            "They abandoned ship.",
        )

    def test_empty_query(self, sample_dictionary):
        """Test that an empty query returns no results."""
        assert lookup(sample_dictionary, "", 1) == []
        assert lookup(sample_dictionary, "", 0) == []

    def test_no_match(self, sample_dictionary):
        assert lookup(sample_dictionary, "zebra", 1) == []

    def test_limit(self, rich_dictionary):
        """Test that limit keeps the best-ranked results."""
        results = lookup(rich_dictionary, "cat", 1, limit=2)
        assert [r.headword for r in results] == ["cat", "cats"]
        assert len(lookup(rich_dictionary, "cat", 1, limit=0)) == 4

    def test_negative_limit(self, rich_dictionary):
        """Test that a negative limit is rejected instead of trimming results."""
        with pytest.raises(QueryError):
            lookup(rich_dictionary, "cat", 1, limit=-1)

    def test_case_sensitive(self, rich_dictionary):
        assert lookup(rich_dictionary, "café", 0) == []
        assert [r.headword for r in lookup(rich_dictionary, "Café", 0)] == ["Café"]

    def test_invalid_distance(self, sample_dictionary):
        """Test that an invalid distance is reported per call."""
        with pytest.raises(IndexConstructionError):
            lookup(sample_dictionary, "cat", -1)
        # The dictionary stays usable afterwards
        assert lookup(sample_dictionary, "cat", 0)[0].headword == "cat"

    def test_distance_limit_override(self, sample_dictionary):
        results = lookup(sample_dictionary, "cat", 4, distance_limit=4)
        assert [r.headword for r in results] == ["cat", "catalog"]

    def test_non_string_query(self, sample_dictionary):
        with pytest.raises(QueryError):
            lookup(sample_dictionary, None, 0)


class TestIterMatches:
    """Tests for iter_matches()."""

    def test_index_order(self, rich_dictionary):
        """Test that unranked matches come in index order."""
        headwords = [r.headword for r in iter_matches(rich_dictionary, "cat", 1)]
        assert headwords == ["bat", "cat", "cats", "cut"]

    def test_lazy(self, rich_dictionary):
        first = list(itertools.islice(iter_matches(rich_dictionary, "cat", 3), 1))
        assert len(first) == 1
        assert isinstance(first[0], LookupResult)

    def test_empty_query(self, rich_dictionary):
        assert list(iter_matches(rich_dictionary, "", 2)) == []
