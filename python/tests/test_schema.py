"""Tests for the schema module."""

import dataclasses

import pytest
from eijiro.errors import BuildError
from eijiro.schema import Dictionary, Explanation, Field


def make_field(body: str, ident=None, complements=(), examples=()) -> Field:
    """Helper to create a test field."""
    return Field(
        ident=ident,
        explanation=Explanation(body=body, complements=complements),
        examples=examples,
    )


class TestExplanation:
    """Tests for Explanation dataclass."""

    def test_complements_become_tuple(self):
        """Test that list complements are stored as a tuple."""
        explanation = Explanation(body="猫", complements=["【複】cats"])
        assert explanation.complements == ("【複】cats",)

    def test_round_trip(self):
        """Test Explanation serialization round trip."""
        explanation = Explanation(body="猫", complements=("a", "b"))
        assert Explanation.from_dict(explanation.to_dict()) == explanation

    def test_from_dict_defaults(self):
        """Test missing complements default to empty."""
        explanation = Explanation.from_dict({"body": "猫"})
        assert explanation.complements == ()

    @pytest.mark.parametrize("body", ["", "   ", None])
    def test_blank_body(self, body):
        """Test that an Explanation needs a non-blank body."""
        with pytest.raises(ValueError):
            Explanation(body=body)

    def test_non_string_complements(self):
        with pytest.raises(TypeError):
            Explanation(body="猫", complements=[1])
        with pytest.raises(TypeError):
            Explanation(body="猫", complements="【複】cats")


class TestField:
    """Tests for Field dataclass."""

    def test_accessors(self):
        """Test body and complements shortcuts."""
        field = make_field("猫", ident="名", complements=["note"], examples=["ex"])
        assert field.body == "猫"
        assert field.complements == ("note",)
        assert field.examples == ("ex",)

    def test_frozen(self):
        """Test that Fields cannot be modified."""
        field = make_field("猫")
        with pytest.raises(dataclasses.FrozenInstanceError):
            field.ident = "名"

    def test_to_dict(self):
        """Test Field serialization."""
        data = make_field("猫", ident="名", examples=["The cat slept."]).to_dict()
        assert data == {
            "ident": "名",
            "explanation": {"body": "猫", "complements": []},
            "examples": ["The cat slept."],
        }

    def test_from_dict_untagged(self):
        """Test that a missing ident stays None."""
        field = Field.from_dict({"explanation": {"body": "猫"}})
        assert field.ident is None
        assert field.examples == ()

    def test_non_string_ident(self):
        """Test that ident must be a string or None."""
        with pytest.raises(TypeError):
            make_field("猫", ident=5)

    def test_explanation_required(self):
        with pytest.raises(TypeError):
            Field(ident=None, explanation={"body": "猫"})

    def test_non_string_examples(self):
        """Test that examples must be a sequence of strings."""
        with pytest.raises(TypeError):
            make_field("猫", examples=[1])
        with pytest.raises(TypeError):
            make_field("猫", examples="The cat slept.")


class TestDictionary:
    """Tests for Dictionary dataclass."""

    def test_lookup_helpers(self):
        """Test position, get and membership."""
        cat = make_field("猫")
        dog = make_field("犬")
        d = Dictionary(keys=("cat", "dog"), field_groups=((cat,), (dog,)))

        assert len(d) == 2
        assert d.count() == 2
        assert d.field_count() == 2
        assert "cat" in d
        assert "cow" not in d
        assert 42 not in d
        assert d.position("dog") == 1
        assert d.position("cow") is None
        assert d.get("cat") == (cat,)
        assert d.get("cow") == ()
        assert d.fields_at(1) == (dog,)

    def test_iteration(self):
        """Test iterating (headword, fields) pairs in key order."""
        d = Dictionary(
            keys=("a", "b"),
            field_groups=((make_field("x"),), (make_field("y"),)),
        )
        assert [key for key, _ in d] == ["a", "b"]

    def test_length_mismatch(self):
        """Test that keys and field groups must line up."""
        with pytest.raises(BuildError):
            Dictionary(keys=("a", "b"), field_groups=((make_field("x"),),))

    def test_empty_group(self):
        """Test that every headword needs at least one Field."""
        with pytest.raises(BuildError):
            Dictionary(keys=("a",), field_groups=((),))

    def test_unsorted_keys(self):
        """Test that keys must be strictly ascending."""
        with pytest.raises(BuildError):
            Dictionary(
                keys=("b", "a"),
                field_groups=((make_field("x"),), (make_field("y"),)),
            )

    def test_duplicate_keys(self):
        """Test that duplicate keys are rejected."""
        with pytest.raises(BuildError):
            Dictionary(
                keys=("a", "a"),
                field_groups=((make_field("x"),), (make_field("y"),)),
            )

    def test_lists_are_frozen(self):
        """Test that list input is stored as tuples."""
        d = Dictionary(keys=["a"], field_groups=[[make_field("x")]])
        assert isinstance(d.keys, tuple)
        assert isinstance(d.field_groups[0], tuple)

    def test_round_trip(self, rich_dictionary):
        """Test Dictionary serialization round trip."""
        restored = Dictionary.from_dict(rich_dictionary.to_dict())
        assert restored.keys == rich_dictionary.keys
        assert restored.field_groups == rich_dictionary.field_groups
        assert restored == rich_dictionary

    def test_to_dict_count(self, sample_dictionary):
        """Test key count in serialized form."""
        data = sample_dictionary.to_dict()
        assert data["key_count"] == 2
        assert data["keys"] == ["cat", "catalog"]
        assert len(data["field_groups"][0]) == 2
