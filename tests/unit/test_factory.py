"""Unit tests for schema validation and block construction."""

from __future__ import annotations

import pytest

from spos import (
    BadNamesLength,
    DuplicateKey,
    InvalidType,
    MissingKey,
    SchemaError,
    UnexpectedKey,
    UnsortedSteps,
    build_block,
    encode,
)
from spos.blocks import (
    ArrayBlock,
    BinaryBlock,
    BooleanBlock,
    CategoriesBlock,
    FloatBlock,
    IntegerBlock,
    ObjectBlock,
    PadBlock,
    StepsBlock,
    StringBlock,
)


class TestBlockKeyAndType:
    """Test the fields every schema node needs."""

    def test_missing_key(self) -> None:
        """A node without 'key' is rejected."""
        with pytest.raises(MissingKey, match="must have 'key'"):
            build_block({"type": "boolean"})

    def test_missing_type(self) -> None:
        """A node without 'type' is rejected."""
        with pytest.raises(MissingKey, match="must have 'type'"):
            build_block({"key": "flag"})

    def test_key_not_string(self) -> None:
        """The key must be a string."""
        with pytest.raises(InvalidType, match="must be a string"):
            build_block({"key": 3, "type": "boolean"})

    def test_unknown_type(self) -> None:
        """Unregistered type tags are rejected."""
        with pytest.raises(InvalidType, match="should be one of"):
            build_block({"key": "test", "type": "unknown"})

    def test_schema_not_mapping(self) -> None:
        """A schema node must be a mapping."""
        with pytest.raises(InvalidType):
            build_block(["key", "type"])  # type: ignore[arg-type]

    def test_schema_errors_share_base(self) -> None:
        """All schema errors can be caught as SchemaError."""
        with pytest.raises(SchemaError):
            build_block({"key": "test", "type": "unknown"})


class TestFieldValidation:
    """Test required, optional and unexpected schema fields."""

    def test_missing_required_field(self) -> None:
        """Binary blocks need 'bits'."""
        with pytest.raises(MissingKey, match="bits"):
            build_block({"key": "test", "type": "binary"})

    def test_required_field_wrong_type(self) -> None:
        """'bits' must be an integer."""
        with pytest.raises(InvalidType, match="bits"):
            build_block({"key": "test", "type": "binary", "bits": "err"})

    def test_bool_is_not_an_integer(self) -> None:
        """Booleans are not accepted where an integer is declared."""
        with pytest.raises(InvalidType):
            build_block({"key": "test", "type": "integer", "bits": True})

    def test_optional_field_wrong_type(self) -> None:
        """'offset' must be an integer when given."""
        with pytest.raises(InvalidType, match="offset"):
            build_block({"key": "test", "type": "integer", "bits": 6, "offset": "err"})

    def test_negative_bits(self) -> None:
        """Bit widths cannot be negative."""
        with pytest.raises(InvalidType):
            build_block({"key": "test", "type": "integer", "bits": -1})

    def test_unexpected_key(self) -> None:
        """Fields a type does not declare are rejected."""
        with pytest.raises(UnexpectedKey, match="'bits'"):
            build_block({"key": "flag", "type": "boolean", "bits": 1})

    def test_missing_wins_over_unexpected(self) -> None:
        """A missing required field is reported before an unexpected one."""
        with pytest.raises(MissingKey):
            build_block({"key": "test", "type": "binary", "colour": "red"})

    def test_invalid_approximation(self) -> None:
        """Float approximation must be round, floor or ceil."""
        with pytest.raises(InvalidType, match="approximation"):
            build_block({"key": "f", "type": "float", "bits": 8, "approximation": "nearest"})

    def test_float_equal_bounds(self) -> None:
        """A float range must not be empty."""
        with pytest.raises(InvalidType):
            build_block({"key": "f", "type": "float", "bits": 8, "lower": 1, "upper": 1})

    def test_defaults_are_resolved(self) -> None:
        """Optional fields carry their defaults after validation."""
        block = build_block({"key": "f", "type": "float", "bits": 8})

        assert block.spec.lower == 0
        assert block.spec.upper == 1
        assert block.spec.approximation == "round"
        assert block.spec.value is None

    def test_spec_is_frozen(self) -> None:
        """Resolved specs cannot be mutated."""
        block = build_block({"key": "n", "type": "integer", "bits": 4})

        with pytest.raises(Exception):
            block.spec.bits = 8  # type: ignore[misc]

    def test_raw_schema_not_mutated(self) -> None:
        """Building a block leaves the raw schema untouched."""
        schema = {"key": "c", "type": "categories", "categories": ["a", "b"]}
        build_block(schema)

        assert schema == {"key": "c", "type": "categories", "categories": ["a", "b"]}

    def test_literal_value_type_checked(self) -> None:
        """A literal value must be something the block could encode."""
        with pytest.raises(InvalidType, match="literal"):
            build_block({"key": "n", "type": "integer", "bits": 4, "value": "seven"})


class TestEnumerationValidation:
    """Test construction-time checks of enumeration blocks."""

    def test_unsorted_steps(self) -> None:
        """Steps must be strictly ascending."""
        with pytest.raises(UnsortedSteps):
            build_block({"key": "s", "type": "steps", "steps": [20, 10]})

    def test_repeated_steps(self) -> None:
        """Repeated thresholds are not strictly ascending."""
        with pytest.raises(UnsortedSteps):
            build_block({"key": "s", "type": "steps", "steps": [10, 10]})

    def test_bad_names_length(self) -> None:
        """steps_names needs one more entry than steps."""
        with pytest.raises(BadNamesLength):
            build_block(
                {"key": "s", "type": "steps", "steps": [10, 20], "steps_names": ["low", "high"]}
            )

    def test_empty_steps(self) -> None:
        """At least one threshold is needed."""
        with pytest.raises(InvalidType):
            build_block({"key": "s", "type": "steps", "steps": []})

    def test_categories_must_be_strings(self) -> None:
        """Category labels are strings."""
        with pytest.raises(InvalidType):
            build_block({"key": "c", "type": "categories", "categories": [1, 2]})


class TestCompositeValidation:
    """Test recursive validation of child schemas."""

    def test_invalid_array_item(self) -> None:
        """Errors in an array's item schema surface at construction."""
        with pytest.raises(MissingKey):
            build_block({"key": "a", "type": "array", "bits": 4, "blocks": {"key": "x"}})

    def test_invalid_object_field(self) -> None:
        """Errors in a nested field surface at construction, not on encode."""
        schema = {
            "key": "o",
            "type": "object",
            "items": [
                {"key": "ok", "type": "boolean"},
                {"key": "inner", "type": "object", "items": [{"key": "bad", "type": "integer"}]},
            ],
        }
        with pytest.raises(MissingKey, match="bits"):
            build_block(schema)

    def test_object_needs_items(self) -> None:
        """Object blocks need a field list."""
        with pytest.raises(MissingKey, match="items"):
            build_block({"key": "o", "type": "object"})

    def test_blocklist_alias(self) -> None:
        """'blocklist' is accepted in place of 'items'."""
        block = build_block(
            {"key": "o", "type": "object", "blocklist": [{"key": "flag", "type": "boolean"}]}
        )

        assert block.encode({"flag": True}) == "1"

    def test_duplicate_field_keys(self) -> None:
        """Field keys inside one object must be unique."""
        schema = {
            "key": "o",
            "type": "object",
            "items": [
                {"key": "flag", "type": "boolean"},
                {"key": "flag", "type": "boolean"},
            ],
        }
        with pytest.raises(DuplicateKey, match="duplicate"):
            build_block(schema)

    def test_key_prefix_of_sibling(self) -> None:
        """A field may not sit at a path another field nests under."""
        schema = {
            "key": "o",
            "type": "object",
            "items": [
                {"key": "a", "type": "integer", "bits": 2},
                {"key": "a.b", "type": "integer", "bits": 2},
            ],
        }
        with pytest.raises(DuplicateKey, match="collides"):
            build_block(schema)

    def test_key_collides_with_nested_object_field(self) -> None:
        """Dotted keys collide with the fields of a nested object too."""
        schema = {
            "key": "o",
            "type": "object",
            "items": [
                {"key": "a", "type": "object", "items": [{"key": "b", "type": "boolean"}]},
                {"key": "a.b", "type": "boolean"},
            ],
        }
        with pytest.raises(DuplicateKey):
            build_block(schema)

    def test_sibling_paths_under_one_prefix(self) -> None:
        """Distinct leaves under a shared prefix are allowed."""
        schema = {
            "key": "o",
            "type": "object",
            "items": [
                {"key": "a", "type": "object", "items": [{"key": "b", "type": "boolean"}]},
                {"key": "a.c", "type": "boolean"},
                {"key": "ab", "type": "boolean"},
            ],
        }
        block = build_block(schema)

        assert block.leaf_paths == ("a.b", "a.c", "ab")
        assert block.decode("101") == {"a": {"b": True, "c": False}, "ab": True}

    @pytest.mark.parametrize("key", ["a.", ".a", "a..b", ""])
    def test_key_with_empty_segment(self, key: str) -> None:
        """Field keys cannot have empty dot segments."""
        schema = {"key": "o", "type": "object", "items": [{"key": key, "type": "boolean"}]}

        with pytest.raises(InvalidType, match="empty segment"):
            build_block(schema)

    def test_array_blocks_must_be_mapping(self) -> None:
        """An array's item schema is a single node, not a list."""
        with pytest.raises(InvalidType):
            build_block(
                {"key": "a", "type": "array", "bits": 4, "blocks": [{"key": "x", "type": "boolean"}]}
            )


class TestBlockTypes:
    """Test the type tag to block class mapping."""

    @pytest.mark.parametrize(
        ("schema", "block_class"),
        [
            ({"key": "b", "type": "boolean"}, BooleanBlock),
            ({"key": "b", "type": "binary", "bits": 4}, BinaryBlock),
            ({"key": "i", "type": "integer", "bits": 4}, IntegerBlock),
            ({"key": "f", "type": "float", "bits": 4}, FloatBlock),
            ({"key": "p", "type": "pad", "bits": 4}, PadBlock),
            ({"key": "s", "type": "string", "length": 4}, StringBlock),
            ({"key": "s", "type": "steps", "steps": [1]}, StepsBlock),
            ({"key": "c", "type": "categories", "categories": ["a"]}, CategoriesBlock),
            (
                {"key": "a", "type": "array", "bits": 2, "blocks": {"key": "x", "type": "boolean"}},
                ArrayBlock,
            ),
            ({"key": "o", "type": "object", "items": []}, ObjectBlock),
        ],
    )
    def test_block_class(self, schema: dict, block_class: type) -> None:
        """Each type tag builds its block class."""
        assert isinstance(build_block(schema), block_class)

    def test_prebuilt_block_passthrough(self) -> None:
        """A built block is accepted wherever a schema is."""
        block = build_block({"key": "i", "type": "integer", "bits": 4})

        assert build_block(block) is block
        assert encode(9, block) == "1001"

    def test_construction_is_idempotent(self, telemetry_schema: dict) -> None:
        """Two blocks built from one schema encode identically."""
        value = {
            "id": 120,
            "online": True,
            "battery": 55.5,
            "callsign": "ALPHA",
            "temperature": 18,
            "mode": "run",
            "position": {"x": 100, "y": 200},
            "samples": [{"channel": 1, "values": [1, 2]}],
        }

        assert build_block(telemetry_schema).encode(value) == build_block(
            telemetry_schema
        ).encode(value)
