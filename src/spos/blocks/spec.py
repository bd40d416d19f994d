"""Resolved block specifications.

Each block type declares its schema fields as a frozen pydantic model. Parsing
a raw schema node through the model checks required, optional and unexpected
keys in one pass and fills in defaults, so a block never looks a default up
again after construction.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ..exceptions import InvalidType, MissingKey, SchemaError, UnexpectedKey

Number = Union[int, float]


class BlockSpec(BaseModel):
    """Fields shared by every block type.

    Attributes:
        key: Field name inside the parent object (dots address nested records)
        type: Block type tag
        value: Literal that replaces any input on encode
    """

    model_config = ConfigDict(
        # Reject str "8" for bits, 1 for a boolean, etc.
        strict=True,
        # Resolved specs are never mutated after validation
        frozen=True,
        # Unknown schema fields are errors
        extra="forbid",
    )

    key: str
    type: str
    value: Any = None


class BooleanSpec(BlockSpec):
    type: Literal["boolean"]


class BinarySpec(BlockSpec):
    type: Literal["binary"]
    bits: int = Field(ge=0)


class IntegerSpec(BlockSpec):
    type: Literal["integer"]
    bits: int = Field(ge=0)
    offset: int = 0


class FloatSpec(BlockSpec):
    type: Literal["float"]
    bits: int = Field(ge=1)
    lower: Number = 0
    upper: Number = 1
    approximation: Literal["round", "floor", "ceil"] = "round"

    @model_validator(mode="after")
    def _distinct_bounds(self) -> FloatSpec:
        if self.upper == self.lower:
            raise ValueError(f"upper and lower must differ, both are {self.upper}")
        return self


class PadSpec(BlockSpec):
    type: Literal["pad"]
    bits: int = Field(ge=0)


class ArraySpec(BlockSpec):
    type: Literal["array"]
    bits: int = Field(ge=0)
    blocks: Dict[str, Any]


class ObjectSpec(BlockSpec):
    type: Literal["object"]
    items: List[Dict[str, Any]] = Field(validation_alias=AliasChoices("items", "blocklist"))


class StringSpec(BlockSpec):
    type: Literal["string"]
    length: int = Field(ge=0)
    custom_alphabet: Dict[Union[int, str], str] = Field(default_factory=dict)

    @field_validator("custom_alphabet")
    @classmethod
    def _index_keys(cls, alphabet: Dict[Union[int, str], str]) -> Dict[int, str]:
        # JSON object keys arrive as strings
        resolved: Dict[int, str] = {}
        for index, char in alphabet.items():
            if isinstance(index, str):
                if not index.isdigit():
                    raise ValueError(f"alphabet index must be an integer, got {index!r}")
                index = int(index)
            if not 0 <= index < 64:
                raise ValueError(f"alphabet index must be 0-63, got {index}")
            if len(char) != 1:
                raise ValueError(f"alphabet entry {index} must be one character, got {char!r}")
            resolved[index] = char
        return resolved


class StepsSpec(BlockSpec):
    type: Literal["steps"]
    steps: List[Number] = Field(min_length=1)
    steps_names: List[str] = Field(default_factory=list)


class CategoriesSpec(BlockSpec):
    type: Literal["categories"]
    categories: List[str]


def resolve_spec(model: type[BlockSpec], schema: Dict[str, Any]) -> BlockSpec:
    """Validate a raw schema node against a spec model.

    Pydantic errors are mapped onto the spos schema taxonomy. When several
    problems are present, missing fields win over unexpected fields, which win
    over type mismatches.

    Args:
        model: Spec model for the node's block type
        schema: Raw schema node

    Returns:
        Fully resolved, frozen spec

    Raises:
        MissingKey: A required field is absent
        UnexpectedKey: The node has a field the type does not declare
        InvalidType: A field value has the wrong type or fails a constraint
    """
    try:
        return model.model_validate(dict(schema))
    except ValidationError as e:
        raise _translate(schema, e) from e


def _translate(schema: Dict[str, Any], error: ValidationError) -> SchemaError:
    key = schema.get("key")
    problems = error.errors()

    for kind, exc_type, template in (
        ("missing", MissingKey, "Block '{key}' must have key '{field}'."),
        ("extra_forbidden", UnexpectedKey, "Block '{key}' has an unexpected key '{field}'."),
    ):
        for problem in problems:
            if problem["type"] == kind:
                return exc_type(template.format(key=key, field=_location(problem)))

    problem = problems[0]
    return InvalidType(
        f"Block '{key}' key '{_location(problem)}' has unexpected type: {problem['msg']}"
    )


def _location(problem: Any) -> str:
    return ".".join(str(part) for part in problem["loc"])
