"""Composite blocks: arrays and objects.

Composite blocks own child blocks and have no fixed width. How many bits they
occupy depends on the data: an array carries its length inline as a prefix,
and an object is as long as all of its fields together. Both therefore work
out ``bit_length`` by walking the message.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..exceptions import DuplicateKey, InvalidType, UnresolvableField
from ..utils.predicates import is_array, is_object, matches_type
from .base import Block
from .scalars import IntegerBlock
from .spec import ArraySpec, IntegerSpec, ObjectSpec

logger = logging.getLogger(__name__)


class ArrayBlock(Block):
    """Homogeneous list with a ``bits``-wide length prefix.

    Lists longer than ``2**bits - 1`` items are truncated on encode.

    Example:
        >>> block = build_block({
        ...     "key": "readings", "type": "array", "bits": 8,
        ...     "blocks": {"key": "reading", "type": "integer", "bits": 6},
        ... })
        >>> block.encode([1, 2, 3])
        '00000011000001000010000011'
    """

    spec_model = ArraySpec
    input_types = ("array",)

    def __init__(self, spec: ArraySpec) -> None:
        super().__init__(spec)
        # Import here to avoid circular dependency
        from .factory import build_block

        self.bits = None
        self.prefix_bits = spec.bits
        self.max_length = (1 << spec.bits) - 1
        self.length_block = IntegerBlock(IntegerSpec(key="length", type="integer", bits=spec.bits))
        self.items_block = build_block(spec.blocks)

    def _encode(self, value: Sequence[Any]) -> str:
        length = min(len(value), self.max_length)
        if length < len(value):
            logger.debug(
                "Block '%s': truncating %d items to %d", self.key, len(value), self.max_length
            )
        return self.length_block.encode(length) + "".join(
            self.items_block.encode(item) for item in value[:length]
        )

    def _decode(self, message: str) -> list[Any]:
        value, _ = self.consume(message)
        return value

    def consume(self, message: str) -> tuple[list[Any], str]:
        length, message = self.length_block.consume(message)
        values = []
        for _ in range(length):
            item, message = self.items_block.consume(message)
            values.append(item)
        return values, message

    def bit_length(self, message: str) -> int:
        length, remainder = self.length_block.consume(message)
        total = self.prefix_bits
        for _ in range(length):
            # Items may be variable-width themselves
            bits = self.items_block.bit_length(remainder)
            total += bits
            remainder = remainder[bits:]
        return total


class ObjectBlock(Block):
    """Ordered record of named fields.

    Field keys may be dotted: ``"a.b"`` reads ``value["a"]["b"]`` on encode
    and rebuilds ``{"a": {"b": ...}}`` on decode.

    Raises:
        DuplicateKey: If two field keys collide, like ``"a"`` and ``"a.b"``
        InvalidType: If a field key has an empty segment, like ``"a."``
    """

    spec_model = ObjectSpec
    input_types = ("object",)

    def __init__(self, spec: ObjectSpec) -> None:
        super().__init__(spec)
        # Import here to avoid circular dependency
        from .factory import build_block

        self.blocklist = [build_block(item) for item in spec.items]
        self.leaf_paths = self._check_keys()

        widths = [block.bits for block in self.blocklist]
        self.bits = None if None in widths else sum(widths)

    def _check_keys(self) -> tuple[str, ...]:
        """Return the dotted path of every leaf field, rejecting colliding keys."""
        keys: set[str] = set()
        paths: list[str] = []
        for block in self.blocklist:
            if "" in block.key.split("."):
                raise InvalidType(
                    f"Block '{self.key}' field key '{block.key}' has an empty segment"
                )
            if block.key in keys:
                raise DuplicateKey(f"Block '{self.key}' has duplicate field key '{block.key}'")
            keys.add(block.key)
            # Nested objects contribute their own leaves under this key
            if isinstance(block, ObjectBlock) and block.leaf_paths:
                paths.extend(f"{block.key}.{path}" for path in block.leaf_paths)
            else:
                paths.append(block.key)

        seen: set[str] = set()
        for path in paths:
            if path in seen:
                raise DuplicateKey(f"Block '{self.key}' has duplicate field key '{path}'")
            seen.add(path)

        for path in paths:
            parts = path.split(".")
            for i in range(1, len(parts)):
                prefix = ".".join(parts[:i])
                if prefix in seen:
                    raise DuplicateKey(
                        f"Block '{self.key}' field key '{path}' collides with field '{prefix}'"
                    )
        return tuple(paths)

    def _encode(self, value: Mapping[str, Any]) -> str:
        return "".join(block.encode(self._field_value(block, value)) for block in self.blocklist)

    def _field_value(self, block: Block, record: Mapping[str, Any]) -> Any:
        try:
            return get_path(record, block.key)
        except KeyError:
            # Pad, categories and literal fields do not need input
            if block.spec.value is not None or matches_type(block.input_types, None):
                return None
            raise UnresolvableField(
                f"Block '{self.key}': no value for field '{block.key}'"
            ) from None

    def _decode(self, message: str) -> dict[str, Any]:
        value, _ = self.consume(message)
        return value

    def consume(self, message: str) -> tuple[dict[str, Any], str]:
        values: dict[str, Any] = {}
        for block in self.blocklist:
            values[block.key], message = block.consume(message)
        return nest_record(values), message

    def bit_length(self, message: str) -> int:
        total = 0
        for block in self.blocklist:
            bits = block.bit_length(message)
            total += bits
            message = message[bits:]
        return total


def get_path(record: Any, key: str) -> Any:
    """Look up a dotted key in nested mappings.

    Raises:
        KeyError: If any segment is missing or its container is not a mapping
    """
    node = record
    for part in key.split("."):
        if not is_object(node) or part not in node:
            raise KeyError(key)
        node = node[part]
    return node


def nest_record(flat: Mapping[str, Any]) -> dict[str, Any]:
    """Rebuild nested records from dotted keys.

    Example:
        >>> nest_record({"a.b": 1, "a.c": 2, "d": 3})
        {'a': {'b': 1, 'c': 2}, 'd': 3}
    """
    nested: dict[str, Any] = {}
    for key, value in flat.items():
        head, _, rest = key.partition(".")
        if rest:
            value = nest_record({rest: value})
        elif is_array(value):
            value = [nest_record(item) if is_object(item) else item for item in value]
        _merge(nested, head, value)
    return nested


def _merge(target: dict[str, Any], key: str, value: Any) -> None:
    existing = target.get(key)
    if is_object(value) and is_object(existing):
        merged = dict(existing)
        for inner_key, inner_value in value.items():
            _merge(merged, inner_key, inner_value)
        target[key] = merged
    else:
        target[key] = value
