"""Abstract interface shared by every block.

A block is the codec bound to one resolved schema node. All blocks expose the
same four operations:

- ``encode(value)``: value to bit-string
- ``decode(message)``: bit-string to value
- ``consume(message)``: decode the leading bits, return ``(value, remainder)``
- ``bit_length(message)``: how many leading bits of ``message`` belong to
  this block

Fixed-width blocks answer ``bit_length`` from their spec alone. Composite
blocks (array, object) override it and work it out from the message.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Sequence

from ..exceptions import InvalidType, InvalidValue, MalformedBitstring, TruncatedBitstring
from ..utils.predicates import is_bin, matches_type
from .spec import BlockSpec


class Block(ABC):
    """Base class for all blocks.

    Subclasses set ``spec_model`` to the pydantic model describing their
    schema fields and ``input_types`` to the value types ``encode`` accepts.

    Attributes:
        spec: Resolved, frozen schema node
        key: Shortcut for ``spec.key``
        bits: Fixed bit width, or None for variable-width blocks
    """

    spec_model: ClassVar[type[BlockSpec]] = BlockSpec
    input_types: ClassVar[Sequence[str | None]] = ()

    def __init__(self, spec: BlockSpec) -> None:
        self.spec = spec
        self.key = spec.key
        self.bits: int | None = getattr(spec, "bits", None)

        if spec.value is not None and not matches_type(self.input_types, spec.value):
            raise InvalidType(
                f"Block '{self.key}' literal value {spec.value!r} must be one of "
                f"{', '.join(str(tp) for tp in self.input_types)}"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"

    def validate_value(self, value: Any) -> None:
        """Check an input value against ``input_types``.

        Raises:
            InvalidValue: If the value has a type this block does not accept
        """
        if not matches_type(self.input_types, value):
            raise InvalidValue(
                f"Block '{self.key}': unexpected type for value {value!r}, expected one of "
                f"{', '.join(str(tp) for tp in self.input_types)}"
            )

    def encode(self, value: Any) -> str:
        """Encode a value to a bit-string.

        A literal ``value`` on the spec replaces the input.

        Raises:
            InvalidValue: If the input has an unexpected type
            EncodeError: For block-specific encoding failures
        """
        if self.spec.value is not None:
            return self._encode(self.spec.value)
        self.validate_value(value)
        return self._encode(value)

    def decode(self, message: str) -> Any:
        """Decode the value at the front of a bit-string.

        Raises:
            MalformedBitstring: If ``message`` contains characters other than '0'/'1'
            TruncatedBitstring: If ``message`` is shorter than this block needs
        """
        if message and not is_bin(message):
            raise MalformedBitstring(f"Block '{self.key}': {message!r} is not a bit-string")
        value, _ = self.consume(message)
        return value

    def consume(self, message: str) -> tuple[Any, str]:
        """Decode this block's bits and return them with the unconsumed remainder.

        Raises:
            MalformedBitstring: If this block's bits contain characters other than '0'/'1'
            TruncatedBitstring: If ``message`` is shorter than this block needs
        """
        bits = self.bit_length(message)
        if len(message) < bits:
            raise TruncatedBitstring(
                f"Truncated data while decoding block '{self.key}': "
                f"need {bits} bits, have {len(message)}"
            )
        head = message[:bits]
        if head and not is_bin(head):
            raise MalformedBitstring(f"Block '{self.key}': {head!r} is not a bit-string")
        return self._decode(head), message[bits:]

    def bit_length(self, message: str) -> int:
        """Number of leading bits of ``message`` this block occupies.

        Raises:
            TypeError: If the block has no fixed width and does not override this
        """
        if self.bits is None:
            raise TypeError(
                f"{type(self).__name__} has no fixed width and must override bit_length"
            )
        return self.bits

    @abstractmethod
    def _encode(self, value: Any) -> str:
        """Encode an already validated value."""

    @abstractmethod
    def _decode(self, message: str) -> Any:
        """Decode exactly this block's bits."""
