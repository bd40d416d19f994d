"""Fixed-width scalar blocks: boolean, binary, integer, float and pad."""

from __future__ import annotations

import math
from typing import Any

from ..exceptions import MalformedBitstring
from ..utils.predicates import is_bin, is_hex, round_half_even
from .base import Block
from .spec import BinarySpec, BooleanSpec, FloatSpec, IntegerSpec, PadSpec


class BooleanBlock(Block):
    """One bit: ``1`` for truthy input (True or a non-zero integer)."""

    spec_model = BooleanSpec
    input_types = ("boolean", "integer")

    def __init__(self, spec: BooleanSpec) -> None:
        super().__init__(spec)
        self.bits = 1

    def _encode(self, value: Any) -> str:
        return "1" if value else "0"

    def _decode(self, message: str) -> bool:
        return message == "1"


class BinaryBlock(Block):
    """Raw bits, given either as a bit-string or as hex text.

    Input is left-padded with zeros to ``bits`` and then truncated to ``bits``.
    Decoding returns the observed bits unchanged.
    """

    spec_model = BinarySpec
    input_types = ("bin", "hex")

    def validate_value(self, value: Any) -> None:
        if isinstance(value, str) and not (is_bin(value) or is_hex(value)):
            raise MalformedBitstring(f"Block '{self.key}': {value!r} is neither binary nor hex")
        super().validate_value(value)

    def _encode(self, value: str) -> str:
        # Anything made only of 0/1 is read as bits, even if it would be valid hex
        if not is_bin(value):
            value = format(int(value, 16), f"0{4 * len(value)}b")
        return value.rjust(self.bits, "0")[: self.bits]

    def _decode(self, message: str) -> str:
        return message


class IntegerBlock(Block):
    """Unsigned integer stored as ``value - offset``, clamped to the bit width.

    Example:
        >>> block = IntegerBlock(IntegerSpec(key="n", type="integer", bits=6, offset=200))
        >>> block.encode(210)
        '001010'
    """

    spec_model = IntegerSpec
    input_types = ("integer",)

    def __init__(self, spec: IntegerSpec) -> None:
        super().__init__(spec)
        self.offset = spec.offset
        self.overflow = (1 << spec.bits) - 1

    def _encode(self, value: int) -> str:
        value = min(self.overflow, max(0, value - self.offset))
        return _to_bits(value, self.bits)

    def _decode(self, message: str) -> int:
        return self.offset + _from_bits(message)


class FloatBlock(Block):
    """Float quantized onto ``2**bits`` evenly spaced levels in ``[lower, upper]``.

    Values outside the range are clamped. ``approximation`` picks how a value
    between two levels is snapped: ``round`` (ties to even), ``floor`` or
    ``ceil``.
    """

    spec_model = FloatSpec
    input_types = ("number",)

    _APPROXIMATIONS = {
        "round": round_half_even,
        "floor": math.floor,
        "ceil": math.ceil,
    }

    def __init__(self, spec: FloatSpec) -> None:
        super().__init__(spec)
        self.lower = spec.lower
        self.upper = spec.upper
        self.overflow = (1 << spec.bits) - 1
        self.approximation = self._APPROXIMATIONS[spec.approximation]

    def _encode(self, value: float) -> str:
        scaled = self.overflow * (value - self.lower) / (self.upper - self.lower)
        scaled = min(self.overflow, max(0, scaled))
        return _to_bits(int(self.approximation(scaled)), self.bits)

    def _decode(self, message: str) -> float:
        return self.lower + _from_bits(message) * (self.upper - self.lower) / self.overflow


class PadBlock(Block):
    """Filler of ``bits`` one-bits; takes no input and decodes to None."""

    spec_model = PadSpec
    input_types = ("any",)

    def _encode(self, value: Any) -> str:
        return "1" * self.bits

    def _decode(self, message: str) -> None:
        return None


def _to_bits(value: int, bits: int) -> str:
    if bits == 0:
        return ""
    return format(value, f"0{bits}b")


def _from_bits(message: str) -> int:
    return int(message, 2) if message else 0

