"""Value-type predicates shared by the blocks.

These helpers classify raw Python values the way schema fields and block
inputs declare them (``"integer"``, ``"number"``, ``"bin"``, ``"hex"``, ...).
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from typing import Any

_BIN_RE = re.compile(r"^[01]+$")
_HEX_RE = re.compile(r"^(?:[0-9a-fA-F]{2})+$")


def is_integer(value: Any) -> bool:
    """Return True for ints, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: Any) -> bool:
    """Return True for finite ints and floats, excluding bools."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_bin(value: Any) -> bool:
    """Return True for non-empty strings made only of '0' and '1'."""
    return isinstance(value, str) and _BIN_RE.match(value) is not None


def is_hex(value: Any) -> bool:
    """Return True for strings of hex digit pairs."""
    return isinstance(value, str) and _HEX_RE.match(value) is not None


def is_array(value: Any) -> bool:
    """Return True for lists and tuples (strings and bytes are not arrays)."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_object(value: Any) -> bool:
    """Return True for plain records (any mapping)."""
    return isinstance(value, Mapping)


def is_sorted(values: Sequence[Any]) -> bool:
    """Return True if ``values`` is strictly ascending."""
    return all(a < b for a, b in zip(values, values[1:]))


def round_half_even(value: float) -> int:
    """Round to the nearest integer, ties to even (banker's rounding)."""
    return int(round(value))


_CHECKS = {
    "any": lambda v: True,
    "boolean": lambda v: isinstance(v, bool),
    "integer": is_integer,
    "number": is_number,
    "string": is_string,
    "bin": is_bin,
    "hex": is_hex,
    "array": is_array,
    "object": is_object,
}


def matches_type(types: Sequence[str | None], value: Any) -> bool:
    """Check ``value`` against a declared type set.

    ``None`` in the set accepts an absent value (``None`` itself) and
    ``"any"`` accepts every value.

    Example:
        >>> matches_type(["boolean", "integer"], 1)
        True
        >>> matches_type(["bin", "hex"], "xyz")
        False
    """
    for tp in types:
        if tp is None:
            if value is None:
                return True
            continue
        check = _CHECKS.get(tp)
        if check is not None and check(value):
            return True
    return False
