"""Conversions between bit-strings and hex text."""

from __future__ import annotations

from ..exceptions import MalformedBitstring
from .predicates import is_bin


def bits_to_hex(bits: str) -> str:
    """Render a bit-string as lower-case hex.

    The bit-string is left-padded with zeros to a multiple of 4 bits, so
    leading zero bits survive as leading zero nibbles.

    Args:
        bits: Bit-string of '0'/'1' characters

    Returns:
        Hex text, one character per nibble

    Raises:
        MalformedBitstring: If ``bits`` contains other characters

    Example:
        >>> bits_to_hex("101")
        '5'
        >>> bits_to_hex("000011111")
        '01f'
    """
    if bits == "":
        return ""
    if not is_bin(bits):
        raise MalformedBitstring(f"Not a bit-string: {bits!r}")
    nibbles = -(-len(bits) // 4)
    return format(int(bits, 2), f"0{nibbles}x")


def hex_to_bits(text: str, bits: int | None = None) -> str:
    """Expand hex text back into a bit-string.

    Args:
        text: Hex digits (case-insensitive, optional ``0x`` prefix)
        bits: Known bit count of the original message; the zero padding added
            by :func:`bits_to_hex` is stripped from the left when given

    Returns:
        Bit-string of ``4 * len(text)`` characters, or ``bits`` characters

    Raises:
        MalformedBitstring: If ``text`` is not hex or ``bits`` is too large
    """
    if text.lower().startswith("0x"):
        text = text[2:]
    if text == "":
        return ""
    try:
        value = int(text, 16)
    except ValueError as e:
        raise MalformedBitstring(f"Not a hex string: {text!r}") from e

    result = format(value, f"0{4 * len(text)}b")
    if bits is not None:
        if bits > len(result):
            raise MalformedBitstring(
                f"Hex string {text!r} holds {len(result)} bits, {bits} requested"
            )
        result = result[len(result) - bits :]
    return result
