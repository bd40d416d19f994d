"""Exception hierarchy for spos.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from SposError for easy catching of any spos-specific error.
"""

from __future__ import annotations


class SposError(Exception):
    """Base exception for all spos errors."""

    pass


class SchemaError(SposError):
    """Raised when a block schema is invalid.

    Schema errors are always raised while the block tree is being built,
    never during encode/decode.
    """

    pass


class MissingKey(SchemaError):
    """Raised when a schema node lacks ``key``, ``type`` or a required field."""

    pass


class InvalidType(SchemaError):
    """Raised when a schema field has the wrong type or ``type`` is unknown."""

    pass


class UnexpectedKey(SchemaError):
    """Raised when a schema node carries a field its block type does not declare."""

    pass


class UnsortedSteps(SchemaError):
    """Raised when the thresholds of a steps block are not strictly ascending."""

    pass


class BadNamesLength(SchemaError):
    """Raised when ``steps_names`` does not have exactly ``len(steps) + 1`` entries."""

    pass


class DuplicateKey(SchemaError):
    """Raised when object field keys collide once dotted keys are nested.

    Two fields with the same key collide, and so do ``"a"`` and ``"a.b"``:
    decoding would write both into ``record["a"]``.
    """

    pass


class EncodeError(SposError):
    """Raised when encoding a value fails.

    Examples:
        - A dotted field path cannot be resolved in the input record
        - Input value has a type the block does not accept
    """

    pass


class UnresolvableField(EncodeError):
    """Raised when an object block cannot find a field value at its dot-path."""

    pass


class InvalidValue(EncodeError):
    """Raised when an input value does not match the types a block accepts."""

    pass


class DecodeError(SposError):
    """Raised when decoding a bit-string fails.

    Examples:
        - Truncated message (fewer bits than the schema needs)
        - Characters other than '0' and '1' in the message
    """

    pass


class TruncatedBitstring(DecodeError):
    """Raised when a message ends before a block has all the bits it needs."""

    pass


class MalformedBitstring(EncodeError, DecodeError):
    """Raised for malformed raw bits.

    Either a message handed to decode contains characters other than '0'/'1',
    or a binary block input is neither a bit-string nor a hex string.
    """

    pass
