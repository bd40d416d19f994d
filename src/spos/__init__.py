"""spos: Small Payload Object Serializer

A Python library for packing structured values into dense bit-strings using a
declarative schema. Designed for payloads where every bit counts, such as
telemetry over constrained links.

Key Features:
- Schema-driven encoding: booleans, integers, quantized floats, strings,
  raw binary/hex, steps, categories, arrays and nested objects
- Variable-length arrays framed by inline length prefixes
- Eager schema validation with pydantic
- Pure Python implementation

Quick Start:
    >>> from spos import encode, decode
    >>>
    >>> schema = {
    ...     "key": "status",
    ...     "type": "object",
    ...     "items": [
    ...         {"key": "vehicle_id", "type": "integer", "bits": 8},
    ...         {"key": "battery", "type": "float", "bits": 6, "upper": 100},
    ...         {"key": "active", "type": "boolean"},
    ...     ],
    ... }
    >>> message = encode({"vehicle_id": 42, "battery": 87.0, "active": True}, schema)
    >>> decoded = decode(message, schema)
"""

from __future__ import annotations

__version__ = "0.1.0"

from .blocks import Block, BlockSpec, build_block
from .codec import decode, encode
from .exceptions import (
    BadNamesLength,
    DecodeError,
    DuplicateKey,
    EncodeError,
    InvalidType,
    InvalidValue,
    MalformedBitstring,
    MissingKey,
    SchemaError,
    SposError,
    TruncatedBitstring,
    UnexpectedKey,
    UnresolvableField,
    UnsortedSteps,
)
from .config import load_schema
from .utils import bits_to_hex, hex_to_bits
from .utils.sizing import encoded_bits, field_sizes, fixed_bits

__all__ = [
    # Core API
    "encode",
    "decode",
    "build_block",
    "Block",
    "BlockSpec",
    # Exceptions
    "SposError",
    "SchemaError",
    "MissingKey",
    "InvalidType",
    "UnexpectedKey",
    "UnsortedSteps",
    "BadNamesLength",
    "DuplicateKey",
    "EncodeError",
    "UnresolvableField",
    "InvalidValue",
    "DecodeError",
    "TruncatedBitstring",
    "MalformedBitstring",
    # Schema files
    "load_schema",
    # Hex rendering
    "bits_to_hex",
    "hex_to_bits",
    # Sizing
    "encoded_bits",
    "field_sizes",
    "fixed_bits",
    # Version
    "__version__",
]
