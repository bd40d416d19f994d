"""Top-level codec for spos.

This module provides one-shot encoding and decoding of values against a block
schema.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
]
