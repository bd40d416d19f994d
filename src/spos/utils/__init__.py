"""Utility functions for spos.

This module provides value-type predicates and hex rendering. Size calculation
lives in :mod:`spos.utils.sizing`, which depends on the blocks and is imported
from the package root instead.
"""

from __future__ import annotations

from .hexbits import bits_to_hex, hex_to_bits
from .predicates import is_sorted, matches_type, round_half_even

__all__ = [
    # Hex rendering
    "bits_to_hex",
    "hex_to_bits",
    # Predicates
    "is_sorted",
    "matches_type",
    "round_half_even",
]
