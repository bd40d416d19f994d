"""Schema analysis CLI command."""

from __future__ import annotations

from pathlib import Path

from ..blocks import ArrayBlock, Block, CategoriesBlock, FloatBlock, IntegerBlock, ObjectBlock
from ..blocks import StepsBlock, StringBlock, build_block
from ..config import load_schema


def analyze_file(file_path: Path) -> None:
    """Analyze the schema stored in a JSON or YAML file.

    Args:
        file_path: Path to the schema file
    """
    block = build_block(load_schema(file_path))

    # Print header
    print("|" * 7, "spos: Small Payload Object Serializer", "|" * 7)
    print("Field sizes are in bits unless otherwise noted.")
    print()

    analyze_block(block)


def analyze_block(block: Block) -> None:
    """Print a size summary and a field-by-field breakdown of a block tree.

    Args:
        block: Root block to analyze
    """
    print(f"{'=' * 19} {block.key} {'=' * 19}")

    if block.bits is None:
        print("Size of message: variable (depends on array lengths)")
    else:
        total_bytes = (block.bits + 7) // 8
        print(f"Size of message: {block.bits} bits / {total_bytes} bytes")
    print()

    print(f"{'-' * 28} Body {'-' * 28}")
    _print_block(block, depth=0)
    print()


def _print_block(block: Block, depth: int) -> None:
    indent = "    " * depth
    bits = "var" if block.bits is None else str(block.bits)
    info = _describe(block)

    field_desc = f"{indent}{block.key} ({block.spec.type})"
    dots_needed = 54 - len(field_desc) - len(bits) - len(" bits")
    dots = "." * max(1, dots_needed)
    line = f"{field_desc}{dots}{bits} bits"
    print(f"{line} {info}" if info else line)

    if isinstance(block, ObjectBlock):
        for child in block.blocklist:
            _print_block(child, depth + 1)
    elif isinstance(block, ArrayBlock):
        _print_block(block.items_block, depth + 1)


def _describe(block: Block) -> str:
    if isinstance(block, ArrayBlock):
        return f"[{block.prefix_bits}-bit length, max {block.max_length} items]"
    if isinstance(block, IntegerBlock):
        return f"[{block.offset}-{block.offset + block.overflow}]"
    if isinstance(block, FloatBlock):
        return f"[{block.lower}-{block.upper}, {block.spec.approximation}]"
    if isinstance(block, StringBlock):
        return f"({block.length} chars)"
    if isinstance(block, StepsBlock):
        return f"(steps: {len(block.names)} buckets)"
    if isinstance(block, CategoriesBlock):
        return f"(categories: {len(block.categories)} values)"
    return ""
