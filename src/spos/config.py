"""Schema files and command-line options.

Schemas are plain data, so they are usually kept in JSON or YAML files next to
the code that produces or consumes the payloads.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .exceptions import SchemaError

OUTPUT_FORMATS = ("bits", "hex")


def load_schema(path: str | Path) -> dict[str, Any]:
    """Load a schema from a ``.json``, ``.yaml`` or ``.yml`` file.

    The schema is only parsed here; it is validated when a block is built
    from it.

    Args:
        path: Schema file

    Returns:
        Top-level schema node

    Raises:
        FileNotFoundError: If the file does not exist
        SchemaError: If the file cannot be parsed or its top level is not a mapping
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            schema = yaml.safe_load(text)
        else:
            schema = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SchemaError(f"Could not parse schema file {path}: {e}") from e

    if not isinstance(schema, dict):
        raise SchemaError(
            f"Schema file {path} must hold a single block (a mapping), "
            f"got {type(schema).__name__}"
        )
    return schema


@dataclass
class CodecOptions:
    """Options for the ``spos`` command-line tool.

    Attributes:
        output: Rendering of encoded messages, ``"bits"`` (default) or ``"hex"``
        hex_input: Read messages to decode as hex instead of bits
        message_bits: Bit count of a hex message, to strip the padding
            added when it was rendered (default None keeps every nibble)
        verbose: Enable debug logging
    """

    output: str = "bits"
    hex_input: bool = False
    message_bits: int | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate options."""
        if self.output not in OUTPUT_FORMATS:
            raise ValueError(f"output must be one of {', '.join(OUTPUT_FORMATS)}, got {self.output}")

        if self.message_bits is not None and self.message_bits < 0:
            raise ValueError(f"message_bits must be >= 0, got {self.message_bits}")
