"""Enumeration blocks: numeric steps and string categories.

Both map their input onto an index and store that index in an internal
integer block sized to the enumeration.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from ..exceptions import BadNamesLength, UnsortedSteps
from ..utils.predicates import is_sorted
from .base import Block
from .scalars import IntegerBlock
from .spec import CategoriesSpec, IntegerSpec, StepsSpec

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "unknown"
ERROR_CATEGORY = "error"


def _index_block(key: str, bits: int) -> IntegerBlock:
    return IntegerBlock(IntegerSpec(key=key, type="integer", bits=bits, offset=0))


def _format_step(step: float) -> str:
    # Integral floats print without ".0"
    if isinstance(step, float) and step.is_integer():
        return str(int(step))
    return str(step)


class StepsBlock(Block):
    """Bucket a number by ascending thresholds.

    ``steps=[10, 20]`` gives three buckets, ``x<10``, ``10<=x<20`` and
    ``x>=20``. Decoding yields the bucket name, not a number.

    Raises:
        UnsortedSteps: If the thresholds are not strictly ascending
        BadNamesLength: If ``steps_names`` is given with the wrong length
    """

    spec_model = StepsSpec
    input_types = ("number",)

    def __init__(self, spec: StepsSpec) -> None:
        super().__init__(spec)
        steps = list(spec.steps)
        if not is_sorted(steps):
            raise UnsortedSteps(f"Block '{self.key}': steps must be strictly ascending, got {steps}")

        names = list(spec.steps_names) or self._default_names(steps)
        if len(names) != len(steps) + 1:
            raise BadNamesLength(
                f"Block '{self.key}': steps_names has to have length 1 + len(steps) "
                f"({len(steps) + 1}), got {len(names)}"
            )

        self.names = tuple(names)
        # +inf closes the last bucket
        self.thresholds = tuple(steps) + (math.inf,)
        self.bits = math.ceil(math.log2(len(steps) + 1))
        self.index_block = _index_block("steps", self.bits)

    @staticmethod
    def _default_names(steps: list[float]) -> list[str]:
        labels = [_format_step(step) for step in steps]
        names = [f"x<{labels[0]}"]
        names.extend(f"{low}<=x<{high}" for low, high in zip(labels, labels[1:]))
        names.append(f"x>={labels[-1]}")
        return names

    def _encode(self, value: float) -> str:
        index = next(i for i, threshold in enumerate(self.thresholds) if value < threshold)
        return self.index_block.encode(index)

    def _decode(self, message: str) -> str:
        return self.names[self.index_block.decode(message)]


class CategoriesBlock(Block):
    """Map a label to its position in ``categories``.

    An ``"unknown"`` category is appended to the list; values that are not in
    the list, and absent values (None), are encoded as that sentinel. Inputs
    that are neither strings nor None are rejected. The index width is
    ``ceil(log2(len(categories) + 1))``, so when the sentinel-extended list
    length is not a power of two some indices have no label and decode to
    ``"error"``.
    """

    spec_model = CategoriesSpec
    input_types = ("string", None)

    def __init__(self, spec: CategoriesSpec) -> None:
        super().__init__(spec)
        self.categories = tuple(spec.categories) + (UNKNOWN_CATEGORY,)
        self.bits = math.ceil(math.log2(len(self.categories)))
        self.index_block = _index_block("categories", self.bits)

    def _encode(self, value: Any) -> str:
        try:
            index = self.categories.index(value)
        except ValueError:
            logger.debug("Block '%s': %r is not a category, encoding as unknown", self.key, value)
            index = len(self.categories) - 1
        return self.index_block.encode(index)

    def _decode(self, message: str) -> str:
        index = self.index_block.decode(message)
        if index < len(self.categories):
            return self.categories[index]
        return ERROR_CATEGORY
