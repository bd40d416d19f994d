"""Fixed-length string block over a 64-symbol alphabet."""

from __future__ import annotations

from .base import Block
from .scalars import IntegerBlock
from .spec import IntegerSpec, StringSpec

B64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
CHAR_BITS = 6
SPACE_INDEX = 62
UNKNOWN_INDEX = 63


class StringBlock(Block):
    """Text of exactly ``length`` characters, 6 bits per character.

    Input is right-justified with spaces to ``length`` and then cut to
    ``length``. Each character is looked up in the base64 alphabet, with
    ``custom_alphabet`` replacing the symbol at any index it names. Spaces
    that are not in the alphabet take index 62 and every other unknown
    character takes index 63, so with the default alphabet spaces come back
    as ``+`` and unknown characters as ``/``.

    Example:
        >>> block = StringBlock(StringSpec(key="msg", type="string", length=4))
        >>> block.decode(block.encode("hi"))
        '++hi'
    """

    spec_model = StringSpec
    input_types = ("string",)

    def __init__(self, spec: StringSpec) -> None:
        super().__init__(spec)
        self.length = spec.length
        self.bits = CHAR_BITS * spec.length

        symbols = [spec.custom_alphabet.get(i, char) for i, char in enumerate(B64_ALPHABET)]
        # A symbol listed twice resolves to its last index
        self.alphabet = {char: i for i, char in enumerate(symbols)}
        self.reverse_alphabet = dict(enumerate(symbols))
        self.letter_block = IntegerBlock(
            IntegerSpec(key="letter", type="integer", bits=CHAR_BITS)
        )

    def _index(self, char: str) -> int:
        if char in self.alphabet:
            return self.alphabet[char]
        return SPACE_INDEX if char == " " else UNKNOWN_INDEX

    def _encode(self, value: str) -> str:
        value = value.rjust(self.length)[: self.length]
        return "".join(self.letter_block.encode(self._index(char)) for char in value)

    def _decode(self, message: str) -> str:
        return "".join(
            self.reverse_alphabet[self.letter_block.decode(message[i : i + CHAR_BITS])]
            for i in range(0, len(message), CHAR_BITS)
        )
