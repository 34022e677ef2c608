"""
Packing of module sequences into fixed-width words for renderers.
"""

from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_WORD_WIDTH = 24
SYMBOL_HEIGHT = 32


@dataclass(frozen=True)
class PackedModules:
    """Module sequence packed into words, plus the symbol size in modules."""

    words: tuple[int, ...]
    width: int
    height: int = SYMBOL_HEIGHT
    word_width: int = DEFAULT_WORD_WIDTH

    def module(self, index: int) -> int:
        """Module bit at position index (0 = leftmost)."""
        if not 0 <= index < self.width:
            raise IndexError(f"Module index {index} out of range for width {self.width}")
        word = self.words[index // self.word_width]
        return (word >> (index % self.word_width)) & 1


def pack_modules(
    modules: Sequence[int],
    word_width: int = DEFAULT_WORD_WIDTH,
    height: int = SYMBOL_HEIGHT,
) -> PackedModules:
    """
    Pack module bits into words.

    Bit (i mod word_width) of word (i div word_width) is set iff module i
    is a bar, so the leftmost module of each word is its least
    significant bit.
    """
    if word_width < 1:
        raise ValueError(f"Word width must be positive, got {word_width}")

    words: list[int] = []
    value = 0
    for i, bit in enumerate(modules):
        if i > 0 and i % word_width == 0:
            words.append(value)
            value = 0
        if bit:
            value |= 1 << (i % word_width)
    if modules:
        words.append(value)

    return PackedModules(
        words=tuple(words),
        width=len(modules),
        height=height,
        word_width=word_width,
    )


def unpack_words(words: Sequence[int], width: int, word_width: int = DEFAULT_WORD_WIDTH) -> tuple[int, ...]:
    """Recover the module bits from packed words."""
    if word_width < 1:
        raise ValueError(f"Word width must be positive, got {word_width}")
    return tuple(
        (words[i // word_width] >> (i % word_width)) & 1
        for i in range(width)
    )
