"""UTF-16 code-unit view over Python strings.

Python strings index by code point. Languages that store text as 16-bit code
units report different lengths and return surrogate halves when indexing text
outside the Basic Multilingual Plane. ``Utf16Text`` re-encodes a string into
those units so the difference can be observed directly.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF
SUPPLEMENTARY_START = 0x10000
MAX_CODE_POINT = 0x10FFFF


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit <= HIGH_SURROGATE_END


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_START <= unit <= LOW_SURROGATE_END


def is_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit <= LOW_SURROGATE_END


def to_surrogate_pair(code_point: int) -> Tuple[int, int]:
    """Split a supplementary code point into (high, low) surrogate units."""
    if not SUPPLEMENTARY_START <= code_point <= MAX_CODE_POINT:
        raise ValueError(f"Code point U+{code_point:04X} does not need a surrogate pair")
    offset = code_point - SUPPLEMENTARY_START
    return HIGH_SURROGATE_START | (offset >> 10), LOW_SURROGATE_START | (offset & 0x3FF)


def from_surrogate_pair(high: int, low: int) -> int:
    """Combine a high and low surrogate into a 21-bit code point."""
    if not is_high_surrogate(high):
        raise ValueError(f"U+{high:04X} is not a high surrogate")
    if not is_low_surrogate(low):
        raise ValueError(f"U+{low:04X} is not a low surrogate")
    return SUPPLEMENTARY_START + ((high - HIGH_SURROGATE_START) << 10) + (low - LOW_SURROGATE_START)


@dataclass(frozen=True)
class Utf16Text:
    """Immutable sequence of UTF-16 code units."""

    units: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        for unit in self.units:
            if not 0 <= unit <= 0xFFFF:
                raise ValueError(f"Code unit {unit:#x} does not fit in 16 bits")

    @classmethod
    def from_str(cls, text: str) -> "Utf16Text":
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        units = []
        for char in text:
            cp = ord(char)
            # lone surrogates in a Python str stay single units
            if cp < SUPPLEMENTARY_START:
                units.append(cp)
            else:
                units.extend(to_surrogate_pair(cp))
        return cls(tuple(units))

    def __len__(self) -> int:
        return len(self.units)

    def unit_at(self, index: int) -> int:
        """Return the raw 16-bit value at ``index``."""
        if not 0 <= index < len(self.units):
            raise IndexError(f"Code unit index {index} out of range for length {len(self.units)}")
        return self.units[index]

    def char_at(self, index: int) -> str:
        return chr(self.unit_at(index))

    def code_point_at(self, index: int) -> int:
        """Return the code point starting at ``index``.

        A high surrogate followed by a low surrogate decodes to the combined
        code point. Any other unit, including an unpaired surrogate, is
        returned as is.
        """
        unit = self.unit_at(index)
        if is_high_surrogate(unit) and index + 1 < len(self.units):
            following = self.units[index + 1]
            if is_low_surrogate(following):
                return from_surrogate_pair(unit, following)
        return unit

    def code_points(self) -> Iterator[int]:
        index = 0
        while index < len(self.units):
            cp = self.code_point_at(index)
            yield cp
            index += 2 if cp >= SUPPLEMENTARY_START else 1

    def code_point_count(self) -> int:
        return sum(1 for _ in self.code_points())

    def to_str(self) -> str:
        return "".join(chr(cp) for cp in self.code_points())
