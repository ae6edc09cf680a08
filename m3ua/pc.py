"""Signalling Point Codes and their conversion between display variants."""

from __future__ import annotations

import re
from enum import Enum
from typing import List

_DIGITS = re.compile(r"[+-]?[0-9]+")


class Variant(str, Enum):
    """A way of splitting a point code into dash-separated fields."""

    NONE = ""
    V383 = "3-8-3"
    V437 = "4-3-7"
    V4343 = "4-3-4-3"
    V446 = "4-4-6"
    V545 = "5-4-5"
    V662 = "6-6-2"
    V68 = "6-8"
    V745 = "7-4-5"
    V77 = "7-7"
    V888 = "8-8-8"

    def bit_length(self) -> int:
        """Return the number of bits a point code of this variant has."""
        return _BIT_LENGTHS.get(self, 0)

    def _widths(self) -> List[int]:
        if self is Variant.NONE:
            return []
        return [int(w) for w in self.value.split("-")]

    def __str__(self) -> str:
        return self.value


_BIT_LENGTHS = {
    Variant.V383: 14,
    Variant.V437: 14,
    Variant.V4343: 14,
    Variant.V545: 14,
    Variant.V662: 14,
    Variant.V68: 14,
    Variant.V77: 14,
    Variant.V745: 16,
    Variant.V888: 24,
}


def _raw_to_str(raw: int, variant: Variant) -> str:
    if variant is Variant.NONE:
        raise ValueError("invalid Variant given")
    remaining = variant.bit_length()
    raw &= (1 << remaining) - 1
    fields = []
    for width in variant._widths():
        remaining -= width
        value = 0 if remaining < 0 else (raw >> remaining) & ((1 << width) - 1)
        fields.append(str(value))
    return "-".join(fields)


def _str_to_raw(text: str, variant: Variant) -> int:
    if variant is Variant.NONE:
        raise ValueError("invalid Variant given")
    digits = text.split("-")
    widths = variant._widths()
    if len(digits) != len(widths):
        raise ValueError(f"PC: {text} and Variant: {variant} doesn't match")
    remaining = variant.bit_length()
    raw = 0
    for digit, width in zip(digits, widths):
        if not _DIGITS.fullmatch(digit):
            raise ValueError(f"invalid digit {digit!r} in PC: {text}")
        remaining -= width
        if remaining >= 0:
            raw |= ((int(digit) & 0xFFFFFFFF) << remaining) & 0xFFFFFFFF
    return raw


class PointCode:
    """A Signalling Point Code with the variant it was created with."""

    def __init__(self, raw: int, formatted: str, variant: Variant) -> None:
        self.raw = raw
        self.formatted = formatted
        self.variant = variant

    @classmethod
    def from_raw(cls, raw: int, variant: Variant) -> "PointCode":
        """Create a point code from its integer value, masked to the variant's bits."""
        variant = Variant(variant)
        masked = int(raw) & ((1 << variant.bit_length()) - 1)
        return cls(masked, _raw_to_str(masked, variant), variant)

    @classmethod
    def from_string(cls, text: str, variant: Variant) -> "PointCode":
        """Create a point code from its dash-separated form."""
        variant = Variant(variant)
        return cls(_str_to_raw(text, variant), text, variant)

    def convert_to(self, variant: Variant) -> str:
        """Format the point code in another variant and keep that as its text."""
        self.formatted = _raw_to_str(self.raw, Variant(variant))
        return self.formatted

    def __int__(self) -> int:
        return self.raw

    def __str__(self) -> str:
        if self.variant is Variant.NONE:
            return ""
        return self.formatted

    def __repr__(self) -> str:
        return f"PointCode(raw={self.raw}, formatted={self.formatted!r}, variant={self.variant!r})"