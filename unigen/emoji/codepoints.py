"""Code point constants and canonical key helpers."""

from typing import Iterable, Tuple

ZWJ = 0x200D
VS16 = 0xFE0F
VS15 = 0xFE0E
KEYCAP = 0x20E3

# Fitzpatrick modifiers, light to dark
SKIN_TONES = frozenset({0x1F3FB, 0x1F3FC, 0x1F3FD, 0x1F3FE, 0x1F3FF})

FEMALE_SIGN = 0x2640
MALE_SIGN = 0x2642
GENDER_SIGNS = frozenset({FEMALE_SIGN, MALE_SIGN})

# Gender-neutral "adult"; roles are cataloged under this
PERSON = 0x1F9D1

REGIONAL_INDICATOR_FIRST = 0x1F1E6
REGIONAL_INDICATOR_LAST = 0x1F1FF

# Subdivision flags: black flag + tag characters + cancel tag
TAG_FIRST = 0xE0020
TAG_LAST = 0xE007F

MAX_CODE_POINT = 0x10FFFF


def is_regional_indicator(cp: int) -> bool:
    return REGIONAL_INDICATOR_FIRST <= cp <= REGIONAL_INDICATOR_LAST


def is_tag(cp: int) -> bool:
    return TAG_FIRST <= cp <= TAG_LAST


def format_key(code_points: Iterable[int]) -> str:
    """Canonical key: upper-case hex, at least four digits, space separated.

    (0x1F9D1, 0x2695, 0xFE0F) -> "1F9D1 2695 FE0F"
    """
    return " ".join(f"{cp:04X}" for cp in code_points)


def parse_key(key: str) -> Tuple[int, ...]:
    """Inverse of format_key(). Raises ValueError on a bad hex token."""
    return tuple(int(tok, 16) for tok in key.split())
