"""Variant classifier: base code points plus skin-tone and gender flags."""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from .codepoints import GENDER_SIGNS, SKIN_TONES, ZWJ, format_key
from .parser import RawSequenceRecord

logger = logging.getLogger(__name__)


class GenderKind(IntEnum):
    NONE = 0
    # person + ZWJ + female/male sign, e.g. 🤷‍♀️
    EXPLICIT_SIGN = 1
    # man/woman + ZWJ + role glyph, e.g. 👩‍⚕️
    IMPLICIT_ROLE = 2


# Toned multi-person sequences. Each person can carry its own tone, which the
# flag set can't express, so the toned forms are dropped.
_TONED_PAIR_NAMES = ("holding hands", "handshake", "kiss:", "couple with heart")


@dataclass(frozen=True)
class ClassifiedRecord:
    record: RawSequenceRecord
    base_code_points: Tuple[int, ...]
    has_skin_tone_variant: bool = False
    gender_kind: GenderKind = GenderKind.NONE
    # Set by the role matcher: key of the neutral entry to merge into
    target_key: Optional[str] = None

    @property
    def key(self) -> str:
        return format_key(self.base_code_points)

    @property
    def name(self) -> str:
        return self.record.name


def classify(record: RawSequenceRecord) -> Optional[ClassifiedRecord]:
    """Strip modifiers from a record and note which kind of variant it is.

    Returns None for toned multi-person combinations, which are never
    cataloged.
    """
    tone = False
    gender = GenderKind.NONE
    base = []

    for i, cp in enumerate(record.code_points):
        if cp in SKIN_TONES:
            tone = True
        elif cp == ZWJ:
            continue
        elif cp in GENDER_SIGNS:
            # A bare ♀/♂ is an emoji of its own; only a trailing sign genders
            if i == 0:
                base.append(cp)
            else:
                gender = GenderKind.EXPLICIT_SIGN
        else:
            base.append(cp)

    if tone and any(s in record.name for s in _TONED_PAIR_NAMES):
        logger.debug("Dropping toned combination %r (line %d)", record.name, record.line_no)
        return None

    return ClassifiedRecord(
        record=record,
        base_code_points=tuple(base),
        has_skin_tone_variant=tone,
        gender_kind=gender,
    )
