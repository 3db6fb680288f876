"""Rebuild the display string of an emoji from its base code points.

Base code points have their ZWJs removed, so they have to be put back before
the string can be used as a CLDR lookup key. Flags never take joiners, and
no joiner goes before a VS16, skin tone modifier or keycap mark.
"""

from typing import Sequence

from .codepoints import KEYCAP, SKIN_TONES, VS16, ZWJ, is_regional_indicator, is_tag

_NO_JOINER_BEFORE = frozenset({VS16, KEYCAP}) | SKIN_TONES


def is_flag_sequence(code_points: Sequence[int]) -> bool:
    """Country flags (regional indicator pairs) and subdivision tag flags."""
    if not code_points:
        return False
    if is_regional_indicator(code_points[0]):
        return True
    return len(code_points) > 1 and is_tag(code_points[1])


def render(code_points: Sequence[int]) -> str:
    cps = [cp for cp in code_points if cp != ZWJ]
    if not cps:
        return ""

    if is_flag_sequence(cps):
        return "".join(chr(cp) for cp in cps)

    out = []
    for cp, nxt in zip(cps, cps[1:]):
        out.append(chr(cp))
        if nxt not in _NO_JOINER_BEFORE:
            out.append(chr(ZWJ))
    out.append(chr(cps[-1]))
    return "".join(out)
