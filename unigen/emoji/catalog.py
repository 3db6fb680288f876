"""Canonical emoji catalog and its merge engine.

emoji-test.txt lists every variant of an emoji as its own line. The neutral
form always comes first, so variants are folded into it by lookup:

    270B                  # ✋ raised hand                  -> new entry
    270B 1F3FB            # ✋🏻 raised hand: light skin tone -> skin tones
    1F937 200D 2642 FE0F  # 🤷‍♂️ man shrugging               -> gender sign
    1F468 200D 2695 FE0F  # 👨‍⚕️ man health worker           -> gender role

Upstream is not consistent about trailing VS16 between a neutral form and
its variants, so lookups retry a few spellings of the key.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .classify import ClassifiedRecord, GenderKind
from .codepoints import VS16, format_key
from .errors import MalformedInput, UnresolvedVariant
from .groups import GroupIndex

logger = logging.getLogger(__name__)


@dataclass
class CanonicalEmoji:
    base_code_points: Tuple[int, ...]
    name: str
    group_id: int
    subgroup_id: int
    has_skin_tone_variant: bool = False
    gender_kind: GenderKind = GenderKind.NONE
    annotations: List[str] = field(default_factory=list)

    @property
    def key(self) -> str:
        return format_key(self.base_code_points)

    def to_dict(self) -> Dict:
        return {
            "key": self.key,
            "codepoints": list(self.base_code_points),
            "name": self.name,
            "group": self.group_id,
            "subgroup": self.subgroup_id,
            "skin_tones": self.has_skin_tone_variant,
            "genders": int(self.gender_kind),
            "cldr": list(self.annotations),
        }


def _strip_vs16(code_points: Tuple[int, ...]) -> Optional[Tuple[int, ...]]:
    if code_points and code_points[-1] == VS16:
        return code_points[:-1]
    return None


def sign_candidates(code_points: Tuple[int, ...]) -> List[str]:
    """Keys to try for an explicit gender sign variant."""
    keys = [format_key(code_points)]
    stripped = _strip_vs16(code_points)
    if stripped is not None:
        keys.append(format_key(stripped))
    return keys


def tone_candidates(code_points: Tuple[int, ...]) -> List[str]:
    """Keys to try for a skin tone variant."""
    keys = [format_key(code_points)]
    stripped = _strip_vs16(code_points)
    if stripped is not None:
        keys.append(format_key(stripped))
    else:
        keys.append(format_key(code_points + (VS16,)))
    return keys


class EmojiCatalog:
    """Ordered mapping of canonical key -> CanonicalEmoji.

    Entries keep the order their defining record arrived in; variant
    sightings only mutate flags.
    """

    def __init__(self, index: Optional[GroupIndex] = None):
        self.index = index if index is not None else GroupIndex()
        self._entries: Dict[str, CanonicalEmoji] = {}
        # Entries whose flag was switched on, plus ignored gender claims
        self.stats = {"skin_tones": 0, "gender_signs": 0, "gender_roles": 0, "conflicts": 0}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CanonicalEmoji]:
        return iter(self._entries.values())

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> Optional[CanonicalEmoji]:
        return self._entries.get(key)

    def keys(self) -> List[str]:
        return list(self._entries)

    def resolve(self, candidates: Sequence[str]) -> Optional[str]:
        """Return the first candidate key present in the catalog."""
        for key in candidates:
            if key in self._entries:
                return key
        return None

    def _resolve_or_raise(self, record: ClassifiedRecord, candidates: Sequence[str]) -> CanonicalEmoji:
        key = self.resolve(candidates)
        if key is None:
            raise UnresolvedVariant(record.name, candidates, record.record.line_no)
        return self._entries[key]

    def _set_gender(self, entry: CanonicalEmoji, kind: GenderKind) -> bool:
        """Apply a gender claim. Returns True if the entry changed."""
        if entry.gender_kind == kind:
            return False
        if entry.gender_kind != GenderKind.NONE:
            # Not seen upstream so far; keep the first claim
            logger.warning(
                "Ignoring %s on %r: already %s",
                kind.name, entry.name, entry.gender_kind.name,
            )
            self.stats["conflicts"] += 1
            return False
        entry.gender_kind = kind
        return True

    def ingest(self, record: ClassifiedRecord) -> CanonicalEmoji:
        """Merge one classified record; returns the entry it created or touched."""
        base = record.base_code_points

        if record.gender_kind == GenderKind.IMPLICIT_ROLE:
            entry = self._resolve_or_raise(record, [record.target_key])
            if self._set_gender(entry, GenderKind.IMPLICIT_ROLE):
                self.stats["gender_roles"] += 1
            return entry

        if record.gender_kind == GenderKind.EXPLICIT_SIGN:
            entry = self._resolve_or_raise(record, sign_candidates(base))
            if self._set_gender(entry, GenderKind.EXPLICIT_SIGN):
                self.stats["gender_signs"] += 1
            return entry

        if record.has_skin_tone_variant:
            entry = self._resolve_or_raise(record, tone_candidates(base))
            if not entry.has_skin_tone_variant:
                entry.has_skin_tone_variant = True
                self.stats["skin_tones"] += 1
            return entry

        key = format_key(base)
        if key in self._entries:
            raise MalformedInput(
                f"duplicate definition of {key} ({record.name!r})",
                record.record.line_no,
            )

        raw = record.record
        entry = CanonicalEmoji(
            base_code_points=base,
            name=record.name,
            group_id=self.index.intern_group(raw.group),
            subgroup_id=self.index.intern_subgroup(raw.group, raw.subgroup),
        )
        self._entries[key] = entry
        return entry

    def to_dict(self) -> Dict:
        return {
            "groups": [g.to_dict() for g in self.index.groups],
            "subgroups": [sg.to_dict() for sg in self.index.subgroups],
            "emojis": [e.to_dict() for e in self],
        }
