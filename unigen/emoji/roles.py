"""Role-gender matcher.

Roles are defined three times upstream:

    1F9D1 200D 2695 FE0F  # 🧑‍⚕️ E12.1 health worker
    1F468 200D 2695 FE0F  # 👨‍⚕️ E4.0 man health worker
    1F469 200D 2695 FE0F  # 👩‍⚕️ E4.0 woman health worker

Nothing in the data links the man/woman copies to the person copy, so a
curated prefix table (data/gendered_roles.json) decides which sequences fold
into the person entry.
"""

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .classify import ClassifiedRecord, GenderKind
from .codepoints import PERSON, format_key, parse_key

logger = logging.getLogger(__name__)

GENDERED_ROLES_PATH = Path(__file__).resolve().parent / "data" / "gendered_roles.json"


def load_prefixes(path: Path = GENDERED_ROLES_PATH) -> List[Tuple[int, ...]]:
    """Load the ordered prefix table."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return [parse_key(p) for p in data["prefixes"]]


class RoleGenderMatcher:

    def __init__(self, prefixes: Optional[Iterable[Tuple[int, ...]]] = None):
        if prefixes is None:
            prefixes = load_prefixes()
        self.prefixes: List[Tuple[int, ...]] = [tuple(p) for p in prefixes]

    def matches(self, base_code_points: Tuple[int, ...]) -> bool:
        return any(base_code_points[:len(p)] == p for p in self.prefixes)

    def target_key(self, base_code_points: Tuple[int, ...]) -> str:
        """Key of the shared person entry: [man, ⚕, VS16] -> [person, ⚕, VS16]."""
        return format_key((PERSON,) + tuple(base_code_points[1:]))

    def apply(self, record: ClassifiedRecord) -> ClassifiedRecord:
        """Mark the record as an implicit role variant if a prefix matches.

        Records that already carry an explicit gender sign are left alone.
        """
        if record.gender_kind != GenderKind.NONE:
            return record
        if not self.matches(record.base_code_points):
            return record
        return replace(
            record,
            gender_kind=GenderKind.IMPLICIT_ROLE,
            target_key=self.target_key(record.base_code_points),
        )
