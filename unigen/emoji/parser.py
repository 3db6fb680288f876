"""Line parser for the Unicode emoji-test.txt listing.

The file interleaves markers and data lines:

    # group: Smileys & Emotion
    # subgroup: face-smiling
    1F600                 ; fully-qualified     # 😀 E1.0 grinning face
    263A                  ; unqualified         # ☺ E0.6 smiling face

Markers are comments, but they carry the classification of every data line
that follows, so the reader threads them forward as context.
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Tuple, Union

from .codepoints import MAX_CODE_POINT
from .errors import MalformedInput
from .groups import GroupIndex

logger = logging.getLogger(__name__)

GROUP_PREFIX = "# group: "
SUBGROUP_PREFIX = "# subgroup: "
FULLY_QUALIFIED = "fully-qualified"

_HEX_RE = re.compile(r"^[0-9A-Fa-f]{1,6}$")


@dataclass(frozen=True)
class Marker:
    """A `# group:` or `# subgroup:` line."""
    kind: str
    name: str


@dataclass(frozen=True)
class RawSequenceRecord:
    """One data line: a code point sequence and where it was listed."""
    code_points: Tuple[int, ...]
    name: str
    qualification: str
    group: str = ""
    subgroup: str = ""
    line_no: int = 0

    @property
    def fully_qualified(self) -> bool:
        return self.qualification == FULLY_QUALIFIED


def parse_code_points(field: str, line_no: Optional[int] = None) -> Tuple[int, ...]:
    """Parse a space separated list of hex scalars."""
    tokens = field.split()
    if not tokens:
        raise MalformedInput("empty code point field", line_no)
    out = []
    for tok in tokens:
        if not _HEX_RE.match(tok):
            raise MalformedInput(f"bad code point {tok!r}", line_no)
        cp = int(tok, 16)
        if cp > MAX_CODE_POINT:
            raise MalformedInput(f"code point {tok} out of range", line_no)
        out.append(cp)
    return tuple(out)


def _name_from_comment(comment: str) -> Optional[str]:
    # "😀 E1.0 grinning face" -> "grinning face"
    parts = comment.split(None, 2)
    if len(parts) < 3:
        return None
    return parts[2].strip()


def parse_line(line: str, line_no: Optional[int] = None) -> Union[Marker, RawSequenceRecord, None]:
    """Parse one line of emoji-test.txt.

    Returns a Marker, a RawSequenceRecord without group context, or None
    for blank lines and ordinary comments.
    """
    line = line.rstrip("\r\n")

    if line.startswith(GROUP_PREFIX):
        return Marker("group", line[len(GROUP_PREFIX):].strip())
    if line.startswith(SUBGROUP_PREFIX):
        return Marker("subgroup", line[len(SUBGROUP_PREFIX):].strip())

    comment = ""
    data = line
    p = line.find("#")
    if p > -1:
        comment = line[p + 1:].strip()
        data = line[:p]
    data = data.strip()
    if not data:
        return None

    fields = data.split(";")
    if len(fields) < 2:
        raise MalformedInput("missing status field", line_no, line)

    code_points = parse_code_points(fields[0], line_no)
    name = _name_from_comment(comment)
    if not name:
        raise MalformedInput("missing name in comment", line_no, line)

    return RawSequenceRecord(
        code_points=code_points,
        name=name,
        qualification=fields[1].strip(),
        line_no=line_no or 0,
    )


class SequenceReader:
    """Walks emoji-test.txt lines, tracking the current group/subgroup.

    Markers are interned into the shared GroupIndex as they are seen, so
    group ordinals follow file order even for groups with no catalog entry.
    Only fully-qualified records are yielded.
    """

    def __init__(self, index: GroupIndex):
        self.index = index
        self.group: Optional[str] = None
        self.subgroup: Optional[str] = None
        self.records = 0
        self.skipped = 0

    def feed(self, line: str, line_no: Optional[int] = None) -> Optional[RawSequenceRecord]:
        parsed = parse_line(line, line_no)
        if parsed is None:
            return None

        if isinstance(parsed, Marker):
            if parsed.kind == "group":
                self.group = parsed.name
                self.subgroup = None
                self.index.intern_group(parsed.name)
            else:
                if self.group is None:
                    raise MalformedInput("subgroup marker before any group", line_no, line)
                self.subgroup = parsed.name
                self.index.intern_subgroup(self.group, parsed.name)
            return None

        if not parsed.fully_qualified:
            self.skipped += 1
            return None
        if self.group is None or self.subgroup is None:
            raise MalformedInput("data line outside a group/subgroup", line_no, line)

        self.records += 1
        return replace(parsed, group=self.group, subgroup=self.subgroup)

    def read(self, lines: Iterable[str]) -> Iterator[RawSequenceRecord]:
        for line_no, line in enumerate(lines, start=1):
            record = self.feed(line, line_no)
            if record is not None:
                yield record
