"""Core build loop: emoji-test.txt (+ CLDR) → EmojiCatalog."""

import logging
import time
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .catalog import EmojiCatalog
from .classify import classify
from .cldr import join_annotations
from .groups import GroupIndex
from .parser import SequenceReader
from .roles import RoleGenderMatcher

logger = logging.getLogger(__name__)


def build_catalog(
    emoji_test: Union[str, Iterable[str]],
    annotations: Optional[Dict[str, List[str]]] = None,
    matcher: Optional[RoleGenderMatcher] = None,
) -> Tuple[EmojiCatalog, Dict]:
    """Build the catalog in two passes: merge every record, then join CLDR.

    Args:
        emoji_test: Contents of emoji-test.txt, as one string or as lines.
        annotations: Parsed CLDR table (see cldr.parse_annotations). If None,
                     the join pass is skipped and entries keep no annotations.
        matcher: Role-gender matcher; defaults to the bundled prefix table.

    Returns:
        (catalog, summary) where summary is
        {records, skipped, dropped, entries, groups, subgroups,
         skin_tones, gender_signs, gender_roles, annotated, elapsed}

    Raises:
        MalformedInput, UnresolvedVariant: on the first bad record.
    """
    if isinstance(emoji_test, str):
        emoji_test = emoji_test.splitlines()
    if matcher is None:
        matcher = RoleGenderMatcher()

    index = GroupIndex()
    catalog = EmojiCatalog(index)
    reader = SequenceReader(index)
    dropped = 0
    start = time.time()

    for raw in reader.read(emoji_test):
        record = classify(raw)
        if record is None:
            dropped += 1
            continue
        catalog.ingest(matcher.apply(record))

    logger.info(
        "Merged %d records into %d entries (%d dropped, %d not fully-qualified)",
        reader.records, len(catalog), dropped, reader.skipped,
    )

    annotated = None
    if annotations is not None:
        annotated = join_annotations(catalog, annotations)["matched"]

    elapsed = time.time() - start
    summary = {
        "records": reader.records,
        "skipped": reader.skipped,
        "dropped": dropped,
        "entries": len(catalog),
        "groups": len(index.groups),
        "subgroups": len(index.subgroups),
        "skin_tones": catalog.stats["skin_tones"],
        "gender_signs": catalog.stats["gender_signs"],
        "gender_roles": catalog.stats["gender_roles"],
        "conflicts": catalog.stats["conflicts"],
        "annotated": annotated,
        "elapsed": round(elapsed, 2),
    }
    return catalog, summary
