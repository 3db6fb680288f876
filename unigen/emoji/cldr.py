"""CLDR annotations: parse en.xml and attach short names to catalog entries.

    <annotation cp="👍">+1 | hand | thumb | thumbs up | up</annotation>
    <annotation cp="👍" type="tts">thumbs up</annotation>

The tts (text-to-speech) entries repeat the emoji name and are skipped.
"""

import logging
from typing import Dict, List

from bs4 import BeautifulSoup

from .catalog import EmojiCatalog
from .codepoints import VS15, VS16
from .render import render

logger = logging.getLogger(__name__)

_STRIP = str.maketrans("", "", chr(VS16) + chr(VS15))


def lookup_key(text: str) -> str:
    """CLDR keys are written without variation selectors."""
    return text.translate(_STRIP)


def parse_annotations(xml_text: str) -> Dict[str, List[str]]:
    """Map each annotated string to its ordered short names."""
    soup = BeautifulSoup(xml_text, "xml")
    out: Dict[str, List[str]] = {}
    for node in soup.find_all("annotation"):
        if node.get("type") == "tts":
            continue
        cp = node.get("cp")
        if not cp:
            continue
        names = [n.strip() for n in node.get_text().split("|")]
        out[cp] = [n for n in names if n]
    logger.info("Parsed %d CLDR annotations", len(out))
    return out


def join_annotations(catalog: EmojiCatalog, annotations: Dict[str, List[str]]) -> Dict:
    """Set annotations on every entry. Entries without a match get []."""
    matched = 0
    missing: List[str] = []
    for entry in catalog:
        names = annotations.get(lookup_key(render(entry.base_code_points)))
        if names:
            entry.annotations = list(names)
            matched += 1
        else:
            entry.annotations = []
            missing.append(entry.key)
            logger.debug("No CLDR annotation for %s (%s)", entry.key, entry.name)

    logger.info("CLDR: %d / %d entries annotated", matched, len(catalog))
    return {"matched": matched, "missing": len(missing), "missing_keys": missing}
