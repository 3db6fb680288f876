import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# Paths
DATA_DIR = _PROJECT_ROOT / "data"
CACHE_DIR = Path(os.getenv("UNIGEN_CACHE_DIR", str(_PROJECT_ROOT / ".cache")))

# Emoji catalog snapshots (sandbox / v001 / active)
EMOJIS_DIR = DATA_DIR / "emojis"
EMOJIS_FILENAME = "emojis.json"

# Upstream sources, pinned to Emoji 15.0 / CLDR 42. Emoji 15.1 adds
# directional gender-sign sequences (1F6B6 200D 2640 FE0F 200D 27A1 FE0F)
# whose keys match no neutral entry; the build stops on them.
EMOJI_TEST_URL = os.getenv(
    "UNIGEN_EMOJI_TEST_URL",
    "https://unicode.org/Public/emoji/15.0/emoji-test.txt",
).strip()
CLDR_URL = os.getenv(
    "UNIGEN_CLDR_URL",
    "https://raw.githubusercontent.com/unicode-org/cldr/release-42/common/annotations/en.xml",
).strip()

# Seconds
HTTP_TIMEOUT = float(os.getenv("UNIGEN_HTTP_TIMEOUT", "60"))
