"""Versioned emoji catalog snapshots: sandbox / promote / rollback / diff."""

import json
import logging
import re
import shutil
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from unigen.config import EMOJIS_FILENAME

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"^v(\d{3})$")


class CatalogStore:
    """Manages catalog JSON snapshots with sandbox staging, promotion, and diff.

    Layout under base_dir (e.g. data/emojis/)::

        base_dir/
            sandbox/emojis.json     # Temporary staging
            v001/, v002/            # Immutable snapshots (+ _meta.json)
            active -> v00N          # Symlink to current version

    The output is committed and reviewed by hand, so a rebuild goes to the
    sandbox first and is diffed against the active version before promotion.
    """

    def __init__(self, base_dir: Path, filename: str = EMOJIS_FILENAME):
        self.base_dir = base_dir
        self.filename = filename

    # -- Paths ---------------------------------------------------------------

    def sandbox_path(self) -> Path:
        return self.base_dir / "sandbox"

    def active_symlink(self) -> Path:
        return self.base_dir / "active"

    # -- Sandbox lifecycle ---------------------------------------------------

    def sandbox_exists(self) -> bool:
        return self.sandbox_path().is_dir()

    def ensure_sandbox(self) -> Path:
        """Create sandbox directory. Raises if it already exists."""
        sb = self.sandbox_path()
        if sb.exists():
            raise FileExistsError(
                f"Sandbox already exists at {sb}. "
                "Use --discard to remove it first."
            )
        sb.mkdir(parents=True)
        return sb

    def write_sandbox(self, catalog: Dict) -> Path:
        """Create the sandbox and write a serialized catalog into it."""
        sb = self.ensure_sandbox()
        path = sb / self.filename
        write_catalog_json(path, catalog)
        return path

    def discard_sandbox(self) -> bool:
        """Delete the sandbox directory. Returns True if it existed."""
        sb = self.sandbox_path()
        if sb.exists():
            shutil.rmtree(sb)
            logger.info("Discarded sandbox at %s", sb)
            return True
        return False

    # -- Versions ------------------------------------------------------------

    def list_versions(self) -> List[str]:
        """Return sorted list of version names (e.g. ['v001', 'v002'])."""
        versions = []
        if self.base_dir.exists():
            for d in self.base_dir.iterdir():
                if d.is_dir() and not d.is_symlink() and _VERSION_RE.match(d.name):
                    versions.append(d.name)
        return sorted(versions)

    def _next_version(self) -> str:
        versions = self.list_versions()
        if not versions:
            return "v001"
        num = int(versions[-1][1:])
        return f"v{num + 1:03d}"

    def active_version(self) -> Optional[str]:
        """Return the name of the active version, or None."""
        link = self.active_symlink()
        if link.is_symlink():
            return link.resolve().name
        return None

    def active_dir(self) -> Optional[Path]:
        """Return the path of the active version directory, or None."""
        link = self.active_symlink()
        if link.is_symlink():
            target = link.resolve()
            if target.is_dir():
                return target
        return None

    def _update_active_symlink(self, version_dir: Path) -> None:
        link = self.active_symlink()
        if link.is_symlink() or link.exists():
            link.unlink()
        link.symlink_to(version_dir.name)
        logger.info("Active → %s", version_dir.name)

    # -- Promote -------------------------------------------------------------

    def promote(self) -> str:
        """Promote sandbox to the next version.

        Renames sandbox → v00N, writes _meta.json, updates active symlink.
        Returns the new version name.
        """
        sb = self.sandbox_path()
        if not sb.is_dir():
            raise FileNotFoundError("No sandbox to promote. Run --sandbox first.")

        version = self._next_version()
        target = self.base_dir / version

        sb.rename(target)
        logger.info("Promoted sandbox → %s", version)

        catalog = load_catalog_json(target / self.filename)
        meta = {
            "version": version,
            "promoted_at": datetime.now().isoformat(),
            "entries": len(catalog.get("emojis", [])),
            "groups": len(catalog.get("groups", [])),
        }
        with open(target / "_meta.json", "w", encoding="utf-8") as f:
            json.dump(meta, f, indent=2)

        self._update_active_symlink(target)
        return version

    # -- Rollback ------------------------------------------------------------

    def rollback(self, version: str) -> None:
        """Point active symlink to a specific version."""
        target = self.base_dir / version
        if not target.is_dir():
            raise FileNotFoundError(f"Version {version} does not exist.")
        self._update_active_symlink(target)
        logger.info("Rolled back to %s", version)

    # -- Diff ----------------------------------------------------------------

    def diff_sandbox_vs_active(self) -> Dict:
        """Compare the sandbox catalog against the active version."""
        sb = self.sandbox_path()
        act = self.active_dir()

        if not sb.is_dir():
            raise FileNotFoundError("No sandbox found.")
        if act is None:
            raise FileNotFoundError("No active version to diff against.")

        return diff_catalogs(
            load_catalog_json(act / self.filename),
            load_catalog_json(sb / self.filename),
        )


def write_catalog_json(path: Path, catalog: Dict) -> None:
    """Write a serialized catalog. Output is byte-stable for equal input."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    tmp.write_text(
        json.dumps(catalog, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    tmp.replace(path)


def load_catalog_json(path: Path) -> Dict:
    if not path.exists():
        raise FileNotFoundError(f"No catalog at {path}.")
    return json.loads(path.read_text(encoding="utf-8"))


def _resolve_names(catalog: Dict) -> Dict[str, Dict[str, Any]]:
    # Compare entries by group/subgroup name, not id, so an inserted group
    # upstream doesn't show up as a change on every later entry.
    groups = {g["id"]: g["name"] for g in catalog.get("groups", [])}
    subgroups = {s["id"]: s["name"] for s in catalog.get("subgroups", [])}
    out = {}
    for e in catalog.get("emojis", []):
        e = dict(e)
        e["group"] = groups.get(e.get("group"), e.get("group"))
        e["subgroup"] = subgroups.get(e.get("subgroup"), e.get("subgroup"))
        out[e["key"]] = e
    return out


def diff_catalogs(before: Dict, after: Dict) -> Dict:
    """Entry-level diff of two serialized catalogs, keyed by canonical key."""
    old = _resolve_names(before)
    new = _resolve_names(after)

    unchanged = 0
    changed = 0
    field_changes: Dict[str, int] = {}
    samples: List[Dict] = []

    for key in sorted(old.keys() & new.keys()):
        a, b = old[key], new[key]
        if a == b:
            unchanged += 1
            continue
        changed += 1
        for f in sorted(set(a) | set(b)):
            if a.get(f) != b.get(f):
                field_changes[f] = field_changes.get(f, 0) + 1
                if len(samples) < 5:
                    samples.append({
                        "key": key,
                        "name": b.get("name", ""),
                        "field": f,
                        "before": a.get(f),
                        "after": b.get(f),
                    })

    old_groups = [g["name"] for g in before.get("groups", [])]
    new_groups = [g["name"] for g in after.get("groups", [])]

    return {
        "unchanged": unchanged,
        "changed": changed,
        "new": sorted(new.keys() - old.keys()),
        "removed": sorted(old.keys() - new.keys()),
        "field_changes": dict(
            sorted(field_changes.items(), key=lambda x: -x[1])
        ),
        "samples": samples,
        "group_changes": {
            "added": [g for g in new_groups if g not in old_groups],
            "removed": [g for g in old_groups if g not in new_groups],
            "reordered": old_groups != new_groups
            and sorted(old_groups) == sorted(new_groups),
        },
    }
