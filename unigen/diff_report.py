"""Format catalog diff results for CLI display."""

from typing import Dict


def format_diff_report(diff: Dict) -> str:
    """Format a diff_catalogs() result as a human-readable report."""
    lines = []
    new, removed = diff["new"], diff["removed"]
    total = diff["unchanged"] + diff["changed"] + len(new) + len(removed)
    lines.append(f"Compared {total:,} entries\n")

    lines.append(f"  Unchanged:  {diff['unchanged']:>7,}")
    lines.append(f"  Changed:    {diff['changed']:>7,}")
    lines.append(f"  New:        {len(new):>7,}")
    lines.append(f"  Removed:    {len(removed):>7,}")

    groups = diff.get("group_changes", {})
    if groups.get("added") or groups.get("removed") or groups.get("reordered"):
        lines.append("\nGroups:")
        for g in groups.get("added", []):
            lines.append(f"  + {g}")
        for g in groups.get("removed", []):
            lines.append(f"  - {g}")
        if groups.get("reordered"):
            lines.append("  (order changed)")

    if diff["field_changes"]:
        lines.append("\nField changes:")
        for field, count in diff["field_changes"].items():
            lines.append(f"  {field:<20s}  {count:>6,}")

    for label, keys in (("New", new), ("Removed", removed)):
        if keys:
            lines.append(f"\n{label} entries:")
            for key in keys[:10]:
                lines.append(f"  {key}")
            if len(keys) > 10:
                lines.append(f"  ... and {len(keys) - 10} more")

    if diff["samples"]:
        lines.append("\nSample diffs:")
        for s in diff["samples"]:
            lines.append(f"\n  {s['key']} ({s['name']})  →  {s['field']}")
            lines.append(f"    before: {_truncate(s['before'])}")
            lines.append(f"    after:  {_truncate(s['after'])}")

    return "\n".join(lines)


def _truncate(value, max_len: int = 80) -> str:
    """Truncate a value for display."""
    s = repr(value)
    if len(s) > max_len:
        return s[: max_len - 3] + "..."
    return s
