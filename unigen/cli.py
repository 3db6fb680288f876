"""unigen CLI."""

import logging
from pathlib import Path

import click

from unigen.config import CACHE_DIR, CLDR_URL, EMOJI_TEST_URL, EMOJIS_DIR
from unigen.diff_report import format_diff_report
from unigen.emoji.builder import build_catalog
from unigen.emoji.cldr import parse_annotations
from unigen.emoji.errors import CatalogError
from unigen.sources import SourceFetchError, clear_cache, load_source
from unigen.versioning import CatalogStore, write_catalog_json

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
def main(verbose: bool):
    """Compile Unicode reference data into lookup tables."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def _build(emoji_test: str, cldr: str, skip_cldr: bool):
    """Load sources and build. Exits with status 1 on any build failure."""
    try:
        text = load_source(emoji_test)
        annotations = None if skip_cldr else parse_annotations(load_source(cldr))
        return build_catalog(text, annotations)
    except (SourceFetchError, OSError, CatalogError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


def _echo_summary(summary: dict) -> None:
    click.echo(
        f"Done: {summary['entries']:,} entries in {summary['groups']} groups / "
        f"{summary['subgroups']} subgroups ({summary['elapsed']}s)"
    )
    click.echo(
        f"  Records: {summary['records']:,}  "
        f"Not fully-qualified: {summary['skipped']:,}  "
        f"Dropped combinations: {summary['dropped']:,}"
    )
    click.echo(
        f"  Skin tones: {summary['skin_tones']:,}  "
        f"Gender signs: {summary['gender_signs']:,}  "
        f"Gender roles: {summary['gender_roles']:,}"
    )
    if summary["conflicts"]:
        click.echo(f"  Ignored gender conflicts: {summary['conflicts']:,}")
    if summary["annotated"] is not None:
        click.echo(f"  CLDR annotated: {summary['annotated']:,} / {summary['entries']:,}")


_source_options = [
    click.option("--emoji-test", default=EMOJI_TEST_URL, show_default=True,
                 help="Path or URL of emoji-test.txt."),
    click.option("--cldr", default=CLDR_URL, show_default=True,
                 help="Path or URL of CLDR annotations en.xml."),
    click.option("--no-cldr", "skip_cldr", is_flag=True, help="Skip the CLDR join."),
]


def _with_sources(f):
    for opt in reversed(_source_options):
        f = opt(f)
    return f


@main.command(name="emojis")
@click.option("--sandbox", "action", flag_value="sandbox", help="Build catalog → sandbox.")
@click.option("--diff", "action", flag_value="diff", help="Compare sandbox vs active.")
@click.option("--promote", "action", flag_value="promote", help="Promote sandbox → next version.")
@click.option("--discard", "action", flag_value="discard", help="Delete sandbox.")
@click.option("--rollback-to", "rollback_version", default=None, help="Point active to a specific version.")
@click.option("--status", "action", flag_value="status", help="Show current version info.")
@click.option("--store-dir", type=click.Path(path_type=Path), default=EMOJIS_DIR,
              show_default=True, help="Snapshot directory.")
@_with_sources
def emojis_cmd(action, rollback_version, store_dir, emoji_test, cldr, skip_cldr):
    """Build and version the emoji catalog."""
    store = CatalogStore(store_dir)

    if rollback_version:
        action = "rollback"

    if not action:
        click.echo("Specify one of: --sandbox, --diff, --promote, --discard, --rollback-to, --status")
        return

    if action == "status":
        ver = store.active_version()
        versions = store.list_versions()
        click.echo(f"Active version:  {ver or '(none)'}")
        click.echo(f"All versions:    {', '.join(versions) or '(none)'}")
        click.echo(f"Sandbox:         {'exists' if store.sandbox_exists() else '(none)'}")

    elif action == "sandbox":
        if store.sandbox_exists():
            click.echo("Sandbox already exists. Use --discard first.", err=True)
            raise SystemExit(1)
        catalog, summary = _build(emoji_test, cldr, skip_cldr)
        path = store.write_sandbox(catalog.to_dict())
        click.echo(f"Wrote {path}")
        _echo_summary(summary)

    elif action == "diff":
        try:
            diff_result = store.diff_sandbox_vs_active()
        except FileNotFoundError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)
        click.echo(format_diff_report(diff_result))

    elif action == "promote":
        try:
            version = store.promote()
        except FileNotFoundError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)
        click.echo(f"Promoted to {version}")

    elif action == "discard":
        if store.discard_sandbox():
            click.echo("Sandbox discarded.")
        else:
            click.echo("No sandbox to discard.")

    elif action == "rollback":
        try:
            store.rollback(rollback_version)
        except FileNotFoundError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)
        click.echo(f"Active → {rollback_version}")


@main.command(name="build-emojis")
@click.argument("emoji_test", metavar="INPUT")
@click.argument("cldr", required=False, default=CLDR_URL, metavar="[CLDR]")
@click.option("-o", "--output", type=click.Path(path_type=Path), required=True,
              help="JSON file to write.")
@click.option("--no-cldr", "skip_cldr", is_flag=True, help="Skip the CLDR join.")
def build_emojis(emoji_test, cldr, output, skip_cldr):
    """One-shot build of the emoji catalog to a JSON file.

    INPUT and CLDR are paths or URLs of emoji-test.txt and the CLDR
    annotations en.xml. CLDR defaults to the pinned release.
    """
    catalog, summary = _build(emoji_test, cldr, skip_cldr)
    write_catalog_json(output, catalog.to_dict())
    click.echo(f"Wrote {output}")
    _echo_summary(summary)


@main.command()
@click.option("--clear", is_flag=True, help="Delete downloaded sources.")
def cache(clear: bool):
    """Show or clear downloaded upstream sources."""
    if clear:
        n = clear_cache()
        click.echo(f"Removed {n} cached file(s) from {CACHE_DIR}")
        return
    files = sorted(CACHE_DIR.glob("*")) if CACHE_DIR.is_dir() else []
    if not files:
        click.echo(f"Cache is empty ({CACHE_DIR})")
        return
    for p in files:
        click.echo(f"  {p.name:<30s} {p.stat().st_size:>10,} bytes")


if __name__ == "__main__":
    main()
