import json
import re

import pytest
from click.testing import CliRunner

from unigen import cli
from unigen.cli import main
from unigen.sources import SourceFetchError


@pytest.fixture
def source_files(tmp_path, emoji_test_text, cldr_xml):
    emoji_test = tmp_path / "emoji-test.txt"
    emoji_test.write_text(emoji_test_text, encoding="utf-8")
    cldr = tmp_path / "en.xml"
    cldr.write_text(cldr_xml, encoding="utf-8")
    return str(emoji_test), str(cldr)


@pytest.fixture
def sources(source_files):
    emoji_test, cldr = source_files
    return ["--emoji-test", emoji_test, "--cldr", cldr]


def test_build_emojis(tmp_path, source_files):
    out = tmp_path / "out" / "emojis.json"
    result = CliRunner().invoke(main, ["build-emojis", *source_files, "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "15 entries" in result.output
    assert "CLDR annotated: 7 / 15" in result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["emojis"][0]["name"] == "grinning face"
    assert data["emojis"][0]["cldr"] == ["face", "grin", "grinning face"]


def test_build_emojis_without_cldr(tmp_path, source_files):
    out = tmp_path / "emojis.json"
    result = CliRunner().invoke(main, ["build-emojis", source_files[0], "--no-cldr", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "CLDR annotated" not in result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["emojis"][0]["cldr"] == []


def test_build_emojis_requires_output(source_files):
    result = CliRunner().invoke(main, ["build-emojis", *source_files])
    assert result.exit_code == 2
    assert "--output" in result.output


def test_build_failure_exits_1(tmp_path, emoji_test_text):
    bad = tmp_path / "emoji-test.txt"
    bad.write_text(emoji_test_text.replace("1F600 ", "1F6Z0 ", 1), encoding="utf-8")
    out = tmp_path / "x.json"
    result = CliRunner().invoke(main, ["build-emojis", str(bad), "--no-cldr", "-o", str(out)])
    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "1F6Z0" in result.output
    assert not out.exists()


def test_download_failure_exits_1(tmp_path, monkeypatch):
    def fail(location):
        raise SourceFetchError(location, "404 Not Found")

    monkeypatch.setattr(cli, "load_source", fail)
    result = CliRunner().invoke(
        main, ["build-emojis", "https://example.org/emoji-test.txt", "--no-cldr", "-o", str(tmp_path / "x.json")]
    )
    assert result.exit_code == 1
    assert "Error: cannot download 'https://example.org/emoji-test.txt': 404 Not Found" in result.output


def test_sandbox_workflow(tmp_path, sources):
    runner = CliRunner()
    store = ["--store-dir", str(tmp_path / "emojis")]

    result = runner.invoke(main, ["emojis", "--sandbox"] + store + sources)
    assert result.exit_code == 0, result.output

    result = runner.invoke(main, ["emojis", "--diff"] + store)
    assert result.exit_code == 1

    result = runner.invoke(main, ["emojis", "--promote"] + store)
    assert "Promoted to v001" in result.output

    runner.invoke(main, ["emojis", "--sandbox"] + store + sources)
    result = runner.invoke(main, ["emojis", "--diff"] + store)
    assert result.exit_code == 0
    assert re.search(r"Unchanged:\s+15\n", result.output)

    result = runner.invoke(main, ["emojis", "--status"] + store)
    assert "Active version:  v001" in result.output
    assert "Sandbox:         exists" in result.output
