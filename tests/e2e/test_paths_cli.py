# ABOUTME: End-to-end tests for the `folio paths` command.
# ABOUTME: Checks static target enumeration for each target kind.

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from folio.cli import cli


class TestPathsCliE2E:
    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            ("blog", {"slug": "hello-world", "locale": "ja"}),
            ("tags", {"tag": "React%20Native", "locale": "en"}),
            ("books", {"slug": "python-basics", "locale": "en"}),
            ("chapters", {"bookSlug": "python-basics", "chapterSlug": "intro", "locale": "ja"}),
        ],
    )
    def test_targets(self, content_root: Path, target: str, expected: dict) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["paths", target, "--content", str(content_root), "--json"])

        assert result.exit_code == 0
        assert expected in json.loads(result.output)

    def test_pages(self, content_root: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["paths", "pages", "--page-size", "1", "--content", str(content_root), "--json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {"page": 2, "locale": "en"},
            {"page": 3, "locale": "en"},
        ]

    def test_empty_tree(self, empty_root: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["paths", "books", "--content", str(empty_root)])

        assert result.exit_code == 0
        assert "No books paths" in result.output
