"""Test cases for the lexicache CLI."""

import io
import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
import typer
from rich.console import Console
from typer.testing import CliRunner

from lexicache.cli import app
from lexicache.cli.commands import check_sentences, show_dictionary
from lexicache.config import LexicacheConfig


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def mock_console() -> Console:
    """Create a console writing to memory."""
    return Console(file=io.StringIO(), force_terminal=False, width=120)


def _output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


@pytest.fixture
def sentences_file(tmp_path: Path) -> Path:
    data = [
        {
            "content": "私は彼は好きだ",
            "line_number": 1,
            "tokens": [
                {"surface": "私", "tags": ["名詞"]},
                {"surface": "は", "tags": ["助詞"]},
                {"surface": "彼", "tags": ["名詞"]},
                {"surface": "は", "tags": ["助詞"]},
                {"surface": "好き", "tags": ["名詞"]},
            ],
        },
        {
            "content": "犬が走る",
            "line_number": 2,
            "tokens": [
                {"surface": "犬", "tags": ["名詞"]},
                {"surface": "が", "tags": ["助詞"]},
                {"surface": "走る", "tags": ["動詞"]},
            ],
        },
    ]
    path = tmp_path / "sentences.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


class TestAppInitialization:
    """Test cases for app initialization."""

    def test_app_name(self) -> None:
        assert app.info.name == "lexicache"
        assert "dictionary" in (app.info.help or "")

    def test_help_output(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "load" in result.stdout
        assert "check" in result.stdout

    def test_unknown_command(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["unknown-command"])
        assert result.exit_code == 2


class TestShowDictionary:
    """Test cases for show_dictionary."""

    def test_bundled_key_value(self, mock_console: Console) -> None:
        show_dictionary(
            "en/abbreviations.tsv", "key-value", LexicacheConfig(), console=mock_console
        )

        output = _output(mock_console)
        assert "3 entries" in output
        assert "for example" in output

    def test_filesystem_word_list(self, mock_console: Console, tmp_path: Path) -> None:
        path = tmp_path / "words.txt"
        path.write_text("Alpha\nBeta\n", encoding="utf-8")

        show_dictionary(
            str(path),
            "word-lowercase",
            LexicacheConfig(source="filesystem"),
            display_name="greek",
            console=mock_console,
        )

        output = _output(mock_console)
        assert "greek" in output
        assert "alpha" in output

    def test_missing_resource_exits(self, mock_console: Console) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            show_dictionary("nope.txt", "word", LexicacheConfig(), console=mock_console)

        assert exc_info.value.exit_code == 1
        assert "Failed to load" in _output(mock_console)

    def test_unknown_parser_exits(self, mock_console: Console) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            show_dictionary("x", "csv", LexicacheConfig(), console=mock_console)

        assert exc_info.value.exit_code == 2


class TestCheckSentences:
    """Test cases for check_sentences."""

    def test_reports_findings(self, mock_console: Console, sentences_file: Path) -> None:
        count = check_sentences(sentences_file, console=mock_console)

        assert count == 1
        assert "私は彼は好きだ" in _output(mock_console)

    def test_skip_list(self, mock_console: Console, sentences_file: Path) -> None:
        assert check_sentences(sentences_file, skip="は", console=mock_console) == 0
        assert "No repeated particles" in _output(mock_console)

    def test_skip_dict(
        self, mock_console: Console, sentences_file: Path, tmp_path: Path
    ) -> None:
        skip_file = tmp_path / "skip.txt"
        skip_file.write_text("は\n", encoding="utf-8")

        assert (
            check_sentences(
                sentences_file, skip_dict=str(skip_file), console=mock_console
            )
            == 0
        )

    def test_invalid_json_exits(self, mock_console: Console, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('[{"tokens": [{"surface": "は", "tags": []}]}]')

        with pytest.raises(typer.Exit) as exc_info:
            check_sentences(path, console=mock_console)

        assert exc_info.value.exit_code == 2

    def test_missing_file_exits(self, mock_console: Console, tmp_path: Path) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            check_sentences(tmp_path / "none.json", console=mock_console)

        assert exc_info.value.exit_code == 2


class TestCommandRouting:
    """Test cases for command routing through the app."""

    def test_load_command(self, runner: CliRunner) -> None:
        with patch("lexicache.cli.show_dictionary") as mock_show:
            result = runner.invoke(
                app, ["load", "ja/particles.txt", "--parser", "word-lowercase"]
            )

        assert result.exit_code == 0
        mock_show.assert_called_once()
        args = mock_show.call_args[0]
        assert args[0] == "ja/particles.txt"
        assert args[1] == "word-lowercase"

    def test_check_exit_code_with_findings(
        self, runner: CliRunner, sentences_file: Path
    ) -> None:
        result = runner.invoke(app, ["check", str(sentences_file)])
        assert result.exit_code == 1

    def test_check_exit_code_clean(
        self, runner: CliRunner, sentences_file: Path
    ) -> None:
        result = runner.invoke(app, ["check", str(sentences_file), "--skip", "は"])
        assert result.exit_code == 0

    def test_load_invalid_source_option(self, runner: CliRunner) -> None:
        with patch("lexicache.cli.show_dictionary") as mock_show:
            result = runner.invoke(
                app, ["load", "ja/particles.txt", "--source", "nowhere"]
            )

        assert result.exit_code == 2
        assert "Invalid configuration" in result.output
        mock_show.assert_not_called()

    def test_load_invalid_source_env(self, runner: CliRunner) -> None:
        with patch.dict(os.environ, {"LEXICACHE_SOURCE": "nowhere"}):
            with patch("lexicache.cli.show_dictionary") as mock_show:
                result = runner.invoke(app, ["load", "ja/particles.txt"])

        assert result.exit_code == 2
        assert "Invalid configuration" in result.output
        mock_show.assert_not_called()
