"""Tests for the check_save job."""

import json
import logging
from pathlib import Path

import pytest

from deckkeeper.jobs.check_save import check_save, main, run_checks
from deckkeeper.models.failure import FailureKind


@pytest.fixture
def incomplete_save(tmp_path: Path) -> Path:
    """A save holding only two cards."""
    path = tmp_path / "incomplete.json"
    path.write_text(json.dumps({"Stock": {"Stack": ["AS", "2S"]}}))
    return path


class TestCheckSave:
    def test_valid_save(self, fixtures_dir: Path) -> None:
        report = check_save(fixtures_dir / "klondike_midgame.toml")

        assert report.valid is True
        assert report.failure is None
        assert report.stock_cards == 21
        assert report.tableau_cards == 27
        assert report.foundation_cards == 4

    def test_invalid_save(self, incomplete_save: Path) -> None:
        report = check_save(incomplete_save)

        assert report.valid is False
        assert report.failure is not None
        assert report.failure.kind == FailureKind.INCOMPLETE_DECK

    def test_unsupported_format(self, tmp_path: Path) -> None:
        report = check_save(tmp_path / "game.ini")
        assert report.failure is not None
        assert report.failure.kind == FailureKind.UNSUPPORTED_FORMAT

    def test_unreadable_file(self, tmp_path: Path) -> None:
        report = check_save(tmp_path / "missing.json")
        assert report.valid is False
        assert report.failure is not None
        assert report.failure.kind == FailureKind.DECODE_FAILED

    def test_invalid_save_logged(
        self, incomplete_save: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="deckkeeper.jobs.check_save"):
            check_save(incomplete_save)
        assert "Found 2 cards" in caplog.text


class TestRunChecks:
    def test_reports_in_order(self, fixtures_dir: Path, incomplete_save: Path) -> None:
        reports = run_checks([fixtures_dir / "klondike_deal.json", incomplete_save])
        assert [report.valid for report in reports] == [True, False]


class TestMain:
    def test_all_valid_exits_zero(
        self, fixtures_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main(
            [
                str(fixtures_dir / "klondike_deal.json"),
                str(fixtures_dir / "klondike_midgame.toml"),
            ]
        )

        assert code == 0
        out = capsys.readouterr().out
        assert out.count("OK") == 2

    def test_any_invalid_exits_one(
        self,
        fixtures_dir: Path,
        incomplete_save: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main([str(fixtures_dir / "klondike_deal.json"), str(incomplete_save)])

        assert code == 1
        out = capsys.readouterr().out
        assert "INVALID" in out
        assert "Found 2 cards" in out

    def test_json_output(self, incomplete_save: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--json", str(incomplete_save)])

        line = capsys.readouterr().out.strip()
        report = json.loads(line)
        assert report["valid"] is False
        assert report["failure"]["kind"] == "incomplete_deck"
