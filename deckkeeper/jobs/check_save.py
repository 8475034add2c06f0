"""
Check saved games.

Loads each save file, restores it and reports whether it holds one valid
deal. Exits with status 1 if any file fails.
"""

import argparse
import logging
from pathlib import Path

from pydantic import BaseModel, Field

from deckkeeper.config import settings
from deckkeeper.models.failure import FailureDetail, FailureKind, KnownError
from deckkeeper.services.importer import load_game

logger = logging.getLogger(__name__)


class CheckReport(BaseModel):
    """Outcome of checking one save file."""

    path: str
    valid: bool
    stock_cards: int = 0
    tableau_cards: int = 0
    foundation_cards: int = 0
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present when invalid)",
    )


def check_save(path: Path) -> CheckReport:
    """
    Restore a single save file and report the outcome.

    Never raises for a bad save; the failure is returned in the report.
    """
    try:
        game = load_game(path)
    except KnownError as e:
        logger.warning("%s is invalid: %s", path, e.message)
        return CheckReport(path=str(path), valid=False, failure=e.to_detail())
    except OSError as e:
        logger.error("Failed to read %s: %s", path, e)
        return CheckReport(
            path=str(path),
            valid=False,
            failure=FailureDetail(
                kind=FailureKind.DECODE_FAILED,
                message=f"Could not read {path}.",
                detail=str(e),
            ),
        )

    report = CheckReport(
        path=str(path),
        valid=True,
        stock_cards=len(game.stock.stack),
        tableau_cards=game.tableau.card_count(),
        foundation_cards=sum(len(pile) for pile in game.foundations.values()),
    )
    logger.info(
        "%s is valid (%d stock, %d tableau, %d foundation)",
        path,
        report.stock_cards,
        report.tableau_cards,
        report.foundation_cards,
    )
    return report


def run_checks(paths: list[Path]) -> list[CheckReport]:
    """Check every path in order."""
    reports = [check_save(path) for path in paths]
    invalid = sum(1 for report in reports if not report.valid)
    logger.info("Checked %d saves, %d invalid", len(reports), invalid)
    return reports


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for checking save files."""
    parser = argparse.ArgumentParser(description="Check saved Klondike games")
    parser.add_argument(
        "paths",
        type=Path,
        nargs="+",
        help="Save files (.json or .toml)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON report per file",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    reports = run_checks(args.paths)
    for report in reports:
        if args.json:
            print(report.model_dump_json())
        elif report.valid:
            print(f"OK      {report.path}")
        elif report.failure is not None:
            print(f"INVALID {report.path}: {report.failure.message}")

    return 0 if all(report.valid for report in reports) else 1


if __name__ == "__main__":
    raise SystemExit(main())
