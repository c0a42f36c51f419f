"""Tests for the Strong's import command."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from bible_portal.application.services import ImportResult
from bible_portal.core.exceptions import NoEntriesParsedError
from bible_portal.core.lexicon import LexiconEntry
from bible_portal.scripts import import_strongs


@pytest.fixture(autouse=True)
def keep_logging():
    """The command configures logging; keep the test run's handlers."""
    with patch.object(import_strongs, "configure_logging"):
        yield


def test_main_returns_1_for_missing_file(tmp_path: Path) -> None:
    assert import_strongs.main([str(tmp_path / "missing.md")]) == 1


def test_main_reports_import_result(tmp_path: Path, capsys) -> None:
    # Arrange
    path = tmp_path / "dictionary.md"
    path.write_text("# 01 'ab\npai", encoding="utf-8")
    result = ImportResult(
        imported=1,
        total=1,
        sample=[LexiconEntry(strongs_id="H0001", original_word="ab", definition="pai")],
    )

    # Act
    with patch.object(import_strongs, "run_import", AsyncMock(return_value=result)) as run:
        code = import_strongs.main([str(path), "--batch-size", "50"])

    # Assert
    assert code == 0
    run.assert_awaited_once_with(path, 50)
    output = capsys.readouterr().out
    assert "Imported 1 of 1 entries" in output
    assert "H0001" in output


def test_main_returns_2_when_batches_failed(tmp_path: Path) -> None:
    path = tmp_path / "dictionary.md"
    path.write_text("x", encoding="utf-8")
    result = ImportResult(imported=0, total=3, errors=["Batch 0: boom"])

    with patch.object(import_strongs, "run_import", AsyncMock(return_value=result)):
        assert import_strongs.main([str(path)]) == 2


def test_main_returns_1_when_nothing_parsed(tmp_path: Path) -> None:
    path = tmp_path / "dictionary.md"
    path.write_text("sem entradas", encoding="utf-8")

    with patch.object(
        import_strongs,
        "run_import",
        AsyncMock(side_effect=NoEntriesParsedError(line_count=1)),
    ):
        assert import_strongs.main([str(path)]) == 1
