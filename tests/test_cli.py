"""Tests for the ``pages build`` command."""

from __future__ import annotations

import datetime as dt
import json
import typing as typ
from pathlib import Path

import pytest

from geopolitica_pages.cli import build, parse_build_time
from geopolitica_pages.config import SiteConfigError

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture


def _write_content(tmp_path: Path, sections: dict[str, list[str]]) -> Path:
    path = tmp_path / "core.json"
    path.write_text(
        json.dumps({"Sezioni principali": sections}, ensure_ascii=False),
        encoding="utf-8",
    )
    return path


def test_build_writes_site(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """The command builds the site and reports every written file."""
    content = _write_content(
        tmp_path, {"Politica interna": ["Partiti"], "Economia globale": []}
    )
    output_dir = tmp_path / "site"
    build(
        content=content,
        src_dir=tmp_path / "src",
        output_dir=output_dir,
        build_date="2025-03-01",
    )
    assert (output_dir / "sezioni" / "politica-interna-partiti.html").is_file()
    assert (output_dir / "articoli" / "crisi-energetica-europa.html").is_file()
    out = capsys.readouterr().out
    assert "wrote" in out
    assert "index.html" in out


def test_build_exits_on_collision(tmp_path: Path) -> None:
    """Invalid content exits with status 1 and writes nothing."""
    content = _write_content(tmp_path, {"Caffè": [], "Caffe!": []})
    output_dir = tmp_path / "site"
    with pytest.raises(SystemExit) as excinfo:
        build(content=content, src_dir=tmp_path / "src", output_dir=output_dir)
    assert excinfo.value.code == 1
    assert not output_dir.exists()


def test_build_propagates_write_errors(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], mocker: MockerFixture
) -> None:
    """A failed write aborts the command before any file is reported."""
    content = _write_content(tmp_path, {"Politica interna": []})
    mocker.patch.object(
        Path, "write_text", side_effect=PermissionError("read-only file system")
    )
    with pytest.raises(PermissionError, match="read-only"):
        build(
            content=content,
            src_dir=tmp_path / "src",
            output_dir=tmp_path / "site",
            build_date="2025-03-01",
        )
    assert "wrote" not in capsys.readouterr().out


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2025-03-01", dt.datetime(2025, 3, 1, tzinfo=dt.UTC)),
        ("2025-03-01T10:15:00Z", dt.datetime(2025, 3, 1, 10, 15, tzinfo=dt.UTC)),
        (
            "2025-03-01T12:00:00+02:00",
            dt.datetime(2025, 3, 1, 10, 0, tzinfo=dt.UTC),
        ),
    ],
)
def test_parse_build_time(value: str, expected: dt.datetime) -> None:
    """Build dates are parsed as UTC instants."""
    assert parse_build_time(value) == expected


def test_parse_build_time_rejects_garbage() -> None:
    """Non-ISO build dates are configuration errors."""
    with pytest.raises(SiteConfigError, match="Invalid build date"):
        parse_build_time("domani")


def test_parse_build_time_defaults_to_now() -> None:
    """Without a value the current UTC time is used."""
    before = dt.datetime.now(dt.UTC)
    parsed = parse_build_time(None)
    assert before <= parsed <= dt.datetime.now(dt.UTC)
