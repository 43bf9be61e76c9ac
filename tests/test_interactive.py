"""Tests for the interactive session loop and report export."""

from __future__ import annotations

import io
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from rich.console import Console

from referee import interactive
from referee.interactive import ANALYZE, EXPORT, QUIT, run_session, write_reports
from referee.narrative.referee import NarrativeReferee
from referee.schemas.constraints import ConstraintSet
from referee.session import ConstraintStore, RefereeSession
from referee.shared.llm_client import DryRunClient


def _session(constraints: ConstraintSet | None = None) -> RefereeSession:
    return RefereeSession(NarrativeReferee(DryRunClient()), ConstraintStore(constraints))


def _console() -> Console:
    return Console(file=io.StringIO(), record=True, width=120)


@pytest.fixture
def tty(monkeypatch):
    monkeypatch.setattr(interactive.sys, "stdin", SimpleNamespace(isatty=lambda: True))


class TestWriteReports:
    def test_writes_both_reports(self, tmp_path: Path) -> None:
        out_dir = tmp_path / "nested" / "out"
        md_path, html_path = write_reports(_session(ConstraintSet(traffic="high")), out_dir)

        assert md_path == out_dir / "referee-report.md"
        assert html_path == out_dir / "referee-dashboard.html"
        assert "Cost Efficiency" in md_path.read_text()
        assert html_path.read_text().lstrip().lower().startswith("<!doctype html")


class TestRunSession:
    @pytest.mark.asyncio
    async def test_change_analyze_export_quit(self, tty, monkeypatch, tmp_path: Path) -> None:
        ask = AsyncMock(side_effect=["traffic", "high", ANALYZE, EXPORT, QUIT])
        monkeypatch.setattr(interactive, "_ask", ask)
        session = _session()
        console = _console()

        await run_session(session, console, tmp_path)

        assert session.constraints.traffic == "high"
        assert "dry run" in session.narrative
        assert (tmp_path / "referee-report.md").exists()
        assert (tmp_path / "referee-dashboard.html").exists()
        assert ask.await_count == 5
        assert "Markdown report written to" in console.export_text()

    @pytest.mark.asyncio
    async def test_menu_offers_every_field_and_action(self, tty, monkeypatch, tmp_path: Path) -> None:
        ask = AsyncMock(return_value=QUIT)
        monkeypatch.setattr(interactive, "_ask", ask)

        await run_session(_session(), _console(), tmp_path)

        question, choices, default = ask.await_args.args
        assert choices == ["budget", "traffic", "scalability", "control", "dev_speed", ANALYZE, EXPORT, QUIT]
        assert default == QUIT

    @pytest.mark.asyncio
    async def test_value_prompt_defaults_to_current(self, tty, monkeypatch, tmp_path: Path) -> None:
        ask = AsyncMock(side_effect=["control", "high", QUIT])
        monkeypatch.setattr(interactive, "_ask", ask)
        session = _session(ConstraintSet(control="low"))

        await run_session(session, _console(), tmp_path)

        _, choices, default = ask.await_args_list[1].args
        assert choices == ["low", "medium", "high"]
        assert default == "low"
        assert session.constraints.control == "high"

    @pytest.mark.asyncio
    async def test_eof_ends_session(self, tty, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setattr(interactive, "_ask", AsyncMock(side_effect=EOFError))
        session = _session()

        await run_session(session, _console(), tmp_path)

        assert session.constraints == ConstraintSet()
        assert not list(tmp_path.iterdir())
