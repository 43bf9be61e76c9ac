"""Interactive terminal session — pick constraints, watch the matrix update."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt

from referee.output.dashboard import render_dashboard
from referee.output.markdown import render_markdown_report
from referee.output.terminal import (
    render_comparison_table,
    render_constraints,
    render_narrative,
    render_pros_cons,
)
from referee.schemas.constraints import CONSTRAINT_DOMAINS, CONSTRAINT_LABELS
from referee.session import RefereeSession

logger = logging.getLogger(__name__)

ANALYZE = "analyze"
EXPORT = "export"
QUIT = "quit"


def show(session: RefereeSession, console: Console) -> None:
    """Render the current state of the session."""
    console.print(render_constraints(session.constraints))
    console.print(render_comparison_table(session.comparison()))
    decision = session.decision()
    console.print(render_pros_cons(decision.pros_cons))
    if session.narrative:
        console.print(render_narrative(session.narrative, decision.pros_cons))


def write_reports(session: RefereeSession, out_dir: Path) -> tuple[Path, Path]:
    """Write the Markdown report and HTML dashboard; return both paths."""
    out_dir.mkdir(parents=True, exist_ok=True)
    decision = session.decision()
    md_path = out_dir / "referee-report.md"
    md_path.write_text(render_markdown_report(decision))
    html_path = out_dir / "referee-dashboard.html"
    html_path.write_text(render_dashboard(decision))
    logger.info("Reports written to %s", out_dir)
    return md_path, html_path


async def _ask(question: str, choices: list[str], default: str) -> str:
    """Prompt in an executor so the event loop stays free."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, lambda: Prompt.ask(question, choices=choices, default=default)
    )


async def run_session(session: RefereeSession, console: Console, out_dir: Path) -> None:
    """Menu loop: change one constraint at a time, request the verdict, export."""
    if not sys.stdin.isatty():
        console.print("[yellow]Non-interactive input — showing the current matrix only.[/]")
        show(session, console)
        return

    show(session, console)
    while True:
        # The analysis is awaited below, so no request is outstanding here;
        # RefereeSession rejects overlapping requests on its own.
        actions = [*CONSTRAINT_DOMAINS, ANALYZE, EXPORT, QUIT]

        try:
            action = await _ask("\n[bold]Change a constraint or pick an action[/]", actions, QUIT)
        except EOFError:
            return

        if action == QUIT:
            return

        if action == ANALYZE:
            with console.status("Analyzing…"):
                await session.request_analysis()
        elif action == EXPORT:
            md_path, html_path = write_reports(session, out_dir)
            console.print(f"[green]Markdown report written to:[/] {md_path}")
            console.print(f"[green]HTML dashboard written to:[/] {html_path}")
            continue
        else:
            current = getattr(session.constraints, action)
            value = await _ask(
                f"[cyan]{CONSTRAINT_LABELS[action]}[/]",
                list(CONSTRAINT_DOMAINS[action]),
                current,
            )
            session.store.set(action, value)

        show(session, console)
