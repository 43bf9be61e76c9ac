"""Typer CLI — ``referee compare``, ``referee interactive`` and ``referee validate``."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from referee.config import load_config
from referee.schemas.config import RefereeConfig
from referee.schemas.constraints import CONSTRAINT_DOMAINS, CONSTRAINT_LABELS, ConstraintSet

if TYPE_CHECKING:
    from referee.session import RefereeSession

# Load .env file from project root (if it exists)
load_dotenv()

app = typer.Typer(
    name="referee",
    help="The Referee — compare AWS Lambda and AWS EC2 against your constraints.",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )
    # httpx logs every HTTP request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _load_or_exit(config: Path | None) -> RefereeConfig:
    try:
        return load_config(config)
    except (OSError, ValueError) as exc:
        console.print(f"[red]Config validation failed:[/] {escape(str(exc))}")
        raise typer.Exit(code=1)


def _make_session(
    cfg: RefereeConfig, constraints: ConstraintSet, *, dry_run: bool
) -> RefereeSession:
    from referee.narrative.referee import NarrativeReferee
    from referee.session import ConstraintStore, RefereeSession

    if dry_run:
        from referee.shared.llm_client import DryRunClient
        client = DryRunClient()
    else:
        from referee.shared.llm_client import LLMClient
        client = LLMClient(cfg.narrative)

    return RefereeSession(NarrativeReferee(client), ConstraintStore(constraints))


def _help(field: str) -> str:
    return f"{CONSTRAINT_LABELS[field]}: {' | '.join(CONSTRAINT_DOMAINS[field])}"


@app.command()
def validate(
    config: Path = typer.Option(..., "--config", "-c", help="Path to referee-config.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Validate a configuration file and print the resolved settings."""
    _setup_logging(verbose)
    cfg = _load_or_exit(config)

    console.print("[green]Config is valid![/]\n")
    console.print("  Constraints:")
    for field, label in CONSTRAINT_LABELS.items():
        console.print(f"    {label + ':':<26} {getattr(cfg.constraints, field)}")
    n = cfg.narrative
    console.print(f"  Model:       {n.model} (temperature={n.temperature}, top_p={n.top_p})")
    console.print(f"  Max tokens:  {n.max_tokens}")
    console.print(f"  Retries:     {n.max_retries}")
    console.print(f"  Output dir:  {cfg.output_directory}")


@app.command()
def compare(
    budget: Optional[str] = typer.Option(None, "--budget", help=_help("budget")),
    traffic: Optional[str] = typer.Option(None, "--traffic", help=_help("traffic")),
    scalability: Optional[str] = typer.Option(None, "--scalability", help=_help("scalability")),
    control: Optional[str] = typer.Option(None, "--control", help=_help("control")),
    dev_speed: Optional[str] = typer.Option(None, "--dev-speed", help=_help("dev_speed")),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to referee-config.yml"),
    analyze: bool = typer.Option(False, "--analyze", "-a", help="Also request the AI trade-off analysis."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Use a canned analysis (no API calls)."),
    markdown: Optional[Path] = typer.Option(None, "--markdown", help="Write the Markdown report here."),
    html: Optional[Path] = typer.Option(None, "--html", help="Write the HTML dashboard here."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Print the comparison matrix for one set of constraints.

    Values not given on the command line come from the config file, then
    from the defaults.

    Example:

        referee compare --traffic unpredictable --control low --analyze
    """
    _setup_logging(verbose)
    cfg = _load_or_exit(config)

    overrides = {
        "budget": budget,
        "traffic": traffic,
        "scalability": scalability,
        "control": control,
        "dev_speed": dev_speed,
    }
    data = cfg.constraints.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        constraints = ConstraintSet.model_validate(data)
    except ValidationError as exc:
        console.print(f"[red]Invalid constraint:[/] {escape(str(exc))}")
        raise typer.Exit(code=2)

    if dry_run and analyze:
        console.print("[yellow]DRY-RUN mode — no API calls will be made.[/]\n")

    session = _make_session(cfg, constraints, dry_run=dry_run)
    asyncio.run(_run_compare(session, analyze=analyze, markdown=markdown, html=html))


async def _run_compare(
    session: RefereeSession,
    *,
    analyze: bool,
    markdown: Path | None,
    html: Path | None,
) -> None:
    from referee.interactive import show
    from referee.output.dashboard import render_dashboard
    from referee.output.markdown import render_markdown_report

    if analyze:
        with console.status("Analyzing…"):
            await session.request_analysis()

    show(session, console)

    decision = session.decision()
    if markdown:
        markdown.parent.mkdir(parents=True, exist_ok=True)
        markdown.write_text(render_markdown_report(decision))
        console.print(f"[green]Markdown report written to:[/] {markdown}")
    if html:
        html.parent.mkdir(parents=True, exist_ok=True)
        html.write_text(render_dashboard(decision))
        console.print(f"[green]HTML dashboard written to:[/] {html}")


@app.command()
def interactive(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to referee-config.yml"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Use a canned analysis (no API calls)."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Start an interactive session: change constraints one at a time and re-evaluate."""
    from referee.interactive import run_session

    _setup_logging(verbose)
    cfg = _load_or_exit(config)

    console.print("[bold]The Referee[/] — Decision-Support System: AWS Lambda vs. AWS EC2\n")
    if dry_run:
        console.print("[yellow]DRY-RUN mode — no API calls will be made.[/]\n")

    session = _make_session(cfg, cfg.constraints, dry_run=dry_run)
    asyncio.run(run_session(session, console, Path(cfg.output_directory)))
