"""Rich renderables for the terminal UI."""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Group
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from referee.framework import EC2_NAME, LAMBDA_NAME
from referee.schemas.constraints import CONSTRAINT_LABELS, ConstraintSet
from referee.schemas.decision import ComparisonRow, ProsCons

_WINNER_STYLE = "bold green"


def _option_cell(detail: str, won: bool) -> Text:
    if won:
        return Text(f"✓ {detail}", style=_WINNER_STYLE)
    return Text(detail)


def render_comparison_table(rows: list[ComparisonRow]) -> Table:
    """Build the comparison matrix, in row order, with each winner highlighted.

    The rule's reason is shown beneath each row.
    """
    table = Table(title="Comparison Matrix", show_lines=True, expand=True)
    table.add_column("Feature", style="bold", no_wrap=True)
    table.add_column(LAMBDA_NAME)
    table.add_column(EC2_NAME)

    for row in rows:
        table.add_row(
            row.feature,
            _option_cell(row.lambda_detail, row.winner == "lambda"),
            _option_cell(row.ec2_detail, row.winner == "ec2"),
        )
        if row.reason:
            table.add_row(
                "",
                Text(f"Heuristic Result: {row.reason}", style="italic blue"),
                "",
            )
    return table


def render_constraints(constraints: ConstraintSet) -> Table:
    table = Table(title="Constraints", show_header=False, box=None)
    table.add_column("Axis", style="dim")
    table.add_column("Value", style="cyan")
    for field, label in CONSTRAINT_LABELS.items():
        table.add_row(label, getattr(constraints, field))
    return table


def render_pros_cons(pros_cons: ProsCons) -> Columns:
    panels = []
    for option, style in ((pros_cons.lambda_option, "green"), (pros_cons.ec2_option, "magenta")):
        body = "\n".join(f"• {p}" for p in option.pros)
        panels.append(Panel(body, title=option.title, border_style=style))
    return Columns(panels, expand=True, equal=True)


def render_narrative(narrative: str, pros_cons: ProsCons) -> Panel:
    """The Referee's verdict followed by the fixed final guidance."""
    guidance = Text.assemble(
        ("Choose Lambda if: ", "bold blue"),
        pros_cons.lambda_option.choose_if,
        "\n",
        ("Choose EC2 if: ", "bold magenta"),
        pros_cons.ec2_option.choose_if,
    )
    return Panel(
        Group(Markdown(narrative), Text(""), guidance),
        title="The Referee's Verdict: Trade-off Analysis",
        border_style="white",
    )
