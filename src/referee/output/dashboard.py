"""Static HTML dashboard generator — renders a DecisionResult to a self-contained HTML file."""

from __future__ import annotations

import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import escape

from referee.framework import COMPARISON_FRAMEWORK, EC2_NAME, FRAMEWORK_LABELS, LAMBDA_NAME
from referee.schemas.constraints import CONSTRAINT_LABELS
from referee.schemas.decision import DecisionResult

_TEMPLATE_DIR = Path(__file__).parent / "templates"


def _inline(text: str) -> str:
    text = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", text)
    text = re.sub(r"\*(.+?)\*", r"<em>\1</em>", text)
    return re.sub(r"`(.+?)`", r"<code>\1</code>", text)


def _md_to_html(text: str) -> str:
    """Minimal markdown-to-HTML for the narrative.

    The narrative is model output, so it is HTML-escaped before any tags
    are introduced.
    """
    result: list[str] = []
    open_list: str | None = None  # "ul" | "ol"

    def _open(kind: str) -> None:
        nonlocal open_list
        if open_list != kind:
            _close()
            result.append(f"<{kind}>")
            open_list = kind

    def _close() -> None:
        nonlocal open_list
        if open_list:
            result.append(f"</{open_list}>")
            open_list = None

    for line in str(escape(text)).split("\n"):
        stripped = line.strip()

        heading_match = re.match(r"^(#{1,4})\s+(.+)$", stripped)
        if heading_match:
            _close()
            level = len(heading_match.group(1))
            result.append(f"<h{level}>{_inline(heading_match.group(2))}</h{level}>")
            continue

        if stripped.startswith(("- ", "* ")):
            _open("ul")
            result.append(f"<li>{_inline(stripped[2:])}</li>")
            continue

        ol_match = re.match(r"^\d+\.\s+(.+)$", stripped)
        if ol_match:
            _open("ol")
            result.append(f"<li>{_inline(ol_match.group(1))}</li>")
            continue

        # Blank lines inside a list keep it open.
        if not stripped and open_list:
            continue
        _close()
        if stripped:
            result.append(f"<p>{_inline(stripped)}</p>")

    _close()
    return "\n".join(result)


def render_dashboard(result: DecisionResult) -> str:
    """Render a DecisionResult into a self-contained HTML dashboard."""
    env = Environment(loader=FileSystemLoader(str(_TEMPLATE_DIR)), autoescape=True)
    template = env.get_template("dashboard.html")

    constraints = [
        (label, getattr(result.constraints, field)) for field, label in CONSTRAINT_LABELS.items()
    ]
    framework = [
        (FRAMEWORK_LABELS[key], options.lambda_detail, options.ec2_detail)
        for key, options in COMPARISON_FRAMEWORK.items()
    ]

    return template.render(
        lambda_name=LAMBDA_NAME,
        ec2_name=EC2_NAME,
        generated_at=result.generated_at,
        constraints=constraints,
        rows=[r.model_dump() for r in result.comparison_table],
        lambda_option=result.pros_cons.lambda_option.model_dump(),
        ec2_option=result.pros_cons.ec2_option.model_dump(),
        narrative_html=_md_to_html(result.tradeoff_explanation) if result.tradeoff_explanation else "",
        framework=framework,
    )
