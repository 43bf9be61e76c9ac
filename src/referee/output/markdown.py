"""Markdown report builder — renders a DecisionResult to a Markdown document."""

from __future__ import annotations

from referee.framework import COMPARISON_FRAMEWORK, EC2_NAME, FRAMEWORK_LABELS, LAMBDA_NAME
from referee.schemas.constraints import CONSTRAINT_LABELS
from referee.schemas.decision import DecisionResult

_WINNER_LABEL = {"lambda": LAMBDA_NAME, "ec2": EC2_NAME, "neutral": "Neutral"}


def _cell(text: str, won: bool) -> str:
    # Pipes would split the table cell.
    text = text.replace("|", "\\|")
    return f"**✅ {text}**" if won else text


def render_markdown_report(result: DecisionResult) -> str:
    """Render a DecisionResult into a Markdown string."""
    sections: list[str] = []

    sections.append(f"# The Referee: {LAMBDA_NAME} vs {EC2_NAME}\n")
    sections.append(f"*Generated: {result.generated_at}*\n")

    # Constraints
    sections.append("## Constraints\n")
    for field, label in CONSTRAINT_LABELS.items():
        sections.append(f"- **{label}:** {getattr(result.constraints, field)}")
    sections.append("")

    # Comparison matrix — engine order, winner in bold
    sections.append("## Comparison Matrix\n")
    sections.append(f"| Feature | {LAMBDA_NAME} | {EC2_NAME} | Winner |")
    sections.append("|---------|------------|---------|--------|")
    for row in result.comparison_table:
        sections.append(
            f"| {row.feature} "
            f"| {_cell(row.lambda_detail, row.winner == 'lambda')} "
            f"| {_cell(row.ec2_detail, row.winner == 'ec2')} "
            f"| {_WINNER_LABEL[row.winner]} |"
        )
    sections.append("")
    for row in result.comparison_table:
        sections.append(f"- *{row.feature}* — Heuristic Result: {row.reason}")
    sections.append("")

    # Pros & cons
    for option in (result.pros_cons.lambda_option, result.pros_cons.ec2_option):
        sections.append(f"### {option.title}\n")
        for pro in option.pros:
            sections.append(f"- {pro}")
        sections.append("")

    # Narrative
    if result.tradeoff_explanation:
        sections.append("## The Referee's Verdict: Trade-off Analysis\n")
        sections.append(result.tradeoff_explanation.strip() + "\n")
        sections.append("### Final Guidance\n")
        sections.append(f"- **Choose Lambda if:** {result.pros_cons.lambda_option.choose_if}")
        sections.append(f"- **Choose EC2 if:** {result.pros_cons.ec2_option.choose_if}")
        sections.append("")

    # Reference framework
    sections.append("## Appendix: Comparison Framework\n")
    sections.append(f"| Dimension | {LAMBDA_NAME} | {EC2_NAME} |")
    sections.append("|-----------|------------|---------|")
    for key, options in COMPARISON_FRAMEWORK.items():
        sections.append(f"| {FRAMEWORK_LABELS[key]} | {options.lambda_detail} | {options.ec2_detail} |")
    sections.append("")

    return "\n".join(sections)
