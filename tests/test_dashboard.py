"""Tests for HTML dashboard generation."""

from __future__ import annotations

from referee.engine import FEATURE_ORDER, build_decision
from referee.output.dashboard import _md_to_html, render_dashboard
from referee.schemas.constraints import ConstraintSet


class TestMdToHtml:
    def test_headings_and_emphasis(self) -> None:
        html = _md_to_html("## The Deadlock\nCost is **critical** and *subtle*.")
        assert "<h2>The Deadlock</h2>" in html
        assert "<p>Cost is <strong>critical</strong> and <em>subtle</em>.</p>" in html

    def test_lists(self) -> None:
        html = _md_to_html("- one\n\n- two\n1. first\n2. second")
        assert html.count("<ul>") == 1
        assert "<li>one</li>" in html and "<li>two</li>" in html
        assert "</ul>\n<ol>" in html
        assert html.endswith("</ol>")

    def test_escapes_model_output(self) -> None:
        html = _md_to_html("<script>alert(1)</script>")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestRenderDashboard:
    def test_rows_in_order_with_winner_cells(self) -> None:
        decision = build_decision(ConstraintSet(control="high", dev_speed="low"))
        html = render_dashboard(decision)

        positions = [html.index(f"<td>{feature}</td>") for feature in FEATURE_ORDER]
        assert positions == sorted(positions)

        winners = [r for r in decision.comparison_table if r.winner != "neutral"]
        assert html.count('class="winner"') == len(winners)
        assert 'data-winner="neutral"' in html
        assert "Heuristic Result: EC2 provides full root access" in html

    def test_no_verdict_without_narrative(self) -> None:
        html = render_dashboard(build_decision(ConstraintSet()))
        assert "Verdict" not in html
        assert "Comparison Matrix" in html
        assert "AWS Lambda Edge" in html

    def test_verdict_rendered_and_escaped(self) -> None:
        decision = build_decision(ConstraintSet(), narrative="### Guidance\n- Choose <b>Lambda</b>")
        html = render_dashboard(decision)
        assert "<h2>The Referee's Verdict: Trade-off Analysis</h2>" in html
        assert "<h3>Guidance</h3>" in html
        assert "&lt;b&gt;Lambda&lt;/b&gt;" in html
        assert "Choose EC2 if:" in html

    def test_constraints_shown(self) -> None:
        html = render_dashboard(build_decision(ConstraintSet(traffic="unpredictable")))
        assert "<dt>Traffic Pattern</dt><dd>Unpredictable</dd>" in html
