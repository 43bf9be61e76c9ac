"""Static comparison framework — the fixed facts about Lambda and EC2.

Loaded once at import and never mutated.  The decision rules pick which
option wins each axis; the text shown for each option comes from here.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from referee.schemas.decision import OptionDescriptions, OptionHighlights, ProsCons

LAMBDA_NAME = "AWS Lambda"
EC2_NAME = "AWS EC2"

COMPARISON_FRAMEWORK: Mapping[str, OptionDescriptions] = MappingProxyType({
    "cost_model": OptionDescriptions(
        lambda_detail="Pay-per-execution (millis). Scalable to zero.",
        ec2_detail="Pay-per-instance-hour (fixed). No zero-scale.",
    ),
    "scalability": OptionDescriptions(
        lambda_detail="Native auto-scaling per request.",
        ec2_detail="Auto Scaling Groups (warm-up time required).",
    ),
    # Reference only: no rule evaluates performance.
    "performance": OptionDescriptions(
        lambda_detail="Cold starts possible; 15-min limit.",
        ec2_detail="Consistent latency; no execution limit.",
    ),
    "infrastructure_control": OptionDescriptions(
        lambda_detail="No OS access. Fully managed abstraction.",
        ec2_detail="Full root access. Customizable OS/stack.",
    ),
    "operational_complexity": OptionDescriptions(
        lambda_detail="Low (Serverless, no patching).",
        ec2_detail="Medium/High (Patching, networking, maintenance).",
    ),
})

FRAMEWORK_LABELS: Mapping[str, str] = MappingProxyType({
    "cost_model": "Cost Model",
    "scalability": "Scalability",
    "performance": "Performance",
    "infrastructure_control": "Infrastructure Control",
    "operational_complexity": "Operational Complexity",
})

PROS_CONS = ProsCons(
    lambda_option=OptionHighlights(
        title=f"{LAMBDA_NAME} Edge",
        pros=(
            "No idle costs; perfect for sporadic traffic.",
            "Hands-off maintenance (managed).",
            "Deployment is just uploading code.",
        ),
        choose_if=(
            "Traffic is unpredictable, dev speed is the priority, "
            "and you want zero management."
        ),
    ),
    ec2_option=OptionHighlights(
        title=f"{EC2_NAME} Advantage",
        pros=(
            "Complete flexibility over the OS stack.",
            "Cheaper for high-volume, sustained workloads.",
            "Standard Linux/Windows ecosystem compatibility.",
        ),
        choose_if=(
            "You need deep OS control, run long-running processes, "
            "or have a steady, heavy traffic base."
        ),
    ),
)
