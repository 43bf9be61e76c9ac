"""Decision engine — maps a ConstraintSet to the Lambda vs EC2 comparison matrix.

A static decision table: each feature axis reads one constraint and picks
a winner with a fixed justification.  There is no scoring and no
interaction between axes.  ``budget`` is accepted but no rule reads it.
"""

from __future__ import annotations

import logging

from referee.framework import COMPARISON_FRAMEWORK, PROS_CONS
from referee.schemas.constraints import ConstraintSet
from referee.schemas.decision import ComparisonRow, DecisionResult, Winner

logger = logging.getLogger(__name__)

COST_EFFICIENCY = "Cost Efficiency"
SCALABILITY_SPEED = "Scalability Speed"
INFRA_CONTROL = "Infra Control"
OPERATIONAL_OVERHEAD = "Operational Overhead"

FEATURE_ORDER: tuple[str, ...] = (
    COST_EFFICIENCY,
    SCALABILITY_SPEED,
    INFRA_CONTROL,
    OPERATIONAL_OVERHEAD,
)

COST_LAMBDA_REASON = "Lambda's pay-per-request model prevents waste during idle periods."
COST_EC2_REASON = "EC2 reserved instances can be 70% cheaper for sustained 24/7 loads."
SCALE_LAMBDA_REASON = "Lambda handles rapid spikes instantly without warm-up config."
SCALE_EC2_REASON = "EC2 offers fine-grained control over instance warm-up and cluster sizes."
CONTROL_EC2_REASON = "EC2 provides full root access; Lambda restricts you to high-level runtimes."
CONTROL_LAMBDA_REASON = "Low-control preference allows Lambda to handle the heavy lifting."
OPS_LAMBDA_REASON = "Lambda removes the need to manage OS patches or networking layers."
OPS_NEUTRAL_REASON = "EC2 requires dedicated DevOps resources but offers more visibility."


def _row(feature: str, framework_key: str, winner: Winner, reason: str) -> ComparisonRow:
    options = COMPARISON_FRAMEWORK[framework_key]
    return ComparisonRow(
        feature=feature,
        lambda_detail=options.lambda_detail,
        ec2_detail=options.ec2_detail,
        winner=winner,
        reason=reason,
    )


def _cost_efficiency(constraints: ConstraintSet) -> ComparisonRow:
    if constraints.traffic in ("low", "unpredictable"):
        return _row(COST_EFFICIENCY, "cost_model", "lambda", COST_LAMBDA_REASON)
    return _row(COST_EFFICIENCY, "cost_model", "ec2", COST_EC2_REASON)


def _scalability_speed(constraints: ConstraintSet) -> ComparisonRow:
    if constraints.scalability == "automatic":
        return _row(SCALABILITY_SPEED, "scalability", "lambda", SCALE_LAMBDA_REASON)
    return _row(SCALABILITY_SPEED, "scalability", "ec2", SCALE_EC2_REASON)


def _infra_control(constraints: ConstraintSet) -> ComparisonRow:
    if constraints.control == "high":
        return _row(INFRA_CONTROL, "infrastructure_control", "ec2", CONTROL_EC2_REASON)
    return _row(INFRA_CONTROL, "infrastructure_control", "lambda", CONTROL_LAMBDA_REASON)


def _operational_overhead(constraints: ConstraintSet) -> ComparisonRow:
    # EC2 never wins here; low dev-speed priority only removes Lambda's edge.
    if constraints.dev_speed == "high":
        return _row(OPERATIONAL_OVERHEAD, "operational_complexity", "lambda", OPS_LAMBDA_REASON)
    return _row(OPERATIONAL_OVERHEAD, "operational_complexity", "neutral", OPS_NEUTRAL_REASON)


_RULES = (_cost_efficiency, _scalability_speed, _infra_control, _operational_overhead)


def evaluate(constraints: ConstraintSet) -> list[ComparisonRow]:
    """Evaluate every feature axis, in ``FEATURE_ORDER``.

    Pure and total: the same constraints always give an equal list, and a
    fresh list is built on every call.
    """
    rows = [rule(constraints) for rule in _RULES]
    logger.debug(
        "Evaluated %s -> %s",
        constraints.model_dump(),
        [(r.feature, r.winner) for r in rows],
    )
    return rows


def build_decision(constraints: ConstraintSet, *, narrative: str = "") -> DecisionResult:
    """Compose the matrix, the static pros/cons, and an optional narrative."""
    return DecisionResult(
        constraints=constraints,
        comparison_table=evaluate(constraints),
        pros_cons=PROS_CONS,
        tradeoff_explanation=narrative,
    )
