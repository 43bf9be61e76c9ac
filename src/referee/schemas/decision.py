"""Pydantic models for the comparison matrix and the composed decision view."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from referee.schemas.constraints import ConstraintSet

Winner = Literal["lambda", "ec2", "neutral"]  # option A | option B | no preference


class OptionDescriptions(BaseModel):
    """Fixed descriptive text for one feature axis, one string per option."""

    model_config = ConfigDict(frozen=True)

    lambda_detail: str
    ec2_detail: str


class ComparisonRow(BaseModel):
    """One evaluated feature axis. Position in the table is significant."""

    model_config = ConfigDict(frozen=True)

    feature: str  # e.g. "Cost Efficiency"
    lambda_detail: str
    ec2_detail: str
    winner: Winner
    reason: str  # fixed justification for the branch taken


class OptionHighlights(BaseModel):
    """Static strengths shown beside the matrix for one option."""

    model_config = ConfigDict(frozen=True)

    title: str
    pros: tuple[str, ...] = ()
    choose_if: str = ""


class ProsCons(BaseModel):
    model_config = ConfigDict(frozen=True)

    lambda_option: OptionHighlights
    ec2_option: OptionHighlights


class DecisionResult(BaseModel):
    """Everything a renderer needs: the inputs, the matrix, and the verdict."""

    generated_at: str = Field(default_factory=lambda: datetime.now().isoformat())
    constraints: ConstraintSet
    comparison_table: list[ComparisonRow]
    pros_cons: ProsCons
    tradeoff_explanation: str = ""
