"""Constraint models — the five user-selectable constraint axes."""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

Budget = Literal["low", "medium", "high"]
TrafficPattern = Literal["low", "steady", "unpredictable", "high"]
Scalability = Literal["manual", "automatic"]
Control = Literal["low", "medium", "high"]
DevSpeed = Literal["low", "high"]

ConstraintField = Literal["budget", "traffic", "scalability", "control", "dev_speed"]


class ConstraintSet(BaseModel):
    """The user's current answers on every constraint axis.

    Every field always holds exactly one value from its domain; anything
    else is rejected at construction.  Instances are immutable — the
    ``ConstraintStore`` swaps in a fresh one on each change.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    budget: Budget = "medium"  # collected but not read by any rule yet
    traffic: TrafficPattern = "steady"
    scalability: Scalability = "automatic"
    control: Control = "medium"
    dev_speed: DevSpeed = Field(default="high", alias="devSpeed")


# Ordered as presented to the user.
CONSTRAINT_DOMAINS: dict[str, tuple[str, ...]] = {
    "budget": get_args(Budget),
    "traffic": get_args(TrafficPattern),
    "scalability": get_args(Scalability),
    "control": get_args(Control),
    "dev_speed": get_args(DevSpeed),
}

CONSTRAINT_LABELS: dict[str, str] = {
    "budget": "Budget Availability",
    "traffic": "Traffic Pattern",
    "scalability": "Scalability Preference",
    "control": "Infrastructure Control",
    "dev_speed": "Dev Speed Priority",
}
