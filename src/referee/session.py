"""Session state — the constraint store and the narrative in-flight flag.

All UI state lives on a ``RefereeSession`` the caller creates and passes
around; nothing here is module-global.
"""

from __future__ import annotations

import logging
from typing import Any

from referee.engine import build_decision, evaluate
from referee.narrative.referee import NarrativeReferee
from referee.schemas.constraints import (
    Budget,
    ConstraintSet,
    Control,
    DevSpeed,
    Scalability,
    TrafficPattern,
)
from referee.schemas.decision import ComparisonRow, DecisionResult

logger = logging.getLogger(__name__)


class AnalysisInFlightError(RuntimeError):
    """A narrative request was issued while another is still outstanding."""


class ConstraintStore:
    """Holds the session's current ConstraintSet.

    Each setter validates the new value and swaps in a fresh, immutable
    ConstraintSet.  Out-of-domain values raise ``pydantic.ValidationError``.
    """

    def __init__(self, initial: ConstraintSet | None = None) -> None:
        self._constraints = initial or ConstraintSet()

    def get(self) -> ConstraintSet:
        return self._constraints

    def set_budget(self, value: Budget) -> None:
        self._replace(budget=value)

    def set_traffic(self, value: TrafficPattern) -> None:
        self._replace(traffic=value)

    def set_scalability(self, value: Scalability) -> None:
        self._replace(scalability=value)

    def set_control(self, value: Control) -> None:
        self._replace(control=value)

    def set_dev_speed(self, value: DevSpeed) -> None:
        self._replace(dev_speed=value)

    def set(self, field: str, value: Any) -> None:
        """Route a change to the setter for ``field``."""
        match field:
            case "budget":
                self.set_budget(value)
            case "traffic":
                self.set_traffic(value)
            case "scalability":
                self.set_scalability(value)
            case "control":
                self.set_control(value)
            case "dev_speed" | "devSpeed":
                self.set_dev_speed(value)
            case _:
                raise ValueError(f"Unknown constraint field: {field!r}")

    def _replace(self, **changes: Any) -> None:
        data = self._constraints.model_dump()
        data.update(changes)
        self._constraints = ConstraintSet.model_validate(data)
        logger.debug("Constraints updated: %s", changes)


class RefereeSession:
    """One user's session: constraints, the last verdict, and the in-flight gate."""

    def __init__(self, referee: NarrativeReferee, store: ConstraintStore | None = None) -> None:
        self.referee = referee
        self.store = store or ConstraintStore()
        self.narrative: str | None = None
        self._in_flight = False

    @property
    def constraints(self) -> ConstraintSet:
        return self.store.get()

    @property
    def in_flight(self) -> bool:
        """True while a narrative request is outstanding (the trigger is disabled)."""
        return self._in_flight

    def comparison(self) -> list[ComparisonRow]:
        return evaluate(self.store.get())

    def decision(self) -> DecisionResult:
        return build_decision(self.store.get(), narrative=self.narrative or "")

    async def request_analysis(self) -> str:
        """Request the narrative for the current constraints and keep it.

        Raises ``AnalysisInFlightError`` if a request is already outstanding.
        """
        if self._in_flight:
            raise AnalysisInFlightError("A trade-off analysis is already in progress")
        self._in_flight = True
        try:
            self.narrative = await self.referee.request_analysis(self.store.get())
        finally:
            self._in_flight = False
        return self.narrative
