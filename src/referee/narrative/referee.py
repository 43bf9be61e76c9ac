"""Narrative collaborator — asks the LLM for the Referee's verdict."""

from __future__ import annotations

import logging
from typing import Protocol

from openai import OpenAIError

from referee.narrative.prompts import SYSTEM_PROMPT, build_analysis_prompt
from referee.schemas.constraints import ConstraintSet
from referee.shared.llm_client import MalformedResponseError

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_FALLBACK = "Unable to generate analysis at this time."
UNAVAILABLE_FALLBACK = (
    "The Referee is currently unavailable. Please check your constraints and try again."
)


class CompletionClient(Protocol):
    async def simple_completion(self, *, system: str, user_message: str) -> str: ...


class NarrativeReferee:
    """Requests a free-text trade-off analysis for a constraint set.

    Failures never reach the caller: a transport error or a malformed
    response yields ``UNAVAILABLE_FALLBACK``, an empty answer yields
    ``EMPTY_RESPONSE_FALLBACK``.
    """

    def __init__(self, client: CompletionClient) -> None:
        self.client = client

    async def request_analysis(self, constraints: ConstraintSet) -> str:
        prompt = build_analysis_prompt(constraints)
        try:
            text = await self.client.simple_completion(
                system=SYSTEM_PROMPT,
                user_message=prompt,
            )
        except (OpenAIError, MalformedResponseError, OSError) as exc:
            logger.error("Narrative request failed: %s", exc, exc_info=True)
            return UNAVAILABLE_FALLBACK

        text = text.strip()
        if not text:
            logger.warning("Narrative request returned an empty response")
            return EMPTY_RESPONSE_FALLBACK
        logger.debug("Narrative received (%d chars)", len(text))
        return text
