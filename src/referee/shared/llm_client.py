"""Async OpenAI API wrapper for single-shot text completions.

The narrative is the only outbound call the Referee makes, so this is a
plain request/response client.  Retries are off unless
``NarrativeSettings.max_retries`` asks for them.
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any

from openai import AsyncOpenAI, APIConnectionError, APITimeoutError, RateLimitError

from referee.schemas.config import NarrativeSettings

logger = logging.getLogger(__name__)

_RETRY_BASE_DELAY = 2  # seconds — first backoff step

# Errors worth another attempt; everything else goes straight to the caller.
_TRANSIENT_ERRORS = (RateLimitError, APIConnectionError, APITimeoutError)


class MalformedResponseError(ValueError):
    """The API answered, but not with a usable chat completion."""


def _message_text(response: Any) -> str:
    """Pull the assistant text out of a chat completion response."""
    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, TypeError) as exc:
        raise MalformedResponseError(f"Response has no message content: {exc}") from exc
    if content is not None and not isinstance(content, str):
        raise MalformedResponseError(
            f"Expected text content, got {type(content).__name__}"
        )
    return content or ""


class LLMClient:
    """Thin async wrapper around the OpenAI SDK.

    The SDK client is built on first use: ``AsyncOpenAI`` refuses to
    construct without an API key, and a missing key should fail the
    request, not the application start-up.
    """

    def __init__(
        self,
        settings: NarrativeSettings | None = None,
        api_key: str | None = None,
    ) -> None:
        self._settings = settings or NarrativeSettings()
        self._api_key = api_key
        self._client: AsyncOpenAI | None = None

    def _sdk(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key)
        return self._client

    async def _call_with_retry(self, **kwargs: Any) -> Any:
        """Call chat.completions.create, making ``max_retries + 1`` attempts.

        Rate limits and connection errors back off exponentially with ±25%
        jitter between attempts.
        """
        attempts = self._settings.max_retries + 1
        for attempt in range(attempts):
            try:
                return await self._sdk().chat.completions.create(**kwargs)
            except _TRANSIENT_ERRORS as exc:
                if attempt == attempts - 1:
                    raise
                backoff = _RETRY_BASE_DELAY * (2 ** attempt)
                delay = backoff + random.uniform(-0.25 * backoff, 0.25 * backoff)
                logger.warning(
                    "%s, retrying in %.1fs (attempt %d/%d): %s",
                    type(exc).__name__, delay, attempt + 1, attempts, exc,
                )
                await asyncio.sleep(delay)
        raise RuntimeError("unreachable: retry loop exited without a result")

    async def simple_completion(self, *, system: str, user_message: str) -> str:
        """Single request/response with no tools. Returns the raw text (may be empty)."""
        response = await self._call_with_retry(
            model=self._settings.model,
            max_tokens=self._settings.max_tokens,
            temperature=self._settings.temperature,
            top_p=self._settings.top_p,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user_message},
            ],
        )
        return _message_text(response)


# ======================================================================
# Dry-run mock client — zero API calls
# ======================================================================

_DRY_RUN_NARRATIVE = """\
## Referee Analysis (dry run)

### Why the constraints pull in different directions
- **Traffic shape** decides the cost model: idle time is free on Lambda and
  wasted on an always-on EC2 instance.
- **Control needs** decide the runtime: EC2 gives root access, Lambda gives
  a managed sandbox.

### The deadlock
A steady, heavy workload that also needs rapid delivery puts cost (EC2) and
operational overhead (Lambda) on opposite sides.

### Guidance
- Choose Lambda if traffic is spiky and the team wants zero server management.
- Choose EC2 if the load is sustained or you need OS-level customisation.
"""


class DryRunClient:
    """Drop-in replacement for LLMClient that makes zero API calls."""

    async def simple_completion(self, *, system: str, user_message: str) -> str:
        logger.info("[dry-run] Narrative request (%d chars)", len(user_message))
        return _DRY_RUN_NARRATIVE
