"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from referee.schemas.config import NarrativeSettings
from referee.shared.llm_client import LLMClient


def make_text_response(text: str | None):
    """Create a mock OpenAI chat completion carrying ``text``."""
    message = SimpleNamespace(content=text, tool_calls=None)
    choice = SimpleNamespace(message=message)
    return SimpleNamespace(choices=[choice])


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    cfg = tmp_path / "config.yml"
    cfg.write_text(
        """\
constraints:
  traffic: unpredictable
  control: high
output_directory: "{out}"
""".format(out=str(tmp_path / "output"))
    )
    return cfg


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Return an LLMClient with a mocked OpenAI SDK underneath."""
    client = LLMClient(NarrativeSettings(), api_key="test-key")
    client._client = AsyncMock()
    return client
