"""Configuration schema — validates referee-config.yml."""

from pydantic import BaseModel, Field

from referee.schemas.constraints import ConstraintSet


class NarrativeSettings(BaseModel):
    """Settings for the trade-off narrative request."""

    model: str = "gpt-4o"
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    top_p: float = Field(default=0.95, ge=0.0, le=1.0)
    max_tokens: int = Field(default=2048, gt=0)
    # Retries on rate limits / connection errors before falling back.
    # 0 means a failure is reported to the user straight away.
    max_retries: int = Field(default=0, ge=0)


class RefereeConfig(BaseModel):
    """Top-level configuration loaded from referee-config.yml.

    Every section is optional; an empty file yields the defaults.
    """

    # Starting answers for the session
    constraints: ConstraintSet = ConstraintSet()

    narrative: NarrativeSettings = NarrativeSettings()

    # Output
    output_directory: str = "./output"
