"""YAML config loader — reads referee-config.yml into RefereeConfig."""

from pathlib import Path

import yaml

from referee.schemas.config import RefereeConfig


def _check_keys(mapping: dict, where: str) -> None:
    bad = [key for key in mapping if not isinstance(key, str)]
    if bad:
        raise ValueError(f"Config keys must be strings, got {bad[0]!r} in {where}")


def load_config(path: str | Path | None = None) -> RefereeConfig:
    """Load and validate a referee config file.

    With no path, returns the defaults.  Raises ``FileNotFoundError`` if
    the path doesn't exist and ``ValueError`` (``pydantic.ValidationError``
    included) if the file is not valid YAML or its content is invalid.
    """
    if path is None:
        return RefereeConfig()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if raw is None:
        return RefereeConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must be a YAML mapping, got {type(raw).__name__}")
    _check_keys(raw, "the top level")

    # Sections with every key commented out load as None; treat as defaults.
    for key in ("constraints", "narrative"):
        if key in raw and raw[key] is None:
            del raw[key]
        elif isinstance(raw.get(key), dict):
            _check_keys(raw[key], key)

    return RefereeConfig.model_validate(raw)
