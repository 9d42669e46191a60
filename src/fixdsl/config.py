"""Process-wide settings for folds and structural comparison."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100_000


class FoldSettings(BaseSettings, frozen=True):
    """Guards applied while walking a tree, overridable via FIXDSL_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="FIXDSL_",
        case_sensitive=False,
        extra="ignore",
    )

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        gt=0,
        description="Deepest ancestor path accepted before DepthLimitError",
    )
    detect_cycles: bool = Field(
        default=True,
        description="Track ancestor identities and raise CyclicTreeError",
    )


_settings: FoldSettings | None = None


def get_settings() -> FoldSettings:
    """Return the process default settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = FoldSettings()
    return _settings


def configure(**overrides: Any) -> FoldSettings:
    """Replace fields of the process default settings."""
    global _settings
    if unknown := set(overrides) - set(FoldSettings.model_fields):
        raise TypeError(f"Unknown fold settings: {', '.join(sorted(unknown))}")
    # model_copy skips validation; rebuild so overrides are checked
    _settings = FoldSettings(**{**get_settings().model_dump(), **overrides})
    logger.debug("Fold settings replaced: %s", _settings)
    return _settings


def reset_settings() -> None:
    """Drop the cached defaults so the next lookup re-reads the environment."""
    global _settings
    _settings = None
