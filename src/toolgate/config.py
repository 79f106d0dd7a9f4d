"""
Toolgate Configuration

Governance settings for one agent session, read from the environment or
passed explicitly. Nothing here is process-global: callers build a
settings object and hand it to ``build_manager``.

Environment variables (prefix configurable):
    TOOLGATE_MAX_REPETITIONS  consecutive identical calls allowed (default 5)
    TOOLGATE_MODE             auto | approve | smart_approve | chat
    TOOLGATE_LOG_LEVEL        DEBUG | INFO | WARNING | ERROR | CRITICAL
    TOOLGATE_JSON_LOGS        1/true/yes for JSON log lines
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from pydantic import BaseModel, Field, field_validator

from toolgate.core.models import GovernanceMode
from toolgate.exceptions import ConfigurationError
from toolgate.inspection.base import ToolInspector
from toolgate.inspection.manager import ToolInspectionManager
from toolgate.inspection.repetition import DEFAULT_MAX_REPETITIONS, RepetitionInspector
from toolgate.logging import LOG_LEVELS, configure_logging

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class GovernanceSettings(BaseModel):
    """Per-session governance configuration."""
    max_repetitions: int = Field(default=DEFAULT_MAX_REPETITIONS, ge=1)
    mode: GovernanceMode = GovernanceMode.APPROVE
    log_level: str = "INFO"
    json_logs: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value):
        if isinstance(value, str) and value.strip().upper() in LOG_LEVELS:
            return value.strip().upper()
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    @classmethod
    def from_env(
        cls,
        prefix: str = "TOOLGATE_",
        environ: Mapping[str, str] | None = None,
    ) -> GovernanceSettings:
        env = os.environ if environ is None else environ
        values: dict = {}

        raw = env.get(f"{prefix}MAX_REPETITIONS")
        if raw is not None:
            try:
                values["max_repetitions"] = int(raw)
            except ValueError:
                raise ConfigurationError(f"{prefix}MAX_REPETITIONS", f"not an integer: {raw!r}") from None
            if values["max_repetitions"] < 1:
                raise ConfigurationError(f"{prefix}MAX_REPETITIONS", "must be at least 1")

        raw = env.get(f"{prefix}MODE")
        if raw is not None:
            try:
                values["mode"] = GovernanceMode(raw.strip().lower())
            except ValueError:
                allowed = ", ".join(m.value for m in GovernanceMode)
                raise ConfigurationError(f"{prefix}MODE", f"expected one of {allowed}, got {raw!r}") from None

        raw = env.get(f"{prefix}LOG_LEVEL")
        if raw is not None:
            level = raw.strip().upper()
            if level not in LOG_LEVELS:
                allowed = ", ".join(LOG_LEVELS)
                raise ConfigurationError(f"{prefix}LOG_LEVEL", f"expected one of {allowed}, got {raw!r}")
            values["log_level"] = level

        raw = env.get(f"{prefix}JSON_LOGS")
        if raw is not None:
            flag = raw.strip().lower()
            if flag not in _TRUE_VALUES | _FALSE_VALUES:
                raise ConfigurationError(f"{prefix}JSON_LOGS", f"not a boolean: {raw!r}")
            values["json_logs"] = flag in _TRUE_VALUES

        return cls(**values)

    def apply_logging(self) -> None:
        configure_logging(level=self.log_level, json_output=self.json_logs)


def build_manager(
    settings: GovernanceSettings | None = None,
    extra_inspectors: Sequence[ToolInspector] = (),
) -> ToolInspectionManager:
    """Create a manager for a new session.

    The repetition inspector is registered first, followed by
    ``extra_inspectors`` in the order given.
    """
    settings = settings or GovernanceSettings()
    manager = ToolInspectionManager()
    manager.add_inspector(RepetitionInspector(settings.max_repetitions))
    for inspector in extra_inspectors:
        manager.add_inspector(inspector)
    return manager
