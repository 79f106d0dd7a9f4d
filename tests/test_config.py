"""Tests for governance settings and manager bootstrap."""

import logging

import pytest
from pydantic import ValidationError

from toolgate.config import GovernanceSettings, build_manager
from toolgate.core.models import GovernanceMode, ToolRequest
from toolgate.exceptions import ConfigurationError
from toolgate.inspection.base import ToolInspector
from toolgate.inspection.repetition import DEFAULT_MAX_REPETITIONS, RepetitionInspector
from toolgate.logging import ToolgateFormatter, configure_logging


class NamedInspector(ToolInspector):
    def __init__(self, name: str):
        self.name = name

    async def inspect(self, tool_requests, messages, mode):
        return []


class TestGovernanceSettings:
    def test_defaults(self):
        settings = GovernanceSettings()
        assert settings.max_repetitions == DEFAULT_MAX_REPETITIONS
        assert settings.mode == GovernanceMode.APPROVE
        assert settings.json_logs is False

    def test_rejects_zero_repetitions(self):
        with pytest.raises(ValidationError):
            GovernanceSettings(max_repetitions=0)

    def test_from_env(self):
        settings = GovernanceSettings.from_env(environ={
            "TOOLGATE_MAX_REPETITIONS": "3",
            "TOOLGATE_MODE": "Smart_Approve",
            "TOOLGATE_LOG_LEVEL": "debug",
            "TOOLGATE_JSON_LOGS": "yes",
        })
        assert settings.max_repetitions == 3
        assert settings.mode == GovernanceMode.SMART_APPROVE
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True

    def test_from_env_empty_uses_defaults(self):
        assert GovernanceSettings.from_env(environ={}) == GovernanceSettings()

    def test_from_env_custom_prefix(self):
        settings = GovernanceSettings.from_env(prefix="AGENT_", environ={"AGENT_MAX_REPETITIONS": "8"})
        assert settings.max_repetitions == 8

    def test_from_env_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("TOOLGATE_MODE", "auto")
        assert GovernanceSettings.from_env().mode == GovernanceMode.AUTO

    @pytest.mark.parametrize(
        "key, value",
        [
            ("TOOLGATE_MAX_REPETITIONS", "many"),
            ("TOOLGATE_MAX_REPETITIONS", "0"),
            ("TOOLGATE_MODE", "yolo"),
            ("TOOLGATE_JSON_LOGS", "maybe"),
            ("TOOLGATE_LOG_LEVEL", "chatty"),
            ("TOOLGATE_LOG_LEVEL", "BASIC_FORMAT"),
        ],
    )
    def test_from_env_invalid(self, key, value):
        with pytest.raises(ConfigurationError) as exc_info:
            GovernanceSettings.from_env(environ={key: value})
        assert exc_info.value.setting == key

    def test_log_level_normalised(self):
        assert GovernanceSettings(log_level=" warning ").log_level == "WARNING"

    @pytest.mark.parametrize("level", ["chatty", "BASIC_FORMAT", 10])
    def test_rejects_unknown_log_level(self, level):
        with pytest.raises(ValidationError):
            GovernanceSettings(log_level=level)

    def test_apply_logging(self):
        GovernanceSettings(log_level="WARNING", json_logs=True).apply_logging()
        logger = logging.getLogger("toolgate")
        try:
            assert logger.level == logging.WARNING
            assert isinstance(logger.handlers[0].formatter, ToolgateFormatter)
        finally:
            configure_logging()


class TestBuildManager:
    def test_repetition_first(self):
        manager = build_manager(extra_inspectors=[NamedInspector("security"), NamedInspector("permission")])
        assert manager.inspector_names() == ["repetition", "security", "permission"]

    def test_threshold_from_settings(self):
        manager = build_manager(GovernanceSettings(max_repetitions=2))
        assert manager.get_inspector(RepetitionInspector).max_repetitions == 2

    def test_each_manager_gets_fresh_state(self):
        first = build_manager()
        second = build_manager()
        assert first.get_inspector(RepetitionInspector) is not second.get_inspector(RepetitionInspector)

    @pytest.mark.asyncio
    async def test_end_to_end_fetch_user_scenario(self):
        manager = build_manager(GovernanceSettings(max_repetitions=2))
        outcomes = []
        for i, user_id in enumerate([123, 123, 123, 456, 456, 456]):
            request = ToolRequest(id=f"r{i}", tool_name="fetch_user", arguments={"id": user_id})
            results = await manager.inspect_tools([request], [], GovernanceMode.APPROVE)
            outcomes.append(results[0].action.is_allow)
        assert outcomes == [True, True, False, True, True, False]
