"""Shared test fixtures for the Toolgate test suite."""

import logging

import pytest

from toolgate.core.models import Message, Role, ToolRequest
from toolgate.inspection.models import InspectionAction, InspectionResult


@pytest.fixture
def fetch_user_request():
    return ToolRequest(id="req_1", tool_name="fetch_user", arguments={"id": 123})


@pytest.fixture
def shell_request():
    return ToolRequest(id="req_2", tool_name="developer__shell", arguments={"command": "ls -la"})


@pytest.fixture
def batch(fetch_user_request, shell_request):
    return [fetch_user_request, shell_request]


@pytest.fixture
def conversation():
    return [
        Message(role=Role.USER, content="Look up user 123 and list the repo"),
        Message(role=Role.ASSISTANT, content="Fetching the user first."),
    ]


@pytest.fixture
def ok_results():
    return [
        InspectionResult(
            tool_request_id="req_1",
            action=InspectionAction.allow(),
            reason="looks safe",
            confidence=0.95,
            inspector_name="ok",
        ),
        InspectionResult(
            tool_request_id="req_2",
            action=InspectionAction.require_approval("double check"),
            reason="needs user confirmation",
            confidence=0.7,
            inspector_name="ok",
            finding_id="FND-123",
        ),
    ]


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def toolgate_records():
    """Capture records from the ``toolgate`` logger, which does not propagate."""
    logger = logging.getLogger("toolgate")
    handler = _ListHandler()
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler.records
    logger.removeHandler(handler)
    logger.setLevel(previous)
