"""
Toolgate Custom Exceptions

Structured exception hierarchy for the governance core.
All Toolgate-specific exceptions inherit from ToolgateError.

Exception hierarchy:
    ToolgateError
    +-- InspectorError           (an inspector's invocation failed)
    +-- InspectionContractError  (result references a request not in the batch)
    +-- ConfigurationError       (invalid governance settings)
    +-- ArgumentEncodingError    (tool arguments are not valid JSON text)
"""

from __future__ import annotations


class ToolgateError(Exception):
    """Base exception for all Toolgate errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class InspectorError(ToolgateError):
    """Raised when a tool inspector fails to produce verdicts for a batch.

    The manager never lets this escape ``inspect_tools``; it is what gets
    reported through the failure channel.
    """

    def __init__(self, inspector_name: str, message: str, details: dict | None = None):
        super().__init__(
            f"Inspector '{inspector_name}' failed: {message}",
            details={"inspector_name": inspector_name, **(details or {})},
        )
        self.inspector_name = inspector_name


class InspectionContractError(ToolgateError):
    """Raised when inspection results do not match the batch they came from."""

    def __init__(self, unknown_ids: list[str], details: dict | None = None):
        super().__init__(
            f"Inspection results reference unknown tool requests: {', '.join(unknown_ids)}",
            details={"unknown_ids": unknown_ids, **(details or {})},
        )
        self.unknown_ids = unknown_ids


class ConfigurationError(ToolgateError):
    """Raised for invalid governance configuration."""

    def __init__(self, setting: str, message: str, details: dict | None = None):
        super().__init__(
            f"Invalid setting '{setting}': {message}",
            details={"setting": setting, **(details or {})},
        )
        self.setting = setting


class ArgumentEncodingError(ToolgateError):
    """Raised when a tool argument payload is not valid JSON text."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(f"Cannot encode tool arguments: {message}", details=details)
