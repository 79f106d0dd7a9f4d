"""Tests for Toolgate custom exceptions.

Covers the exception hierarchy and structured error information.
"""

from toolgate.exceptions import (
    ArgumentEncodingError,
    ConfigurationError,
    InspectionContractError,
    InspectorError,
    ToolgateError,
)


class TestToolgateError:
    def test_base_error(self):
        err = ToolgateError("something went wrong")
        assert str(err) == "something went wrong"
        assert err.details == {}

    def test_base_error_with_details(self):
        err = ToolgateError("failed", details={"key": "value"})
        assert err.details == {"key": "value"}

    def test_is_exception(self):
        assert issubclass(ToolgateError, Exception)


class TestInspectorError:
    def test_creation(self):
        err = InspectorError("security", "scanner unavailable")
        assert "security" in str(err)
        assert "scanner unavailable" in str(err)
        assert err.inspector_name == "security"

    def test_details_merge(self):
        err = InspectorError("security", "boom", details={"error_type": "TimeoutError"})
        assert err.details == {"inspector_name": "security", "error_type": "TimeoutError"}

    def test_inherits_toolgate_error(self):
        assert issubclass(InspectorError, ToolgateError)


class TestInspectionContractError:
    def test_creation(self):
        err = InspectionContractError(["ghost", "phantom"])
        assert "ghost" in str(err)
        assert err.unknown_ids == ["ghost", "phantom"]
        assert err.details["unknown_ids"] == ["ghost", "phantom"]

    def test_inherits_toolgate_error(self):
        assert issubclass(InspectionContractError, ToolgateError)


class TestConfigurationError:
    def test_creation(self):
        err = ConfigurationError("TOOLGATE_MODE", "unknown mode")
        assert "TOOLGATE_MODE" in str(err)
        assert err.setting == "TOOLGATE_MODE"

    def test_inherits_toolgate_error(self):
        assert issubclass(ConfigurationError, ToolgateError)


class TestArgumentEncodingError:
    def test_creation(self):
        err = ArgumentEncodingError("Expecting value", details={"tool_name": "fetch_user"})
        assert "Expecting value" in str(err)
        assert err.details == {"tool_name": "fetch_user"}

    def test_inherits_toolgate_error(self):
        assert issubclass(ArgumentEncodingError, ToolgateError)
