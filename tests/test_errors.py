# tests/test_errors.py

"""Unit tests for the error catalog

Tests the fixed code/message table, data pass-through and the
server/application error constructors.
"""

import pytest
from pydantic import ValidationError

from jsonrpc_core.core.config import settings
from jsonrpc_core.core.exceptions import InvalidErrorCodeError
from jsonrpc_core.models.jsonrpc import ErrorKind, ErrorObject
from jsonrpc_core.services.errors import (
    application_error,
    is_reserved_code,
    server_error,
    standard_error
)


EXPECTED_TABLE = [
    (ErrorKind.PARSE_ERROR, -32700, "Parse error"),
    (ErrorKind.INVALID_REQUEST, -32600, "Invalid Request"),
    (ErrorKind.METHOD_NOT_FOUND, -32601, "Method not found"),
    (ErrorKind.INVALID_PARAMS, -32602, "Invalid params"),
    (ErrorKind.INTERNAL_ERROR, -32603, "Internal error"),
]

SAMPLE_DATA = [
    None,
    0,
    "detail",
    [1, 2, 3],
    {"field": "name", "reason": "required"},
    {"nested": {"list": [None, True, 1.5]}},
]


class TestStandardError:
    """Test suite for standard_error"""

    @pytest.mark.parametrize("kind,code,message", EXPECTED_TABLE)
    @pytest.mark.parametrize("data", SAMPLE_DATA)
    def test_code_and_message_fixed_per_kind(self, kind, code, message, data):
        """Code and message never depend on data"""
        error = standard_error(kind, data)

        assert error.code == code
        assert error.message == message

    @pytest.mark.parametrize("kind", list(ErrorKind))
    @pytest.mark.parametrize("data", SAMPLE_DATA)
    def test_data_passed_through(self, kind, data):
        """Data is attached unchanged"""
        error = standard_error(kind, data)

        assert error.data == data

    def test_parse_error_without_data(self):
        """standard_error(ParseError, None) has no data"""
        error = standard_error(ErrorKind.PARSE_ERROR)

        assert error == ErrorObject(code=-32700, message="Parse error", data=None)
        assert error.data is None

    def test_returns_independent_values(self):
        """Each call builds its own error object"""
        first = standard_error(ErrorKind.INVALID_PARAMS, {"param": "a"})
        second = standard_error(ErrorKind.INVALID_PARAMS, {"param": "b"})

        assert first.data == {"param": "a"}
        assert second.data == {"param": "b"}

    def test_error_is_immutable(self):
        """Errors cannot be modified after construction"""
        error = standard_error(ErrorKind.INTERNAL_ERROR)

        with pytest.raises(ValidationError):
            error.code = 1

    @pytest.mark.parametrize("kind,code,message", EXPECTED_TABLE)
    def test_kind_properties_match_table(self, kind, code, message):
        """ErrorKind exposes the same code and message"""
        assert kind.code == code
        assert kind.message == message

    @pytest.mark.parametrize("kind,code,message", EXPECTED_TABLE)
    def test_kind_from_code(self, kind, code, message):
        """Reserved codes map back to their kind"""
        assert ErrorKind.from_code(code) is kind

    def test_kind_from_unknown_code(self):
        """Codes outside the table have no kind"""
        assert ErrorKind.from_code(-32000) is None
        assert ErrorKind.from_code(42) is None


class TestReservedRange:
    """Test suite for reserved range helpers"""

    @pytest.mark.parametrize("code", [-32768, -32700, -32603, -32099, -32000])
    def test_reserved_codes(self, code):
        assert is_reserved_code(code)

    @pytest.mark.parametrize("code", [-32769, -31999, -1, 0, 1, 32700])
    def test_unreserved_codes(self, code):
        assert not is_reserved_code(code)


class TestServerError:
    """Test suite for server_error"""

    def test_server_error_in_range(self):
        """Codes in -32099..-32000 are accepted"""
        error = server_error(-32000, "Server busy", {"retry_after": 5})

        assert error.code == -32000
        assert error.message == "Server busy"
        assert error.data == {"retry_after": 5}

    def test_server_error_lower_bound(self):
        assert server_error(-32099, "Shutting down").code == -32099

    @pytest.mark.parametrize("code", [-32100, -31999, -32700, 1])
    def test_server_error_out_of_range(self, code):
        """Codes outside the server range are rejected"""
        with pytest.raises(InvalidErrorCodeError) as exc_info:
            server_error(code, "Nope")

        assert exc_info.value.code == code


class TestApplicationError:
    """Test suite for application_error"""

    @pytest.fixture
    def unchecked(self, monkeypatch):
        """Disable reserved range validation"""
        monkeypatch.setattr(settings, "VALIDATE_ERROR_CODES", False)

    def test_application_error(self):
        """Codes outside the reserved range are accepted"""
        error = application_error(1001, "Quota exceeded", {"limit": 10})

        assert error.code == 1001
        assert error.message == "Quota exceeded"
        assert error.data == {"limit": 10}

    @pytest.mark.parametrize("code", [-32768, -32601, -32000])
    def test_reserved_code_rejected(self, code):
        """Reserved codes are rejected while validation is enabled"""
        with pytest.raises(InvalidErrorCodeError):
            application_error(code, "Clash")

    def test_reserved_code_allowed_when_unchecked(self, unchecked):
        """Any integer is accepted when validation is disabled"""
        error = application_error(-32601, "Custom not found")

        assert error.code == -32601
        assert error.message == "Custom not found"
