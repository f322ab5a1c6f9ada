"""
Unit Tests für Error Handler
"""
import json

import pytest
import requests

from utils.error_handler import (
    ErrorHandler,
    ErrorType,
    FamilyNameValidationError,
    FamilyNamesLoadError,
    FontError,
    FontRequestInFlightError,
    FontResolutionError,
    MalformedQueryError,
)


@pytest.mark.unit
class TestFontErrors:
    """Tests für die Exception-Hierarchie"""

    def test_validation_error_keeps_name(self):
        error = FamilyNameValidationError("Comic Sans")
        assert error.family_name == "Comic Sans"
        assert error.error_type == ErrorType.VALIDATION
        assert "Comic Sans" in str(error)

    def test_resolution_error_keeps_reason(self):
        error = FontResolutionError(3, context={"query": "Roboto"})
        assert error.reason == 3
        assert error.error_type == ErrorType.RESOLUTION
        assert error.context == {"query": "Roboto"}
        assert "3" in str(error)

    def test_in_flight_error_default_message(self):
        error = FontRequestInFlightError()
        assert error.error_type == ErrorType.CONTRACT_VIOLATION
        assert "in flight" in str(error)

    @pytest.mark.parametrize("error", [
        MalformedQueryError("bad"),
        FamilyNamesLoadError("missing"),
        FontRequestInFlightError(),
    ])
    def test_all_are_font_errors(self, error):
        assert isinstance(error, FontError)
        assert error.context == {}


@pytest.mark.unit
class TestErrorHandler:
    """Tests für Error Handler"""

    def test_classify_font_error_uses_its_type(self):
        handler = ErrorHandler()
        assert handler._classify_error(MalformedQueryError("x")) == ErrorType.VALIDATION

    def test_classify_network_error(self):
        handler = ErrorHandler()
        assert handler._classify_error(requests.ConnectionError("refused")) == ErrorType.NETWORK
        assert handler._classify_error(requests.Timeout("slow")) == ErrorType.NETWORK

    def test_classify_file_error(self):
        handler = ErrorHandler()
        assert handler._classify_error(FileNotFoundError("names.json")) == ErrorType.FILE_IO
        assert handler._classify_error(json.JSONDecodeError("bad", "", 0)) == ErrorType.FILE_IO

    def test_classify_unknown_error(self):
        handler = ErrorHandler()
        assert handler._classify_error(ValueError("odd")) == ErrorType.UNKNOWN

    def test_log_error_with_context(self):
        """Sollte keinen Error werfen"""
        handler = ErrorHandler()
        handler.log_error(RuntimeError("boom"), context={"query": "Roboto"})

    def test_safe_execute_success(self):
        handler = ErrorHandler()
        assert handler.safe_execute(lambda a, b: a + b, 1, 2) == 3

    def test_safe_execute_failure(self):
        handler = ErrorHandler()

        def failing_func():
            raise ValueError("Test error")

        assert handler.safe_execute(failing_func, default_return="default") == "default"

    def test_safe_execute_passes_kwargs(self):
        handler = ErrorHandler()

        def join(*parts, sep):
            return sep.join(parts)

        assert handler.safe_execute(join, "a", "b", sep="-") == "a-b"
