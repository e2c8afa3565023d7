"""Unit tests for error handling middleware and the error catalog."""

import json
import logging
from unittest.mock import Mock

import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from icon_catalog.api.middleware.error_handler import (
    handle_generic_error,
    handle_icon_catalog_error,
    handle_validation_error,
)
from icon_catalog.utils.logger import JSONLogFormatter
from icon_catalog.core.errors import ERROR_CATALOG, get_error, is_retryable
from icon_catalog.core.exceptions import (
    IconCatalogError,
    IconDirectoryError,
    IconNotFoundError,
    RuleTableError,
    SynonymTableError,
    TableLoadError,
)


def _request(path: str = "/test", method: str = "GET") -> Mock:
    request = Mock(spec=Request)
    request.url.path = path
    request.method = method
    return request


class TestIconCatalogErrorHandler:
    """Test custom exception handling."""

    @pytest.mark.asyncio
    async def test_handle_icon_catalog_error(self):
        exc = IconDirectoryError("ICON_001", details={"path": "icons"}, http_status=404)

        response = await handle_icon_catalog_error(_request("/api/v1/icons/catalog"), exc)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 404
        content = json.loads(response.body.decode())
        assert content["error_code"] == "ICON_001"
        assert content["user_message"] == ERROR_CATALOG["ICON_001"]["user_message"]

    @pytest.mark.asyncio
    async def test_error_includes_all_fields(self):
        response = await handle_icon_catalog_error(_request(), IconNotFoundError("Lock"))

        content = json.loads(response.body.decode())
        assert response.status_code == 404
        for field in ("error_code", "message", "user_message", "suggestion", "retry_allowed"):
            assert field in content


class TestValidationErrorHandler:
    """Test validation error handling."""

    @pytest.mark.asyncio
    async def test_handle_validation_error(self):
        exc = RequestValidationError(
            errors=[
                {"loc": ("body", "identifiers"), "msg": "too short", "type": "value_error"},
                {"loc": ("path", "identifier"), "msg": "too long", "type": "value_error"},
            ]
        )

        response = await handle_validation_error(_request(method="POST"), exc)

        assert response.status_code == 400
        content = json.loads(response.body.decode())
        assert content["error_code"] == "VAL_001"
        assert "body.identifiers: too short" in content["message"]
        assert "path.identifier" in content["message"]


class TestGenericErrorHandler:
    """Test unexpected exception handling."""

    @pytest.mark.asyncio
    async def test_handle_generic_error_hides_details(self):
        response = await handle_generic_error(_request(), RuntimeError("secret internals"))

        assert response.status_code == 500
        content = json.loads(response.body.decode())
        assert content["error_code"] == "SYS_001"
        assert "secret internals" not in response.body.decode()


class TestExceptions:
    """Test exception hierarchy."""

    def test_table_errors_have_fixed_codes(self):
        assert RuleTableError().error_code == "ICON_003"
        assert SynonymTableError({"path": "x"}).details == {"path": "x"}
        assert isinstance(RuleTableError(), TableLoadError)
        assert isinstance(SynonymTableError(), IconCatalogError)

    def test_base_defaults(self):
        exc = IconCatalogError("SYS_001")
        assert exc.details == {}
        assert exc.http_status == 500
        assert str(exc) == "SYS_001"


class TestErrorCatalog:
    """Test error catalog lookups."""

    def test_every_entry_is_complete(self):
        for code, entry in ERROR_CATALOG.items():
            assert entry["code"] == code
            assert set(entry) == {"code", "message", "user_message", "suggestion", "retry_allowed"}

    def test_unknown_code(self):
        assert get_error("NOPE")["code"] == "UNKNOWN"
        assert is_retryable("NOPE") is True

    def test_icon_errors_not_retryable(self):
        assert is_retryable("ICON_001") is False


class TestJSONLogFormatter:
    """Test structured log formatting."""

    def test_format_includes_extra_fields(self):
        record = logging.LogRecord("icon_catalog", logging.INFO, __file__, 1, "Request completed", None, None)
        record.request_id = "abc"
        record.status_code = 200

        data = json.loads(JSONLogFormatter().format(record))

        assert data["message"] == "Request completed"
        assert data["level"] == "INFO"
        assert data["request_id"] == "abc"
        assert data["status_code"] == 200
        assert "duration_ms" not in data
