"""Tests for the error hierarchy and the error-to-status table."""

import pytest

from sift.errors import (
    BadGateway,
    ConfigurationError,
    HandlerFailure,
    HTTPError,
    NotFound,
    PatternError,
    SiftError,
)
from sift.server.errors import error_message, error_response, status_for


class TestHierarchy:
    def test_all_inherit_from_base(self) -> None:
        for kind in (ConfigurationError, PatternError, HTTPError, NotFound, BadGateway):
            assert issubclass(kind, SiftError)

    def test_http_error_fields(self) -> None:
        err = HTTPError(status=418, detail="teapot")
        assert err.status == 418
        assert err.detail == "teapot"
        assert str(err) == "418: teapot"

    def test_http_error_without_detail(self) -> None:
        assert str(HTTPError(status=409)) == "409"

    def test_subclass_defaults(self) -> None:
        assert NotFound().status == 404
        assert NotFound().detail == "Not Found"
        assert HandlerFailure().status == 500
        assert BadGateway().status == 502

    def test_can_be_raised(self) -> None:
        with pytest.raises(HTTPError) as exc_info:
            raise NotFound("no such user")
        assert exc_info.value.detail == "no such user"


class TestStatusFor:
    def test_not_found(self) -> None:
        assert status_for(NotFound()) == 404

    def test_file_not_found(self) -> None:
        assert status_for(FileNotFoundError("gone")) == 404

    def test_http_error_own_status(self) -> None:
        assert status_for(HTTPError(status=403)) == 403

    def test_anything_else(self) -> None:
        assert status_for(ValueError("boom")) == 500
        assert status_for(PermissionError("denied")) == 500


class TestErrorMessage:
    def test_client_error_uses_detail(self) -> None:
        assert error_message(NotFound("no such user"), 404, expose_messages=False) == "no such user"

    def test_client_error_without_detail(self) -> None:
        assert error_message(HTTPError(status=403), 403, expose_messages=False) == "Forbidden"

    def test_plain_exception_client_status(self) -> None:
        assert error_message(FileNotFoundError("x"), 404, expose_messages=False) == "Not Found"

    def test_server_error_hidden(self) -> None:
        msg = error_message(ValueError("secret path"), 500, expose_messages=False)
        assert msg == "Internal Server Error"

    def test_server_error_exposed(self) -> None:
        msg = error_message(ValueError("secret path"), 500, expose_messages=True)
        assert msg == "secret path"

    def test_exposed_empty_message_falls_back(self) -> None:
        assert error_message(ValueError(), 500, expose_messages=True) == "Internal Server Error"

    def test_exposed_http_error_uses_detail(self) -> None:
        msg = error_message(BadGateway("upstream down"), 502, expose_messages=True)
        assert msg == "upstream down"


class TestErrorResponse:
    def test_not_found_body(self) -> None:
        response = error_response(NotFound())
        assert response.status == 404
        assert response.content_type == "application/json; charset=utf-8"
        assert response.text == '{"error":"Not Found"}\n'

    def test_unknown_error_body(self) -> None:
        response = error_response(RuntimeError("kaboom"))
        assert response.status == 500
        assert response.json() == {"error": "Internal Server Error"}
