"""统一错误响应工具的单元测试."""

import pytest
from werkzeug.exceptions import RequestEntityTooLarge

from formbind.errors import FieldErrorKind, FormBindingError
from formbind.utils.response_utils import jsonify_unified_error, unified_error_response


@pytest.mark.unit
def test_unified_error_response_for_binding_error() -> None:
    error = FormBindingError(FieldErrorKind.VALUE_PARSING_ERROR, field="age", value="abc", detail="不是合法的十进制整数")

    payload, status = unified_error_response(error)

    assert status == 400
    assert payload["error_kind"] == "value_parsing_error"
    assert payload["field"] == "age"
    assert payload["message_key"] == "VALUE_PARSING_ERROR"
    assert payload["category"] == "validation"
    assert "age" in payload["message"]


@pytest.mark.unit
def test_unified_error_response_for_http_exception() -> None:
    payload, status = unified_error_response(RequestEntityTooLarge())

    assert status == 413
    assert payload["success"] is False
    assert "error_kind" not in payload


@pytest.mark.unit
def test_unified_error_response_status_override() -> None:
    error = FormBindingError(FieldErrorKind.UNSUPPORTED_TYPE, field="payload")

    payload, status = unified_error_response(error, status_code=422, extra={"hint": "x"})

    assert status == 422
    assert payload["extra"] == {"hint": "x"}
    assert payload["recoverable"] is False


@pytest.mark.unit
def test_jsonify_unified_error(app) -> None:
    with app.app_context():
        response, status = jsonify_unified_error(FormBindingError(FieldErrorKind.FIELD_REQUIRED, field="q"))

    assert status == 400
    assert response.get_json()["field"] == "q"
