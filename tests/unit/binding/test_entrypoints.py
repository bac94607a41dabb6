"""bind_into / allocate_and_bind 入口的单元测试."""

from dataclasses import dataclass

import pytest
from flask import request
from werkzeug.datastructures import MultiDict
from werkzeug.exceptions import RequestEntityTooLarge

from formbind.binding.entrypoints import allocate_and_bind, bind_into
from formbind.binding.schema import form_field
from formbind.errors import (
    FieldErrorKind,
    FormBindingError,
    InvalidDestinationError,
    TypeParameterNotRecordError,
)


@dataclass
class SearchForm:
    q: str = form_field("q,required", default="")
    page: int = form_field("page,default=1", default=0)
    tags: list[str] = form_field("tag", default_factory=list)


@dataclass
class NotARecord:
    pass


@pytest.mark.unit
def test_bind_into_get_reads_query_string(app) -> None:
    with app.test_request_context("/?q=flask&page=3&tag=a&tag=b", method="GET"):
        form = SearchForm()
        result = bind_into(request, form)

    assert result is form
    assert form == SearchForm(q="flask", page=3, tags=["a", "b"])


@pytest.mark.unit
def test_bind_into_post_ignores_query_string(app) -> None:
    with app.test_request_context("/?q=from-query", method="POST", data={"page": "2"}):
        with pytest.raises(FormBindingError) as exc_info:
            bind_into(request, SearchForm())

    assert exc_info.value.kind is FieldErrorKind.FIELD_REQUIRED
    assert exc_info.value.field == "q"


@pytest.mark.unit
def test_bind_into_post_reads_body_form(app) -> None:
    data = MultiDict([("q", "body"), ("tag", "x"), ("tag", "y")])
    with app.test_request_context("/?page=9", method="POST", data=data):
        form = bind_into(request, SearchForm())

    assert form == SearchForm(q="body", page=1, tags=["x", "y"])


@pytest.mark.unit
def test_bind_into_custom_mutating_methods(app) -> None:
    with app.test_request_context("/?q=from-query", method="POST", data={"page": "2"}):
        form = bind_into(request, SearchForm(), mutating_methods=("PUT",))

    assert form == SearchForm(q="from-query", page=2, tags=[""])


@pytest.mark.unit
def test_bind_into_delete_merges_query_and_body(app) -> None:
    with app.test_request_context("/?q=query", method="DELETE", data={"page": "5"}):
        form = bind_into(request, SearchForm())

    assert (form.q, form.page) == ("query", 5)


@pytest.mark.unit
@pytest.mark.parametrize("destination", [SearchForm, 3, None, "text"])
def test_bind_into_rejects_non_record_destination(app, destination) -> None:
    with app.test_request_context("/?q=x", method="GET"):
        with pytest.raises(InvalidDestinationError) as exc_info:
            bind_into(request, destination)

    assert exc_info.value.kind is FieldErrorKind.INVALID_DESTINATION
    assert exc_info.value.status_code == 500


@pytest.mark.unit
def test_allocate_and_bind_returns_new_instance(app) -> None:
    # 缺失的序列字段按单个空串转换
    with app.test_request_context("/", method="PUT", data={"q": "new"}):
        form = allocate_and_bind(SearchForm, request)

    assert isinstance(form, SearchForm)
    assert form == SearchForm(q="new", page=1, tags=[""])


@pytest.mark.unit
def test_allocate_and_bind_accepts_empty_record(app) -> None:
    with app.test_request_context("/", method="GET"):
        assert allocate_and_bind(NotARecord, request) == NotARecord()


@pytest.mark.unit
@pytest.mark.parametrize("record_type", [int, str, SearchForm()])
def test_allocate_and_bind_rejects_non_record_type(app, record_type) -> None:
    with app.test_request_context("/", method="GET"):
        with pytest.raises(TypeParameterNotRecordError) as exc_info:
            allocate_and_bind(record_type, request)

    assert exc_info.value.kind is FieldErrorKind.TYPE_PARAMETER_NOT_RECORD


@pytest.mark.unit
def test_bind_into_propagates_request_entity_too_large(app) -> None:
    app.config["MAX_CONTENT_LENGTH"] = 16
    with app.test_request_context("/", method="POST", data={"q": "x" * 64}):
        with pytest.raises(RequestEntityTooLarge):
            bind_into(request, SearchForm())
