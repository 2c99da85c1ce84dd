import json
from wsgiref.util import setup_testing_defaults

import pytest

from problemdetails_api.errors import ApiProblemDetails, problem
from problemdetails_api.wsgi import Route, handle_errors


class RouteError(ApiProblemDetails):
    pass


@problem(404)
class PlainError(RouteError):
    pass


@problem(422, ty="https://example.com/probs/out-of-credit")
class ErrorWithType(RouteError):
    pass


@problem(401, title="Something went wrong")
class ErrorWithTitle(RouteError):
    pass


@problem(403, detail="This request has failed due to some reason")
class ErrorWithDetail(RouteError):
    pass


def plain_error(environ):
    raise PlainError()


def error_with_type(environ):
    raise ErrorWithType()


def error_with_title(environ):
    raise ErrorWithTitle()


def error_with_detail(environ):
    raise ErrorWithDetail(42)


def _get(app, path="/"):
    environ = {"PATH_INFO": path, "REQUEST_METHOD": "GET"}
    setup_testing_defaults(environ)
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(app(environ, start_response))
    return captured["status"], captured["headers"], body


def test_responds_with_the_correct_code():
    status, _, _ = _get(Route().at("/", plain_error))
    assert status == "404 Not Found"


def test_responds_with_content_type_problem_json():
    _, headers, _ = _get(Route().at("/", plain_error))
    assert headers["Content-Type"] == "application/problem+json"


def test_about_blank_if_no_type_is_provided():
    _, _, body = _get(Route().at("/", plain_error))
    assert json.loads(body) == {"status": 404, "type": "about:blank"}


def test_type_if_provided():
    _, _, body = _get(Route().at("/", error_with_type))
    assert json.loads(body) == {
        "status": 422,
        "type": "https://example.com/probs/out-of-credit",
    }


def test_title_if_provided():
    status, _, body = _get(Route().at("/", error_with_title))
    assert status.startswith("401")
    assert json.loads(body) == {
        "status": 401,
        "title": "Something went wrong",
        "type": "about:blank",
    }


def test_detail_if_provided():
    _, _, body = _get(Route().at("/", error_with_detail))
    assert json.loads(body) == {
        "detail": "This request has failed due to some reason",
        "status": 403,
        "type": "about:blank",
    }


def test_content_length_matches_body():
    _, headers, body = _get(Route().at("/", error_with_detail))
    assert headers["Content-Length"] == str(len(body))


def test_unknown_path_is_not_found_with_empty_body():
    status, headers, body = _get(Route().at("/", plain_error), "/missing")
    assert status == "404 Not Found"
    assert body == b""
    assert "Content-Type" not in headers


@pytest.mark.parametrize(
    ("result", "content_type", "body"),
    [
        ("Hello", "text/plain; charset=utf-8", b"Hello"),
        (b"\x00\x01", "application/octet-stream", b"\x00\x01"),
        ({"a": 1}, "application/json; charset=utf-8", b'{"a": 1}'),
    ],
)
def test_successful_results_are_encoded(result, content_type, body):
    status, headers, got = _get(Route().at("/ok", lambda environ: result), "/ok")
    assert status == "200 OK"
    assert headers["Content-Type"] == content_type
    assert got == body


def test_handle_errors_returns_problem_response():
    response = handle_errors(error_with_title)({})
    assert response.status == 401
    assert response.json()["title"] == "Something went wrong"


def test_handle_errors_passes_other_results_through():
    assert handle_errors(lambda environ: "fine")({}) == "fine"


def test_handle_errors_leaves_other_exceptions():
    def broken(environ):
        raise KeyError("x")

    with pytest.raises(KeyError):
        handle_errors(broken)({})


def test_at_rejects_relative_path():
    with pytest.raises(ValueError):
        Route().at("relative", plain_error)