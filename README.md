# problemdetails-api

`problemdetails_api` builds HTTP error responses in the *problem details*
format (`application/problem+json`, RFC 7807). It also describes those
responses as OpenAPI response objects. Each kind of error has these members:

| Name     | JSON field | Required | Meaning                                                      |
|----------|------------|----------|--------------------------------------------------------------|
| `status` | `status`   | yes      | HTTP status code, from 100 up to and including 999           |
| `title`  | `title`    | no       | Short, human-readable summary of the problem type            |
| `ty`     | `type`     | no       | URI that identifies the problem type, `about:blank` if unset |
| `detail` | `detail`   | no       | Human-readable explanation of the problem                    |

The package uses only the standard library.

## Installation

```
pip install .
```

## Declaring errors

`problemdetails_api.errors` provides the base class `ApiProblemDetails` and
the class decorator `problem(status, title=None, ty=None, detail=None)`.

A direct subclass of `ApiProblemDetails` defines a *family* of errors. The
subclasses of that family are its *variants*. Each variant gets its members
from `problem`:

```python
from problemdetails_api.errors import ApiProblemDetails, problem


class IndexError_(ApiProblemDetails):
    """Errors of the index endpoint."""


@problem(404)
class NotFound(IndexError_):
    """The resource does not exist"""


@problem(401, title="Something went wrong")
class Unauthorized(IndexError_):
    """The caller is not authorised"""
```

- `problem` raises `ValueError` when the status is not between 100 and 999
  inclusive. It raises `TypeError` when the status is not an `int`. It also
  raises `TypeError` when it is applied to anything other than a variant,
  for example to the family class itself.
- `error.as_response()` encodes a raised variant as a `ProblemResponse`. The
  body always holds `type` and `status`. It holds `title` and `detail` only
  when they were given:

  ```python
  >>> NotFound().as_response().json()
  {'type': 'about:blank', 'status': 404}
  ```

- `Family.meta()` can be called on the family or on any of its variants. It
  returns one OpenAPI response description per variant, in the order the
  variants were defined. Each description is a dict with these keys:
  - `description`: the variant's docstring, with each line stripped, or `""`
    if there is no docstring.
  - `status`: the status code.
  - `content`: the `application/problem+json` media type with an inline
    schema. The schema pins `type`, `status`, and `title` and `detail` when
    they are set, each to its one declared value.
  - `headers`: an empty dict.

  Both `as_response()` and `meta()` raise `TypeError` when they reach a
  variant that was never given a `problem` specification.

The response depends only on the variant's class. Arguments passed to the
exception do not appear in the body.

## Building blocks

`problemdetails_api.problem` holds the parts the error classes are built on:

- `ProblemSpec(status, title=None, ty="about:blank", detail=None)` is a frozen
  dataclass. It checks the status the same way `problem` does. It has these
  methods:
  - `body()` gives the JSON object.
  - `schema()` gives the inline schema. `status` is a `number`; the other
    members are `string`s, each with a one-item `enum`.
  - `response_meta(description)` gives the response description.
- `ProblemResponse(status, body, content_type="application/problem+json")`
  holds the encoded bytes. It has a `headers` property, which gives
  `Content-Type` and `Content-Length`, and a `json()` method, which decodes
  the body.
- `description_from_doc(doc)` turns a docstring into a description. It dedents
  the docstring, strips each line and drops blank lines at the ends. It returns
  `None` for an empty docstring.

## Serving errors over WSGI

`problemdetails_api.wsgi` provides a small router for exact paths:

- `Route().at(path, handler)` serves `handler` at `path` and returns the route,
  so calls can be chained. The path must start with `/`, or `ValueError` is
  raised. A `Route` is a WSGI application.
- Handlers take the WSGI environ. The route encodes what a handler returns:
  - `None`: an empty 200 response.
  - `str`: `text/plain; charset=utf-8`.
  - `bytes`: `application/octet-stream`.
  - A `ProblemResponse`: sent with its own status and content type.
  - Anything else: JSON.

  A path with no handler gets an empty 404.
- `handle_errors(handler)` wraps a handler. If the handler raises an
  `ApiProblemDetails`, the wrapper returns that error's response instead.
  `Route.at` applies it to every handler.

```python
from problemdetails_api.wsgi import Route


def index(environ):
    raise NotFound()


app = Route().at("/", index)  # GET / -> 404, application/problem+json
```

## Example application

`problemdetails_api.example` contains a "Hello World" service:

- `create_app()` builds the WSGI application. `GET /` answers `Hello World`,
  and `GET /openapi.json` serves the OpenAPI document.
- `openapi_document()` returns that document. Its `/` operation lists the 200
  response and the two problems of the `IndexError_` family: a 422 validation
  error and a 500 internal error.

Run the example server with:

```
problemdetails-api-example --host 127.0.0.1 --port 8080
```

Both options are optional; the values shown are the defaults.

## What it does not do

- There is no interactive documentation page. The example serves the OpenAPI
  document as JSON only.
- OpenAPI documents are not generated from routes. The example builds its
  document by hand from `IndexError_.meta()`.
- The router matches exact paths only and ignores the request method.

## Running the tests

```
pip install ".[test]"
pytest
```