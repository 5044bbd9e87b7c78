import httpx

from outbound import Body, Headers, Request, bound_request_id


def _render(request: Request) -> httpx.Headers:
    return Headers.build(request, Body.build(request))


def test_defaults_for_bodyless_request() -> None:
    headers = _render(Request.create("https://api.example.test").with_type("get"))

    assert list(headers.items()) == [("accept", "application/json")]


def test_declared_headers_come_first_and_win() -> None:
    request = (
        Request.create("https://api.example.test")
        .with_headers({"Accept": "text/csv", "Content-Type": "application/vnd.api+json"})
        .with_body({"a": 1})
    )

    headers = _render(request)

    assert headers["accept"] == "text/csv"
    assert headers["content-type"] == "application/vnd.api+json"


def test_multipart_content_type_overrides_declared(file_handle) -> None:
    request = (
        Request.create("https://api.example.test")
        .with_headers({"content-type": "application/json"})
        .with_body({"doc": file_handle})
    )
    body = Body.build(request)

    headers = Headers.build(request, body)

    assert headers.get_list("content-type") == [body.content_type]


def test_request_id_from_context() -> None:
    request = Request.create("https://api.example.test")

    with bound_request_id("req-123"):
        headers = Headers.build(request)

    assert headers["x-request-id"] == "req-123"
    assert "x-request-id" not in Headers.build(request)


def test_request_id_from_configuration(configure) -> None:
    configure(request_id="proc-1", request_id_header="X-Correlation-Id")

    headers = Headers.build(Request.create("https://api.example.test"))

    assert headers["X-Correlation-Id"] == "proc-1"
    assert "x-request-id" not in headers


def test_declared_request_id_wins() -> None:
    request = Request.create("https://api.example.test").with_headers({"X-Request-Id": "mine"})

    with bound_request_id("req-123"):
        headers = Headers.build(request)

    assert headers.get_list("x-request-id") == ["mine"]


def test_user_agent_from_configuration(configure) -> None:
    configure(user_agent="outbound-tests/1.0")

    headers = Headers.build(Request.create("https://api.example.test"))

    assert headers["user-agent"] == "outbound-tests/1.0"


def test_declared_values_are_coerced_to_text() -> None:
    request = (
        Request.create("https://api.example.test")
        .with_headers({"X-Count": 5, "X-Flag": True, 7: "seven"})
        .with_type("get")
    )

    _, _, headers = request.params()

    assert headers["x-count"] == "5"
    assert headers["x-flag"] == "true"
    assert headers["7"] == "seven"
