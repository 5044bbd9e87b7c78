import json

import httpx

from outbound import Adapter, FileUpload, Request, to_httpx_request


def test_adapter_receives_rendered_tuple() -> None:
    calls = []

    def adapter(method, path, query, body, headers):
        calls.append((method, path, query, body, headers))
        return "ok"

    typed: Adapter = adapter
    request = Request.create("https://api.example.test/").with_path("ping").with_type("get")

    assert typed(*request.to_tuple()) == "ok"
    method, path, query, body, _ = calls[0]
    assert (method, path, query, body) == ("get", "https://api.example.test/ping", {}, None)


def test_to_httpx_request_with_query() -> None:
    request = Request.create("https://api.example.test").with_path("users").with_query(page=2).with_type("get")

    built = to_httpx_request(*request.to_tuple())

    assert isinstance(built, httpx.Request)
    assert built.method == "GET"
    assert str(built.url) == "https://api.example.test/users?page=2"
    assert built.content == b""


def test_to_httpx_request_with_json_body() -> None:
    request = Request.create("https://api.example.test").with_body({"x": 1}).with_type("delete")

    built = to_httpx_request(*request.to_tuple())

    assert built.method == "POST"
    assert json.loads(built.content) == {"x": 1, "_method": "delete"}
    assert built.headers["content-type"] == "application/json"


def test_to_httpx_request_with_multipart_body() -> None:
    upload = FileUpload(filename="a.bin", content=b"\x00\x01")
    request = Request.create("https://api.example.test").with_body({"file": upload}).with_type("post")

    method, path, query, body, headers = request.to_tuple()
    built = to_httpx_request(method, path, query, body, headers)

    assert built.headers["content-type"] == body.content_type
    assert b'filename="a.bin"' in built.content
    assert b"Content-Type: application/octet-stream" in built.content


def test_to_httpx_request_without_type_defaults_to_get() -> None:
    built = to_httpx_request(None, "https://api.example.test", {}, None, {})

    assert built.method == "GET"
