"""Raw ASGI tests for request size limit and request ID middleware."""

import json

from app.middleware import RequestIDMiddleware, RequestSizeLimitMiddleware
from app.middleware.request_id import sanitize_request_id
from app.shared.context import get_request_id


def _receiver(chunks: list[bytes]):
    messages = [
        {"type": "http.request", "body": c, "more_body": i < len(chunks) - 1}
        for i, c in enumerate(chunks)
    ]

    async def receive() -> dict:
        return messages.pop(0)

    return receive


async def _echo_app(scope, receive, send) -> None:
    body = b""
    while True:
        message = await receive()
        body += message.get("body", b"")
        if not message.get("more_body"):
            break
    await send({"type": "http.response.start", "status": 200, "headers": []})
    await send({"type": "http.response.body", "body": body})


async def _call(app, scope: dict, chunks: list[bytes]) -> list[dict]:
    sent: list[dict] = []

    async def send(message: dict) -> None:
        sent.append(message)

    await app(scope, _receiver(chunks), send)
    return sent


async def test_chunked_body_over_limit_is_rejected() -> None:
    app = RequestSizeLimitMiddleware(_echo_app, max_bytes=10)
    sent = await _call(app, {"type": "http", "headers": []}, [b"123456", b"789012"])

    assert sent[0]["status"] == 413
    body = json.loads(sent[1]["body"])
    assert body["error"] == "PAYLOAD_TOO_LARGE"
    assert body["details"]["max_bytes"] == 10


async def test_chunked_body_under_limit_is_replayed() -> None:
    app = RequestSizeLimitMiddleware(_echo_app, max_bytes=10)
    sent = await _call(app, {"type": "http", "headers": []}, [b"1234", b"5678"])

    assert sent[0]["status"] == 200
    assert sent[1]["body"] == b"12345678"


async def test_declared_length_over_limit_is_rejected() -> None:
    app = RequestSizeLimitMiddleware(_echo_app, max_bytes=10)
    scope = {"type": "http", "headers": [(b"content-length", b"11")]}
    sent = await _call(app, scope, [b""])
    assert sent[0]["status"] == 413


async def test_request_id_bound_during_request_and_cleared_after() -> None:
    seen: list[str | None] = []

    async def inner(scope, receive, send) -> None:
        seen.append(get_request_id())
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await send({"type": "http.response.body", "body": b""})

    app = RequestIDMiddleware(inner)
    sent = await _call(
        app, {"type": "http", "headers": [(b"x-request-id", b"req-42")]}, [b""]
    )

    assert seen == ["req-42"]
    assert (b"X-Request-ID", b"req-42") in sent[0]["headers"]
    assert get_request_id() is None


def test_sanitize_request_id() -> None:
    assert sanitize_request_id("abc_DEF-123") == "abc_DEF-123"
    assert sanitize_request_id("x" * 65) != "x" * 65
    assert sanitize_request_id(None)
