"""Parsing of raw HTTP requests and building of raw HTTP responses."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Union

_LEADING_INT = re.compile(rb"[ \t\n\v\f\r]*[+-]?\d+")

NOT_FOUND_BODY = "<html><body><h1>404 Not Found</h1></body></html>"


@dataclass
class HttpRequest:
    """The parts of an HTTP request that the game server looks at."""

    method: str = ""
    path: str = ""
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, str] = field(default_factory=dict)


def _read_line(data: bytes, pos: int) -> tuple[Optional[bytes], int]:
    if pos >= len(data):
        return None, pos
    end = data.find(b"\n", pos)
    if end == -1:
        return data[pos:], len(data)
    return data[pos:end], end + 1


def _content_length(value: str) -> int:
    match = _LEADING_INT.match(value.encode("utf-8"))
    if match is None:
        raise ValueError(f"invalid Content-Length: {value!r}")
    length = int(match.group())
    if length < 0:
        raise ValueError(f"negative Content-Length: {value!r}")
    return length


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def parse_http_request(raw: Union[bytes, str]) -> HttpRequest:
    """Parse the request line, headers and body of a raw request.

    Query parameters without ``=`` are ignored and values are not
    percent-decoded. The body is read only when a ``Content-Length``
    header is present; a malformed length raises ``ValueError``.
    """
    data = raw.encode("utf-8") if isinstance(raw, str) else bytes(raw)
    request = HttpRequest()

    line, pos = _read_line(data, 0)
    if line is not None:
        parts = _decode(line).split()
        request.method = parts[0] if parts else ""
        target = parts[1] if len(parts) > 1 else ""
        path, has_query, query = target.partition("?")
        request.path = path
        if has_query:
            for param in query.split("&"):
                key, has_value, value = param.partition("=")
                if has_value:
                    request.query_params[key] = value

    while True:
        line, pos = _read_line(data, pos)
        if line is None or line in (b"", b"\r"):
            break
        if line.endswith(b"\r"):
            line = line[:-1]
        key, colon, value = _decode(line).partition(":")
        if colon:
            request.headers[key] = value.lstrip(" ")

    if "Content-Length" in request.headers:
        length = _content_length(request.headers["Content-Length"])
        chunk = data[pos:pos + length].split(b"\0", 1)[0]
        request.body = _decode(chunk)

    return request


def _response(status: str, headers: list[tuple[str, str]], body: bytes) -> bytes:
    lines = [f"HTTP/1.1 {status}"]
    lines.extend(f"{name}: {value}" for name, value in headers)
    head = "\r\n".join(lines) + "\r\n\r\n"
    return head.encode("utf-8") + body


def json_response(body: str) -> bytes:
    """A ``200 OK`` response carrying JSON text, open to any origin."""
    payload = body.encode("utf-8")
    return _response(
        "200 OK",
        [
            ("Content-Type", "application/json"),
            ("Content-Length", str(len(payload))),
            ("Access-Control-Allow-Origin", "*"),
        ],
        payload,
    )


def content_response(content: Union[bytes, str], content_type: str) -> bytes:
    """A ``200 OK`` response carrying a file's content."""
    payload = content.encode("utf-8") if isinstance(content, str) else bytes(content)
    return _response(
        "200 OK",
        [("Content-Type", content_type), ("Content-Length", str(len(payload)))],
        payload,
    )


def not_found_response() -> bytes:
    """A ``404 Not Found`` response with a small HTML page."""
    payload = NOT_FOUND_BODY.encode("utf-8")
    return _response(
        "404 Not Found",
        [("Content-Type", "text/html"), ("Content-Length", str(len(payload)))],
        payload,
    )