"""HTTP responses, content types, HTTP errors and canned error responses."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Optional

SERVER_NAME = "beauty"


class ContentType(str, enum.Enum):
    """Common values for the Content-Type header."""

    TEXT_PLAIN = "text/plain"
    TEXT_HTML = "text/html"
    APPLICATION_JSON = "application/json"
    IMAGE_X_ICON = "image/x-icon"
    IMAGE_PNG = "image/png"


@dataclass
class Response:
    """An HTTP response with a string body."""

    status: HTTPStatus = HTTPStatus.OK
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    keep_alive: bool = True
    version: int = 11
    postponed: bool = False
    _on_done: Optional[Callable[[], None]] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.status = HTTPStatus(self.status)

    def set_header(self, name: str, value: str) -> None:
        """Set a header, replacing any existing one with the same name."""
        for existing in [k for k in self.headers if k.lower() == name.lower()]:
            del self.headers[existing]
        self.headers[name] = value

    def set_content_type(self, content_type: ContentType | str) -> None:
        value = content_type.value if isinstance(content_type, ContentType) else content_type
        self.set_header("Content-Type", value)

    def postpone(self) -> None:
        """Mark the response as completed later, through :meth:`done`."""
        self.postponed = True

    def on_done(self, callback: Callable[[], None]) -> None:
        self._on_done = callback

    def done(self) -> None:
        """Run the completion callback once."""
        callback, self._on_done = self._on_done, None
        if callback is not None:
            callback()

    def is_status_ok(self) -> bool:
        return self.status == HTTPStatus.OK


def _text_response(status: HTTPStatus, body: str, keep_alive: bool) -> Response:
    response = Response(status=status, keep_alive=keep_alive)
    response.set_header("Server", SERVER_NAME)
    response.set_content_type(ContentType.TEXT_PLAIN)
    response.body = body
    return response


class HttpError(Exception):
    """An error that maps to an HTTP status and optional message."""

    def __init__(self, status: HTTPStatus | int, message: str = "") -> None:
        super().__init__(message or str(int(status)))
        self.status = HTTPStatus(status)
        self.message = message

    def create_response(self, keep_alive: bool = True) -> Response:
        return _text_response(self.status, self.message, keep_alive)


def bad_request(message: str, keep_alive: bool = True) -> Response:
    return _text_response(HTTPStatus.BAD_REQUEST, message, keep_alive)


def not_found(method: str, target: str, keep_alive: bool = True) -> Response:
    body = f"The resource [{method}] '{target}' was not found."
    return _text_response(HTTPStatus.NOT_FOUND, body, keep_alive)


def server_error(message: str, keep_alive: bool = True) -> Response:
    body = f"An error occurred: '{message}'"
    return _text_response(HTTPStatus.INTERNAL_SERVER_ERROR, body, keep_alive)