"""HTTP messages: the shared header/content container, requests and responses."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from webserv.status import Status
from webserv.utility import get_date

_LEADING_NUMBER = re.compile(r"\s*([+-]?)(\d*)")
_SIZE_MODULUS = 2**64


def _parse_unsigned(text: str) -> int:
    """Read a leading base-10 unsigned number the way a C string conversion does."""
    match = _LEADING_NUMBER.match(text)
    if match is None or not match.group(2):
        return 0
    number = int(match.group(2))
    if match.group(1) == "-":
        number = (-number) % _SIZE_MODULUS
    return number


@dataclass
class Message:
    """Headers, a body and a protocol version."""

    headers: dict[str, str] = field(default_factory=dict)
    content: bytearray = field(default_factory=bytearray)
    version: str = ""

    def get_header(self, name: str) -> str:
        """Return the header's value, or an empty string if it is absent."""
        return self.headers.get(name, "")

    def del_header(self, name: str) -> None:
        """Remove the header if present."""
        self.headers.pop(name, None)

    def set_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    def content_length(self) -> int:
        """Return the numeric value of Content-Length, or 0."""
        value = self.headers.get("Content-Length")
        if value is None:
            return 0
        return _parse_unsigned(value)

    def set_content(self, content: bytes, content_type: str | None = None) -> None:
        """Replace the body and set Content-Length (and Content-Type if given)."""
        self.content = bytearray(content)
        self.set_header("Content-Length", str(len(self.content)))
        if content_type is not None:
            self.set_header("Content-Type", content_type)

    def empty(self) -> bool:
        return not self.headers and not self.content and not self.version

    def clear(self) -> None:
        self.headers.clear()
        self.content.clear()
        self.version = ""


@dataclass
class Request(Message):
    """A request: a message with a method and a target."""

    method: str = ""
    uri: str = ""

    def empty(self) -> bool:
        return super().empty() and not self.method and not self.uri

    def clear(self) -> None:
        super().clear()
        self.method = ""
        self.uri = ""


@dataclass(init=False)
class Response(Message):
    """A response, created with the server's default headers."""

    status: Status = field(default_factory=Status)

    def __init__(self) -> None:
        super().__init__()
        self.status = Status(0)
        self.version = "HTTP/1.1"
        self.set_header("Server", "Webserv/1.0")
        self.set_header("Date", get_date())
        self.set_header("Connection", "keep-alive")

    def empty(self) -> bool:
        return super().empty() and self.status == Status(0)

    def clear(self) -> None:
        """Drop headers, body and version; the status is kept."""
        super().clear()