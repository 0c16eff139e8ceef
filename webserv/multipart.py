"""Request framing checks and multipart/form-data body parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from webserv.message import Request
from webserv.path import Path
from webserv.status import Status
from webserv.utility import trim

IAC = 0xFF
_CRLF = b"\r\n"


class MultipartError(ValueError):
    """Raised when a multipart body is malformed; carries the status to answer with."""

    def __init__(self, status: Status, message: str = "") -> None:
        super().__init__(message or status.definition())
        self.status = status


@dataclass
class MultipartPart:
    """One part of a multipart body: its headers and its raw content."""

    headers: dict[str, str] = field(default_factory=dict)
    content: bytes = b""

    def filename(self) -> str:
        """Return the base name given by filename= in Content-Disposition, or ''."""
        disposition = self.headers.get("Content-Disposition")
        if disposition is None:
            return ""
        pos = disposition.find("filename=")
        if pos == -1:
            return ""
        pos += len("filename=")
        if pos >= len(disposition):
            raise ValueError("filename= has no value")
        quoted = disposition[pos] == '"'
        if quoted:
            pos += 1
        chars = []
        for ch in disposition[pos:]:
            if (quoted and ch == '"') or ch in " \t":
                break
            chars.append(ch)
        return str(Path("".join(chars)).filename())


def has_two_consecutive_crnl(buffer: bytes) -> tuple[bool, bool]:
    """Look for the blank line ending a header block.

    Return (found, end_of_input); an IAC byte met before the blank line
    signals end of input.
    """
    data = bytes(buffer)
    blank = data.find(b"\r\n\r\n")
    iac = data.find(bytes([IAC]))
    if blank != -1 and (iac == -1 or blank < iac):
        return True, False
    return False, iac != -1


def _bad(message: str) -> MultipartError:
    return MultipartError(Status(400), message)


def _parse(data: bytes, length: int, boundary: bytes) -> list[MultipartPart]:
    parts: list[MultipartPart] = []
    size = len(boundary)
    i = 0
    while i + size + 6 <= length:
        if data[i:i + 2] != b"--" or data[i + 2:i + 2 + size] != boundary:
            raise _bad("expected a boundary")
        i += size + 2
        if data[i] == ord("-") and data[i + 1] == ord("-"):
            if data[i + 2] != ord("\r") or data[i + 3] != ord("\n"):
                raise _bad("closing boundary not followed by CRLF")
            i += 4
            break
        if not (data[i] == ord("\r") and data[i + 1] == ord("\n")):
            raise _bad("boundary not followed by CRLF")
        i += 2

        headers: dict[str, str] = {}
        name: list[str] = []
        value: list[str] = []
        in_name = True
        while True:
            if data[i] == ord("\r") and data[i + 1] == ord("\n"):
                i += 2
                if not name or not value:
                    break
                headers[trim("".join(name))] = trim("".join(value))
                name, value = [], []
                in_name = True
                continue
            ch = chr(data[i])
            if ch == ":":
                in_name = False
            elif in_name:
                name.append(ch)
            else:
                value.append(ch)
            i += 1

        start = i
        while i + size + 4 < length:
            if data[i:i + 4] == b"\r\n--" and data[i + 4:i + 4 + size] == boundary:
                i += 2
                break
            i += 1
        end = i - 2 if data[i - 2:i] == _CRLF and data[i:i + 2] == b"--" and i - 2 >= start else i
        parts.append(MultipartPart(headers, data[start:end]))
    if i != length:
        raise _bad("unexpected data after the last part")
    return parts


def parse_content_multipart(request: Request, boundary: str) -> list[MultipartPart]:
    """Split the request body into parts; raise MultipartError on malformed input."""
    length = request.content_length()
    data = bytes(request.content)
    try:
        return _parse(data, length, boundary.encode("latin-1"))
    except IndexError as err:
        raise _bad("truncated multipart body") from err