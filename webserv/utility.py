"""Small helpers shared by the server: files, strings, dates and addresses."""

from __future__ import annotations

import socket
from datetime import datetime, timezone
from typing import Any

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_DIGITS = frozenset("0123456789")


def write_content_to_file(path: Any, content: bytes) -> None:
    """Write ``content`` to ``path``, replacing any existing file."""
    with open(str(path), "wb") as file:
        file.write(content)


def get_file_content(path: Any) -> bytes:
    """Return the bytes of the file at ``path``, or empty bytes if it cannot be read."""
    try:
        with open(str(path), "rb") as file:
            return file.read()
    except OSError:
        return b""


def is_integer(s: str) -> bool:
    """Return True if ``s`` is non-empty and made only of ASCII digits."""
    return bool(s) and all(c in _DIGITS for c in s)


def get_date(now: datetime | None = None) -> str:
    """Format a time as an HTTP date, with the hour padded by a space."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return (
        f"{_DAYS[now.weekday()]}, {now.day:02d} {_MONTHS[now.month - 1]} {now.year} "
        f"{now.hour:2d}:{now.minute:02d}:{now.second:02d} GMT"
    )


def trim(s: str, whitespace: str = " \t") -> str:
    """Strip every character of ``whitespace`` from both ends of ``s``."""
    return s.strip(whitespace)


def split(s: str, delim: str) -> list[str]:
    """Split ``s`` on every ``delim``, keeping empty fields."""
    return s.split(delim)


def is_valid_ip_address(address: str) -> bool:
    """Return True if ``address`` is a dotted-quad IPv4 address."""
    try:
        socket.inet_pton(socket.AF_INET, address)
    except (OSError, ValueError):
        return False
    return True