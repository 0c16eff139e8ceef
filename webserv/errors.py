"""Error values and the exception raised by filesystem operations."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any


@dataclass
class ErrorCode:
    """An operating-system error number; zero means no error."""

    value: int = 0

    def message(self) -> str:
        """Return the system's description of the error number."""
        return os.strerror(self.value)

    def clear(self) -> None:
        """Reset the code to 'no error'."""
        self.value = 0

    def __bool__(self) -> bool:
        return self.value != 0


class FilesystemError(RuntimeError):
    """Raised when a filesystem operation fails."""

    def __init__(
        self,
        what: str,
        path1: Any = None,
        path2: Any = None,
        code: ErrorCode | None = None,
    ) -> None:
        super().__init__(what)
        self.what = what
        self.path1 = path1
        self.path2 = path2
        self.code = code if code is not None else ErrorCode()