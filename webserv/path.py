"""A POSIX path value with the decomposition rules the server relies on."""

from __future__ import annotations

import functools
import os
import re
from typing import Iterator, Union

_SLASHES = re.compile(r"/+")

PathLike = Union[str, "os.PathLike[str]", "Path"]


@functools.total_ordering
class Path:
    """An immutable path whose runs of slashes are collapsed to one."""

    __slots__ = ("_path",)

    def __init__(self, value: PathLike = "") -> None:
        if isinstance(value, Path):
            self._path: str = value._path
            return
        text = os.fspath(value)
        if not isinstance(text, str):
            raise TypeError(f"path must be text, not {type(text).__name__}")
        self._path = _SLASHES.sub("/", text)

    @classmethod
    def _raw(cls, text: str) -> Path:
        result = cls.__new__(cls)
        result._path = text
        return result

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Path({self._path!r})"

    def __fspath__(self) -> str:
        return self._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._path == other._path
        if isinstance(other, str):
            return self._path == Path(other)._path
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._path < other._path
        if isinstance(other, str):
            return self._path < Path(other)._path
        return NotImplemented

    def __truediv__(self, other: object) -> Path:
        if not isinstance(other, (str, Path, os.PathLike)):
            return NotImplemented
        right = Path(other)
        if right.is_absolute():
            return right
        return Path(self._path + "/" + right._path)

    def __rtruediv__(self, other: object) -> Path:
        if not isinstance(other, (str, os.PathLike)):
            return NotImplemented
        return Path(other) / self

    def __iter__(self) -> Iterator[Path]:
        """Yield the root (if any), each name, and an empty name for a trailing slash."""
        if not self._path:
            return
        body = self._path
        if body.startswith("/"):
            yield Path("/")
            body = body[1:]
            if not body:
                return
        for name in body.split("/"):
            yield Path(name)

    def empty(self) -> bool:
        return not self._path

    def is_absolute(self) -> bool:
        return self._path.startswith("/")

    def is_relative(self) -> bool:
        return not self.is_absolute()

    def root_directory(self) -> Path:
        return Path("/") if self.is_absolute() else Path()

    def root_path(self) -> Path:
        return self.root_directory()

    def relative_path(self) -> Path:
        if self.is_absolute():
            return Path(self._path[1:]) if len(self._path) > 1 else Path()
        return self

    def parent_path(self) -> Path:
        pos = self._path.rfind("/")
        if pos == -1:
            return Path()
        if pos == 0:
            return Path("/")
        return Path(self._path[:pos])

    def filename(self) -> Path:
        pos = self._path.rfind("/")
        if pos == -1:
            return self
        return Path(self._path[pos + 1:])

    def stem(self) -> Path:
        name = self._path[self._path.rfind("/") + 1:]
        if name in (".", ".."):
            return Path(name)
        dot = name.rfind(".")
        if dot < 1:
            return Path(name)
        return Path(name[:dot])

    def extension(self) -> Path:
        dot = self._path.rfind(".")
        if dot != -1 and self._path.rfind("/") + 1 != dot:
            return Path(self._path[dot:])
        return Path()

    def remove_filename(self) -> Path:
        """Return the path with everything after the last slash removed."""
        return Path._raw(self._path[: self._path.rfind("/") + 1])

    def replace_filename(self, replacement: PathLike) -> Path:
        return Path._raw(self.remove_filename()._path + Path(replacement)._path)

    def replace_extension(self, replacement: PathLike = "") -> Path:
        """Drop the text from the last dot on and append ``replacement``."""
        text = self._path
        dot = text.rfind(".")
        if dot != -1:
            text = text[:dot]
        new = Path(replacement)._path
        if not new:
            return Path._raw(text)
        if "." not in new:
            text += "."
        return Path._raw(text + new)

    def lexically_normal(self) -> Path:
        """Remove dot names and resolve name/.. pairs without touching the disk."""
        if not self._path:
            return Path()
        absolute = self.is_absolute()
        body = self._path[1:] if absolute else self._path
        parts = body.split("/") if body else []
        trailing = bool(parts) and parts[-1] in ("", ".", "..")
        names: list[str] = []
        for name in parts:
            if name in ("", "."):
                continue
            if name == "..":
                if names and names[-1] != "..":
                    names.pop()
                    continue
                if absolute:
                    continue
            names.append(name)
        if names and names[-1] == "..":
            trailing = False
        if not names:
            return Path("/") if absolute else Path(".")
        text = ("/" if absolute else "") + "/".join(names)
        if trailing:
            text += "/"
        return Path(text)


def paths_components_are_equal(one: PathLike, two: PathLike) -> tuple[bool, int]:
    """Compare two paths component by component.

    Return whether they are equal and how many leading components match;
    a trailing empty component that differs still counts as matching.
    """
    first = list(Path(one))
    second = list(Path(two))
    same = 0
    for index, (a, b) in enumerate(zip(first, second)):
        if a != b:
            if (a.empty() and index == len(first) - 1) or (
                b.empty() and index == len(second) - 1
            ):
                same += 1
            return False, same
        same += 1
    return len(first) == len(second), same