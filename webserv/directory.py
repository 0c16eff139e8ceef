"""Directory entries and iteration over the entries of a directory."""

from __future__ import annotations

import errno
import os
import stat as _stat
from typing import Iterator

from webserv import filesystem
from webserv.errors import ErrorCode, FilesystemError
from webserv.filesystem import FileStatus, FileType
from webserv.path import Path, PathLike


def _error(what: str, err: OSError, p: Path | None) -> FilesystemError:
    code = ErrorCode(err.errno or 0)
    return FilesystemError(f"{what}: {code.message()}", p, code=code)


class DirectoryEntry:
    """A path together with the file status cached when it was last refreshed."""

    def __init__(self, path: PathLike = "") -> None:
        self._path = Path(path)
        self._status = FileStatus()
        if not self._path.empty():
            self.refresh()

    @classmethod
    def _with_status(cls, path: Path, status: FileStatus) -> DirectoryEntry:
        entry = cls.__new__(cls)
        entry._path = path
        entry._status = status
        return entry

    @property
    def path(self) -> Path:
        return self._path

    def __fspath__(self) -> str:
        return str(self._path)

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"DirectoryEntry({str(self._path)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DirectoryEntry):
            return self._path == other._path
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._path)

    def assign(self, path: PathLike) -> None:
        """Point the entry at ``path`` and refresh its cached status."""
        self._path = Path(path)
        self.refresh()

    def refresh(self) -> None:
        """Reload the cached status; raise FilesystemError if the file is missing."""
        self._status = FileStatus()
        result = filesystem.status(self._path)
        if result.type is FileType.NOT_FOUND:
            self._status = result
            code = ErrorCode(errno.ENOENT)
            raise FilesystemError(
                f"directory_entry::refresh(): {code.message()}", self._path, code=code
            )
        self._status = result

    def _type(self) -> FileType:
        if filesystem.status_known(self._status):
            return self._status.type
        return filesystem.status(self._path).type

    def exists(self) -> bool:
        if not filesystem.status_known(self._status):
            return filesystem.exists(self._status)
        return filesystem.exists(self._path)

    def is_block_file(self) -> bool:
        return self._type() is FileType.BLOCK

    def is_character_file(self) -> bool:
        return self._type() is FileType.CHARACTER

    def is_directory(self) -> bool:
        return self._type() is FileType.DIRECTORY

    def is_fifo(self) -> bool:
        return self._type() is FileType.FIFO

    def is_other(self) -> bool:
        s = self._status
        if not filesystem.status_known(s):
            s = filesystem.status(self._path)
        return filesystem.is_other(s)

    def is_regular_file(self) -> bool:
        return self._type() is FileType.REGULAR

    def is_socket(self) -> bool:
        return self._type() is FileType.SOCKET

    def is_symlink(self) -> bool:
        return self._type() is FileType.SYMLINK

    def file_size(self) -> int:
        return filesystem.file_size(self._path)

    def hard_link_count(self) -> int:
        return filesystem.hard_link_count(self._path)

    def status(self) -> FileStatus:
        """Return the current status of the file on disk."""
        return filesystem.status(self._path)


def _type_of(entry: os.DirEntry) -> FileType:
    """Classify a scanned entry without following symbolic links."""
    try:
        if entry.is_symlink():
            return FileType.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return FileType.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return FileType.REGULAR
        mode = entry.stat(follow_symlinks=False).st_mode
    except OSError:
        return FileType.NONE
    for check, kind in (
        (_stat.S_ISBLK, FileType.BLOCK),
        (_stat.S_ISCHR, FileType.CHARACTER),
        (_stat.S_ISFIFO, FileType.FIFO),
        (_stat.S_ISSOCK, FileType.SOCKET),
    ):
        if check(mode):
            return kind
    return FileType.UNKNOWN


class DirectoryIterator:
    """Iterates over the entries of a directory, skipping '.' and '..'.

    Each entry carries the file type reported by the directory listing;
    an empty path gives an iterator with no entries.
    """

    def __init__(self, path: PathLike = "") -> None:
        self._base = Path(path)
        self._scan: Iterator[os.DirEntry] | None = None
        if self._base.empty():
            return
        try:
            self._scan = os.scandir(str(self._base))
        except OSError as err:
            base = self._base
            self._base = Path()
            raise _error("directory_iterator(path)", err, base) from err

    def __iter__(self) -> DirectoryIterator:
        return self

    def __next__(self) -> DirectoryEntry:
        if self._scan is None:
            raise StopIteration
        try:
            entry = next(self._scan)
        except StopIteration:
            self.close()
            raise
        except OSError as err:
            self.close()
            raise _error("directory_iterator::next()", err, self._base) from err
        return DirectoryEntry._with_status(
            self._base / entry.name, FileStatus(_type_of(entry))
        )

    def close(self) -> None:
        """Release the directory handle; further iteration yields nothing."""
        if self._scan is not None:
            close = getattr(self._scan, "close", None)
            if close is not None:
                close()
            self._scan = None

    def __enter__(self) -> DirectoryIterator:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()