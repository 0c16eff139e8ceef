"""Queries on files: kind, permissions, size and the working directory."""

from __future__ import annotations

import errno
import os
import stat as _stat
from dataclasses import dataclass
from enum import Enum
from typing import NoReturn, Union

from webserv.errors import ErrorCode, FilesystemError
from webserv.path import Path, PathLike

PERMS_UNKNOWN = 0xFFFF


class FileType(Enum):
    NONE = 0
    NOT_FOUND = -1
    REGULAR = 1
    DIRECTORY = 2
    SYMLINK = 3
    BLOCK = 4
    CHARACTER = 5
    FIFO = 6
    SOCKET = 7
    UNKNOWN = 8


@dataclass
class FileStatus:
    """The kind of a file and its permission bits."""

    type: FileType = FileType.NONE
    permissions: int = PERMS_UNKNOWN


Target = Union[FileStatus, PathLike]


def _raise(what: str, err: OSError, p: PathLike | None = None) -> NoReturn:
    code = ErrorCode(err.errno or 0)
    path1 = Path(p) if p is not None else None
    raise FilesystemError(f"{what}: {code.message()}", path1, code=code) from err


def current_path() -> Path:
    try:
        return Path(os.getcwd())
    except OSError as err:
        _raise("current_path()", err)


def set_current_path(p: PathLike) -> None:
    try:
        os.chdir(os.fspath(Path(p)))
    except OSError as err:
        _raise(f'current_path("{Path(p)}")', err, p)


def absolute(p: PathLike) -> Path:
    return current_path() / Path(p)


def status_known(s: FileStatus) -> bool:
    return s.type is not FileType.NONE


def _type_from_mode(mode: int) -> FileType:
    checks = (
        (_stat.S_ISREG, FileType.REGULAR),
        (_stat.S_ISDIR, FileType.DIRECTORY),
        (_stat.S_ISCHR, FileType.CHARACTER),
        (_stat.S_ISBLK, FileType.BLOCK),
        (_stat.S_ISFIFO, FileType.FIFO),
        (_stat.S_ISLNK, FileType.SYMLINK),
        (_stat.S_ISSOCK, FileType.SOCKET),
    )
    for check, kind in checks:
        if check(mode):
            return kind
    return FileType.UNKNOWN


def _stat_of(p: PathLike, what: str) -> os.stat_result:
    try:
        return os.stat(os.fspath(Path(p)))
    except OSError as err:
        _raise(f'{what}("{Path(p)}")', err, p)


def status(p: PathLike) -> FileStatus:
    """Return the status of ``p``; a missing file gives a NOT_FOUND status."""
    try:
        st = os.stat(os.fspath(Path(p)))
    except OSError as err:
        if err.errno == errno.ENOENT:
            return FileStatus(FileType.NOT_FOUND)
        _raise(f'status("{Path(p)}")', err, p)
    return FileStatus(_type_from_mode(st.st_mode), st.st_mode & 0xFFF)


def _as_status(target: Target) -> FileStatus:
    return target if isinstance(target, FileStatus) else status(target)


def exists(target: Target) -> bool:
    s = _as_status(target)
    return status_known(s) and s.type is not FileType.NOT_FOUND


def is_block_file(target: Target) -> bool:
    return _as_status(target).type is FileType.BLOCK


def is_character_file(target: Target) -> bool:
    return _as_status(target).type is FileType.CHARACTER


def is_directory(target: Target) -> bool:
    return _as_status(target).type is FileType.DIRECTORY


def is_fifo(target: Target) -> bool:
    return _as_status(target).type is FileType.FIFO


def is_regular_file(target: Target) -> bool:
    return _as_status(target).type is FileType.REGULAR


def is_socket(target: Target) -> bool:
    return _as_status(target).type is FileType.SOCKET


def is_symlink(target: Target) -> bool:
    return _as_status(target).type is FileType.SYMLINK


def is_other(target: Target) -> bool:
    s = _as_status(target)
    return (
        exists(s)
        and not is_regular_file(s)
        and not is_directory(s)
        and not is_symlink(s)
    )


def is_empty(p: PathLike) -> bool:
    """Return True for a directory with no entries or a file of size zero."""
    if is_directory(p):
        try:
            with os.scandir(os.fspath(Path(p))) as entries:
                return next(iter(entries), None) is None
        except OSError as err:
            _raise(f'is_empty("{Path(p)}")', err, p)
    return file_size(p) == 0


def file_size(p: PathLike) -> int:
    return _stat_of(p, "file_size").st_size


def hard_link_count(p: PathLike) -> int:
    return _stat_of(p, "hard_link_count").st_nlink