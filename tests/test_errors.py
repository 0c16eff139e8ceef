import errno
import os

import pytest

from webserv.errors import ErrorCode, FilesystemError


def test_default_error_code_is_falsy():
    code = ErrorCode()
    assert code.value == 0
    assert not code


def test_error_code_with_value_is_truthy():
    code = ErrorCode(errno.ENOENT)
    assert code.value == errno.ENOENT
    assert bool(code) is True


def test_message_matches_system_description():
    code = ErrorCode(errno.EACCES)
    assert code.message() == os.strerror(errno.EACCES)


def test_clear_resets_value():
    code = ErrorCode(errno.ENAMETOOLONG)
    code.clear()
    assert code.value == 0
    assert not code


def test_value_can_be_reassigned():
    code = ErrorCode()
    code.value = errno.ENOENT
    assert code == ErrorCode(errno.ENOENT)


def test_filesystem_error_carries_details():
    code = ErrorCode(errno.ENOENT)
    err = FilesystemError("status failed", "/a", "/b", code)
    assert str(err) == "status failed"
    assert err.what == "status failed"
    assert err.path1 == "/a"
    assert err.path2 == "/b"
    assert err.code.value == errno.ENOENT


def test_filesystem_error_defaults():
    err = FilesystemError("boom")
    assert err.path1 is None
    assert err.path2 is None
    assert err.code.value == 0


def test_filesystem_error_is_raised_as_runtime_error():
    with pytest.raises(RuntimeError, match="refresh") as info:
        raise FilesystemError("refresh failed", "/x", code=ErrorCode(errno.ENOENT))
    assert isinstance(info.value, FilesystemError)
    assert info.value.path1 == "/x"
    assert info.value.path2 is None
    assert info.value.code.value == errno.ENOENT