# webserv

Building blocks for a small HTTP/1.1 server. The package uses only the
standard library.

## Modules

- `webserv.status`: `Status` wraps any integer code. `definition()` and
  `str()` give the reason phrase, or `"Unknown code: N"` for codes it does
  not know. Named constants such as `Status.NOT_FOUND` and `Status.CREATED`
  are provided. `Status` compares with other `Status` values and with plain
  integers. The helpers `is_informational`, `is_successful`, `is_redirection`,
  `is_client_error`, `is_server_error` and `is_error` take a `Status` or an
  `int`.
- `webserv.message`: `Message` is a dataclass with `headers`, `content` and
  `version`. Its methods are `get_header`, `set_header`, `del_header`,
  `content_length`, `set_content`, `empty` and `clear`. `set_content` sets
  `Content-Length` and, when given, `Content-Type`. `Request` adds `method`
  and `uri`. `Response` adds `status` and starts with version `HTTP/1.1` and
  the `Server`, `Date` and `Connection: keep-alive` headers. Its `clear()`
  keeps the status.
- `webserv.multipart`:
  - `parse_content_multipart(request, boundary)` splits a
    `multipart/form-data` body into a list of `MultipartPart`. It raises
    `MultipartError` for malformed input; the error's `status` attribute
    holds the status to answer with.
  - `MultipartPart.filename()` returns the base name from
    `Content-Disposition`.
  - `has_two_consecutive_crnl(buffer)` returns `(found, end_of_input)`. It
    reports whether a header block has ended, or whether an IAC byte came
    first.
- `webserv.scanner`:
  - `ScannerBuffer` reads bytes from a shared `bytearray`. It has `get`,
    `unget`, `remain_char_count` and `erase_before_current_index`.
  - `ScannerStream` reads characters from a text stream. It tracks `line`
    and `column` and has `get` and `putback`.
- `webserv.path`:
  - `Path` is an immutable POSIX path that collapses repeated slashes.
  - It supports `/`, comparison and iteration over its components.
  - Its methods are `filename`, `stem`, `extension`, `parent_path`,
    `relative_path`, `root_directory`, `root_path`, `remove_filename`,
    `replace_filename`, `replace_extension` and `lexically_normal`.
  - `paths_components_are_equal(one, two)` returns `(equal, matching_count)`.
- `webserv.filesystem`:
  - `FileType` and `FileStatus` describe a file.
  - The queries are `status`, `exists`, `is_directory`, `is_regular_file`,
    `is_symlink`, `is_block_file`, `is_character_file`, `is_fifo`,
    `is_socket`, `is_other`, `is_empty`, `file_size` and `hard_link_count`.
  - The working directory is handled by `current_path`, `set_current_path`
    and `absolute`.
  - Failures raise `FilesystemError`. `status` of a missing file returns a
    `NOT_FOUND` status instead of raising.
- `webserv.directory`:
  - `DirectoryEntry` holds a path with a cached status.
  - `DirectoryIterator` yields the entries of a directory, without `.` and
    `..`. It can be used as a context manager.
- `webserv.errors`: `ErrorCode` wraps an errno value and has `message()`.
  `FilesystemError` carries `what`, `path1`, `path2` and `code`.
- `webserv.utility`: `trim`, `split`, `is_integer`, `get_date`,
  `is_valid_ip_address`, `get_file_content` and `write_content_to_file`.

## Example

```python
from webserv.status import Status, is_error
from webserv.message import Response

response = Response()
response.status = Status(404)
response.set_content(b"<p>missing</p>", "text/html")

print(response.status.definition())          # Not Found
print(is_error(response.status))             # True
print(response.get_header("Content-Length")) # 14
```

## What it does not do

This package is a toolkit, not a running server. It does not include:

- a command to start
- a socket listener
- a configuration-file reader
- a request-line or header tokeniser; the scanners are only character
  cursors
- routing, CGI execution or HTML page generation

## Running the tests

```
pip install -e ".[test]"
pytest
```