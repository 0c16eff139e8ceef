import pytest

from webserv.message import Message, Request, Response
from webserv.status import Status


def test_missing_header_is_empty_string():
    assert Message().get_header("Host") == ""


def test_set_and_get_header():
    m = Message()
    m.set_header("Host", "localhost")
    assert m.get_header("Host") == "localhost"


def test_headers_are_case_sensitive():
    m = Message()
    m.set_header("Host", "localhost")
    assert m.get_header("host") == ""


def test_del_header():
    m = Message()
    m.set_header("X", "1")
    m.del_header("X")
    m.del_header("absent")
    assert m.headers == {}


@pytest.mark.parametrize(
    "value, expected",
    [("42", 42), ("  7abc", 7), ("abc", 0), ("", 0), ("+5", 5)],
)
def test_content_length_parsing(value, expected):
    m = Message()
    m.set_header("Content-Length", value)
    assert m.content_length() == expected


def test_content_length_missing_is_zero():
    assert Message().content_length() == 0


def test_set_content_sets_length():
    m = Message()
    m.set_content(b"hello")
    assert m.content == bytearray(b"hello")
    assert m.get_header("Content-Length") == "5"
    assert m.get_header("Content-Type") == ""


def test_set_content_with_type():
    m = Message()
    m.set_content(b"<p>", "text/html")
    assert m.get_header("Content-Type") == "text/html"
    assert m.content_length() == 3


def test_message_empty_and_clear():
    m = Message()
    assert m.empty()
    m.set_content(b"x")
    m.version = "HTTP/1.1"
    assert not m.empty()
    m.clear()
    assert m.empty()


def test_request_empty_considers_method_and_uri():
    r = Request()
    assert r.empty()
    r.method = "GET"
    assert not r.empty()
    r.method = ""
    r.uri = "/index.html"
    assert not r.empty()


def test_request_clear():
    r = Request(method="POST", uri="/upload", version="HTTP/1.1")
    r.set_header("Host", "localhost")
    r.clear()
    assert r.empty()
    assert r.method == "" and r.uri == ""


def test_response_defaults():
    r = Response()
    assert r.version == "HTTP/1.1"
    assert r.get_header("Server") == "Webserv/1.0"
    assert r.get_header("Connection") == "keep-alive"
    assert r.get_header("Date").endswith(" GMT")
    assert r.status == Status(0)
    assert not r.empty()


def test_response_clear_keeps_status():
    r = Response()
    r.clear()
    assert r.empty()
    r.status = Status(404)
    r.clear()
    assert not r.empty()
    assert r.status == 404