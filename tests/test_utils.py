import string

import pytest

from beauty.utils import escape, fail, make_uuid, split, unescape


def test_escape_round_trip():
    s = "some text with % chars to escape Ã Ã©iÃ´u"
    assert unescape(escape(s)) == s


def test_escape_space():
    assert escape("must be") == "must%20be"


def test_escape_keeps_safe_chars():
    safe = "AZaz09-._~"
    assert escape(safe) == safe


@pytest.mark.parametrize(
    "source, expected",
    [
        ("/tmp/srv", "/tmp/srv"),
        ("%2ftmp%2fsrv", "/tmp/srv"),
        ("some spaces in a%20line", "some spaces in a line"),
        ("%252ftmp%252fsrv", "%2ftmp%2fsrv"),
    ],
)
def test_unescape(source, expected):
    assert unescape(source) == expected


def test_unescape_plus_is_space():
    assert unescape("a+b") == "a b"


def test_unescape_filename_from_query():
    assert unescape("%2ftmp%2fsrv%2fdata%2Epcapng") == "/tmp/srv/data.pcapng"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", [""]),
        ("/topic/:name", ["", "topic", ":name"]),
        ("a/", ["a", ""]),
        ("a//b", ["a", "", "b"]),
    ],
)
def test_split(text, expected):
    assert split(text) == expected


def test_split_custom_separator():
    assert split("k1=v1&k2=v2", "&") == ["k1=v1", "k2=v2"]


def test_make_uuid_shape():
    uuid = make_uuid()
    assert len(uuid) == 32
    assert set(uuid) <= set(string.digits + "ABCDEF")


def test_make_uuid_differs():
    assert len({make_uuid() for _ in range(20)}) == 20


def test_fail_writes_to_stderr(capsys):
    fail("boom", "connect")
    assert capsys.readouterr().err == "connect: boom\n"