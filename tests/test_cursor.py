"""Tests for the two-slot line cursor."""

import io

import pytest

from mdtasks.cursor import LineCursor
from mdtasks.errors import StreamReadError


def test_last_line_delivered_once_before_end():
    c = LineCursor(["a", "b"])
    assert c.advance() and (c.current, c.next) == ("", "a")
    assert c.advance() and (c.current, c.next) == ("a", "b")
    assert c.advance() and (c.current, c.next) == ("b", "")
    assert c.exhausted and not c.done
    assert c.advance() is False
    assert c.current == "" and c.done


def test_advance_after_end_keeps_reporting_end():
    c = LineCursor([])
    assert c.advance() is True
    assert c.advance() is False
    assert c.advance() is False


def test_line_endings_removed():
    c = LineCursor(io.StringIO("one\r\ntwo\n"))
    c.advance()
    c.advance()
    assert c.current == "one"
    assert c.next == "two"


def test_read_failure_is_wrapped():
    def broken():
        yield "first\n"
        raise OSError("device gone")

    c = LineCursor(broken())
    c.advance()
    with pytest.raises(StreamReadError) as exc:
        c.advance()
    assert isinstance(exc.value.__cause__, OSError)
    assert "device gone" in str(exc.value)
