"""Unit tests for diaglinks.api.link.split_lines module."""

import pytest

from diaglinks.api.link.RawLine import RawLine
from diaglinks.api.link.split_lines import split_lines


def test_explicit_eol_keeps_indices():
    assert split_lines("a\nb\n\nc", "\n") == [
        RawLine(0, "a"),
        RawLine(1, "b"),
        RawLine(2, ""),
        RawLine(3, "c"),
    ]


def test_crlf():
    lines = split_lines("a\r\nb\r\n", "\r\n")
    assert [line.text for line in lines] == ["a", "b", ""]


def test_lf_split_leaves_carriage_returns():
    assert split_lines("a\r\nb", "\n")[0].text == "a\r"


def test_universal_newlines():
    assert [line.text for line in split_lines("a\r\nb\nc\rd")] == ["a", "b", "c", "d"]


def test_empty_text():
    assert split_lines("") == []
    assert split_lines("", "\n") == [RawLine(0, "")]


def test_empty_eol_rejected():
    with pytest.raises(ValueError, match="eol must not be empty"):
        split_lines("abc", "")
