import io

import pytest

from draughtscore.board import BadInput
from draughtscore.hub import (
    Pair,
    Scanner,
    add_pair,
    error_line,
    format_pair,
    read,
    write,
)


def test_command_and_pairs():
    scanner = Scanner("level  depth=12 move-time=5.0")
    assert scanner.get_command() == "level"
    assert scanner.get_pair() == Pair("depth", "12")
    assert scanner.get_pair() == Pair("move-time", "5.0")
    assert scanner.eos()


def test_pair_without_value():
    scanner = Scanner("set ponder")
    assert scanner.get_command() == "set"
    pair = scanner.get_pair()
    assert pair.name == "ponder"
    assert pair.value == ""
    assert scanner.eos()


def test_quoted_value_keeps_spaces():
    scanner = Scanner('set-param name=variant value="a b c"')
    assert scanner.get_command() == "set-param"
    assert scanner.get_pair() == Pair("name", "variant")
    assert scanner.get_pair() == Pair("value", "a b c")
    assert scanner.eos()


def test_spaces_around_equals():
    scanner = Scanner("x = y")
    assert scanner.get_pair() == Pair("x", "y")


def test_missing_closing_quote():
    scanner = Scanner('pos="W31')
    with pytest.raises(BadInput):
        scanner.get_pair()


def test_empty_name_raises():
    with pytest.raises(BadInput):
        Scanner("   ").get_name()
    with pytest.raises(BadInput):
        Scanner("=value").get_command()


def test_eos_false_with_content():
    scanner = Scanner("  go")
    assert not scanner.eos()
    assert scanner.get_command() == "go"
    assert scanner.eos()


@pytest.mark.parametrize(
    "text, expected",
    [("abc", True), ("a-b_1", True), ("", False), ("a b", False), ("a=b", False), ('a"', False), ("a\tb", False)],
)
def test_is_name(text, expected):
    assert Scanner.is_name(text) is expected


def test_format_pair_quotes_when_needed():
    assert format_pair("name", "value") == "name=value"
    assert format_pair("message", "bad move") == 'message="bad move"'
    assert format_pair("empty", "") == 'empty=""'


def test_add_pair_values():
    line = add_pair("info", "depth", 12)
    assert line == "info depth=12"
    line = add_pair(line, "pv", "32-28 19-23")
    assert line == 'info depth=12 pv="32-28 19-23"'
    assert add_pair("info", "time", 0.5) == "info time=0.500000"


def test_formatted_pair_parses_back():
    line = add_pair("info", "pv", "32-28 19-23")
    scanner = Scanner(line)
    assert scanner.get_command() == "info"
    assert scanner.get_pair() == Pair("pv", "32-28 19-23")


def test_error_line():
    assert error_line("unknown command") == 'error message="unknown command"'
    assert error_line("oops") == "error message=oops"


def test_read_strips_newline_and_raises_at_end():
    stream = io.StringIO("hub\ninit\n")
    assert read(stream) == "hub"
    assert read(stream) == "init"
    with pytest.raises(EOFError):
        read(stream)


def test_write_appends_newline():
    stream = io.StringIO()
    write("ready", stream)
    write("wait", stream)
    assert stream.getvalue() == "ready\nwait\n"