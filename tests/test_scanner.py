"""
Tests for the individual statement scanners.
"""

import pytest

from jailconf.syntax.errors import ParseError
from jailconf.syntax.nodes import BooleanParam, Comment, CommentStyle, ValueParam
from jailconf.syntax.scanner import (
    scan_block_comment,
    scan_boolean_param,
    scan_hash_comment,
    scan_slash_comment,
    scan_value_param,
    skip_whitespace,
)


# Comments

def test_block_comment_keeps_interior() -> None:
    source = "/*\n * Test comment\n */\n"
    entry, end = scan_block_comment(source, 0)

    assert entry == Comment(text="\n * Test comment\n ", style=CommentStyle.BLOCK)
    assert source[end:] == "\n"


def test_block_comment_stops_at_first_terminator() -> None:
    source = "/* a */ b */"
    entry, end = scan_block_comment(source, 0)

    assert entry.text == " a "
    assert source[end:] == " b */"


def test_block_comment_unterminated() -> None:
    with pytest.raises(ParseError):
        scan_block_comment("/* never closed\npersist;", 0)


def test_block_comment_requires_prefix() -> None:
    assert scan_block_comment("// not a block", 0) is None


def test_slash_comment_to_newline() -> None:
    source = "// CPP style comment\npersist;"
    entry, end = scan_slash_comment(source, 0)

    assert entry == Comment(text=" CPP style comment", style=CommentStyle.LINE_SLASH)
    assert source[end] == "\n"


def test_slash_comment_to_end_of_input() -> None:
    entry, end = scan_slash_comment("// last line", 0)

    assert entry.text == " last line"
    assert end == len("// last line")


def test_hash_comment() -> None:
    entry, _ = scan_hash_comment("# Shell style comment\n", 0)

    assert entry == Comment(text=" Shell style comment", style=CommentStyle.LINE_HASH)


def test_hash_comment_empty() -> None:
    entry, end = scan_hash_comment("#", 0)

    assert entry.text == ""
    assert end == 1


def test_scanners_start_at_offset() -> None:
    source = "persist; # trailing"
    entry, _ = scan_hash_comment(source, 9)

    assert entry.text == " trailing"


# Boolean parameters

def test_boolean_param() -> None:
    entry, end = scan_boolean_param("allow.mount;", 0)

    assert entry == BooleanParam(name="allow.mount")
    assert end == len("allow.mount;")


def test_boolean_param_leaves_rest() -> None:
    source = "allow.mount;\npersist;"
    entry, end = scan_boolean_param(source, 0)

    assert entry.name == "allow.mount"
    assert source[end:] == "\npersist;"


@pytest.mark.parametrize(
    "source",
    [
        "allow.mount = true;",
        "allow.mount=true;",
        "ip4.addr += 10.0.0.1;",
        "allow.mount\n;",
        "allow.mount",
        "www {",
        ";",
    ],
)
def test_boolean_param_rejects(source: str) -> None:
    assert scan_boolean_param(source, 0) is None


# Value parameters

def test_value_param() -> None:
    entry, end = scan_value_param("allow.mount = true;", 0)

    assert entry == ValueParam(name="allow.mount", value="true", append=False)
    assert end == len("allow.mount = true;")


def test_value_param_quoted_with_space() -> None:
    entry, _ = scan_value_param('exec.stop = "/bin/sh /etc/rc.shutdown";', 0)

    assert entry.value == "/bin/sh /etc/rc.shutdown"


def test_value_param_no_spaces() -> None:
    entry, _ = scan_value_param('allow.mount="true";', 0)

    assert entry == ValueParam(name="allow.mount", value="true", append=False)


def test_value_param_append() -> None:
    entry, _ = scan_value_param('ip6.addr += "lo1|fd00:0:0:1::1/64";', 0)

    assert entry == ValueParam(name="ip6.addr", value="lo1|fd00:0:0:1::1/64", append=True)


def test_value_param_append_without_spaces() -> None:
    entry, _ = scan_value_param("ip4.addr+=10.0.0.1;", 0)

    assert entry.append is True
    assert entry.value == "10.0.0.1"


def test_value_param_empty_quoted() -> None:
    entry, _ = scan_value_param('exec.stop = "";', 0)

    assert entry == ValueParam(name="exec.stop", value="", append=False)


def test_value_param_empty_unquoted() -> None:
    entry, _ = scan_value_param("exec.stop = ;", 0)

    assert entry.value == ""


def test_value_param_unquoted_keeps_inner_spaces() -> None:
    entry, _ = scan_value_param("exec.start += sleep  2 ;", 0)

    assert entry.value == "sleep  2 "


def test_value_param_quoted_may_contain_semicolon() -> None:
    entry, _ = scan_value_param('exec.start = "a; b";', 0)

    assert entry.value == "a; b"


def test_value_param_emoji() -> None:
    entry, _ = scan_value_param('smile.emoji = "😊";', 0)

    assert entry.value == "😊"


@pytest.mark.parametrize(
    "source",
    [
        "allow.mount;",
        "allow.mount\n= 1;",
        "allow.mount + = 1;",
        "www { persist; }",
        "allow.mount",
    ],
)
def test_value_param_rejects(source: str) -> None:
    assert scan_value_param(source, 0) is None


@pytest.mark.parametrize(
    "source",
    [
        "allow.mount = true\npersist;",
        "allow.mount = true",
        'allow.mount = "true"\n;',
        "allow.mount =\ntrue;",
        'allow.mount = "never closed;',
        'allow.mount = "a" b;',
    ],
)
def test_value_param_hard_failures(source: str) -> None:
    with pytest.raises(ParseError):
        scan_value_param(source, 0)


def test_unterminated_statement_position() -> None:
    with pytest.raises(ParseError) as exc_info:
        scan_value_param("a = 1;\nb = 2\nc;", 7)

    assert exc_info.value.line == 2
    assert exc_info.value.column == 6


def test_skip_whitespace() -> None:
    assert skip_whitespace(" \t\r\n x", 0) == 5
    assert skip_whitespace("x", 0) == 0
