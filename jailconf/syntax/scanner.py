"""
Statement scanners for jail.conf.

Each scanner looks at ``source`` starting exactly at ``pos`` and returns
either ``(entry, end)`` where ``end`` is the offset just past the consumed
text, or ``None`` when the statement shape does not match there. None of
them skip leading or trailing whitespace; the document parser does that.

A scanner raises ParseError only once the input has committed to its
shape and cannot be completed (an opened ``/*`` that is never closed, a
value statement that runs into a newline before its ``;``).

Supported statements:
    /* block comment */
    // line comment
    # line comment
    persist;
    host.hostname = "www";
    ip4.addr += 10.0.0.2;
"""

import re
from collections.abc import Callable

from .errors import ParseError
from .nodes import BooleanParam, Comment, CommentStyle, Entry, ValueParam

# Parameter names stop at any of " +=;\n"
PARAM_NAME = re.compile(r"[^ +=;\n]+")

# Block names stop at any of " {;\n"
BLOCK_NAME = re.compile(r"[^ {;\n]+")

# Unquoted values stop at any of "\";\n"
UNQUOTED_VALUE = re.compile(r'[^";\n]*')

WHITESPACE = re.compile(r"[ \t\r\n]*")
SPACES = re.compile(r"[ \t]*")

ScanResult = tuple[Entry, int] | None
Scanner = Callable[[str, int], ScanResult]


def skip_whitespace(source: str, pos: int) -> int:
    """Skip spaces, tabs and line breaks."""
    return WHITESPACE.match(source, pos).end()


def skip_spaces(source: str, pos: int) -> int:
    """Skip spaces and tabs on the current line."""
    return SPACES.match(source, pos).end()


def _char_at(source: str, pos: int) -> str:
    """Get character at pos or empty string if at end."""
    if pos >= len(source):
        return ""
    return source[pos]


def scan_block_comment(source: str, pos: int) -> ScanResult:
    """Scan a ``/* ... */`` comment; the interior ends at the first ``*/``."""
    if not source.startswith("/*", pos):
        return None

    start = pos + 2
    end = source.find("*/", start)
    if end == -1:
        raise ParseError.at("Unterminated block comment", source, pos)

    return Comment(text=source[start:end], style=CommentStyle.BLOCK), end + 2


def _scan_line_comment(source: str, pos: int, prefix: str, style: CommentStyle) -> ScanResult:
    if not source.startswith(prefix, pos):
        return None

    start = pos + len(prefix)
    end = source.find("\n", start)
    if end == -1:
        end = len(source)

    # The newline itself is left for the caller
    return Comment(text=source[start:end], style=style), end


def scan_slash_comment(source: str, pos: int) -> ScanResult:
    """Scan a ``// ...`` comment up to the end of the line."""
    return _scan_line_comment(source, pos, "//", CommentStyle.LINE_SLASH)


def scan_hash_comment(source: str, pos: int) -> ScanResult:
    """Scan a ``# ...`` comment up to the end of the line."""
    return _scan_line_comment(source, pos, "#", CommentStyle.LINE_HASH)


def scan_boolean_param(source: str, pos: int) -> ScanResult:
    """
    Scan a flag-only parameter such as ``allow.mount;``.

    Rejects the match when the name is followed by ``+`` or ``=`` (a value
    statement) or by a line break, so ``name = value;`` never turns into a
    boolean followed by garbage.
    """
    match = PARAM_NAME.match(source, pos)
    if match is None:
        return None

    end = skip_spaces(source, match.end())
    if _char_at(source, end) != ";":
        return None

    return BooleanParam(name=match.group()), end + 1


def scan_value_param(source: str, pos: int) -> ScanResult:
    """
    Scan a parameter with a value.

    Handles:
        name = value;
        name="quoted value";
        name += "appended value";
        name = "";

    Quoted values run to the next double quote; there is no escape
    mechanism, so a value cannot contain ``"``.
    """
    match = PARAM_NAME.match(source, pos)
    if match is None:
        return None

    name = match.group()
    i = match.end()
    if _char_at(source, i) in ("", ";", "\n"):
        return None

    i = skip_spaces(source, i)
    if source.startswith("+=", i):
        append = True
        i += 2
    elif _char_at(source, i) == "=":
        append = False
        i += 1
    else:
        return None

    # Past the '=' the statement has to be completed on this line
    i = skip_spaces(source, i)
    if _char_at(source, i) == '"':
        close = source.find('"', i + 1)
        if close == -1:
            raise ParseError.at(f"Unterminated quoted value for '{name}'", source, i)
        value = source[i + 1:close]
        i = close + 1
    else:
        value_match = UNQUOTED_VALUE.match(source, i)
        value = value_match.group()
        i = value_match.end()

    i = skip_spaces(source, i)
    char = _char_at(source, i)
    if char in ("", "\n", "\r"):
        raise ParseError.at(f"Unterminated statement: expected ';' after '{name}'", source, i)
    if char != ";":
        raise ParseError.at(f"Expected ';' after value of '{name}', got {char!r}", source, i)

    return ValueParam(name=name, value=value, append=append), i + 1


# Tried in this order before falling back to a block; booleans must come
# before values since both start with the same name token.
STATEMENT_SCANNERS: tuple[Scanner, ...] = (
    scan_block_comment,
    scan_slash_comment,
    scan_hash_comment,
    scan_boolean_param,
    scan_value_param,
)
