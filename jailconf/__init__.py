"""
Parser for FreeBSD jail.conf files.
"""

from .const import APP_VERSION
from .formatter import format_document
from .loader import ConfigError, load_file, load_stream, load_string
from .syntax import (
    Block,
    BooleanParam,
    Comment,
    CommentStyle,
    Document,
    Entry,
    ParseError,
    ValueParam,
    find_blocks,
    parse,
)

__version__ = APP_VERSION

__all__ = [
    "Block",
    "BooleanParam",
    "Comment",
    "CommentStyle",
    "ConfigError",
    "Document",
    "Entry",
    "ParseError",
    "ValueParam",
    "find_blocks",
    "format_document",
    "load_file",
    "load_stream",
    "load_string",
    "parse",
]
