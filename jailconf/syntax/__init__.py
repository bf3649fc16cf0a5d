"""
jail.conf grammar: document tree, scanners and parser.
"""

from .errors import ParseError
from .nodes import (
    Block,
    BooleanParam,
    Comment,
    CommentStyle,
    Document,
    Entry,
    ValueParam,
    find_blocks,
)
from .parser import JailConfParser, parse

__all__ = [
    "Block",
    "BooleanParam",
    "Comment",
    "CommentStyle",
    "Document",
    "Entry",
    "JailConfParser",
    "ParseError",
    "ValueParam",
    "find_blocks",
    "parse",
]
