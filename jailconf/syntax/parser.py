"""
Recursive descent parser for jail.conf.

Grammar:
    document  := (comment | boolean | value | block)*
    comment   := '/*' ... '*/' | '//' ... EOL | '#' ... EOL
    boolean   := NAME ';'
    value     := NAME ['+'] '=' (QUOTED | UNQUOTED) ';'
    block     := BLOCK_NAME '{' document '}'

Whitespace between statements is skipped and never kept.
"""

from ..const import MAX_NESTING_DEPTH
from .errors import ParseError
from .nodes import Block, Document, Entry
from .scanner import (
    BLOCK_NAME,
    STATEMENT_SCANNERS,
    ScanResult,
    skip_spaces,
    skip_whitespace,
)


class JailConfParser:
    """
    Parser for a complete jail.conf text.

    Example config:
        exec.start = "/bin/sh /etc/rc";
        persist;

        www {
            host.hostname = "www.example.org";
            ip4.addr += 10.0.0.2;
        }
    """

    def __init__(self, source: str, max_depth: int = MAX_NESTING_DEPTH):
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.source = source
        self.max_depth = max_depth

    def parse(self) -> Document:
        """Parse the entire source; fails unless all of it is consumed."""
        entries, pos = self._parse_document(0, 0)

        if pos < len(self.source):
            snippet = self.source[pos:].split("\n", 1)[0][:40]
            raise ParseError.at(f"Unexpected input: {snippet!r}", self.source, pos)

        return entries

    def _parse_document(self, pos: int, depth: int) -> tuple[Document, int]:
        """
        Parse entries until no statement matches.

        Returns the entries and the offset where parsing stopped; what
        remains there is for the caller to judge.
        """
        entries: list[Entry] = []
        pos = skip_whitespace(self.source, pos)

        while pos < len(self.source):
            result = self._scan_entry(pos, depth)
            if result is None:
                break
            entry, pos = result
            entries.append(entry)
            pos = skip_whitespace(self.source, pos)

        return tuple(entries), pos

    def _scan_entry(self, pos: int, depth: int) -> ScanResult:
        for scanner in STATEMENT_SCANNERS:
            result = scanner(self.source, pos)
            if result is not None:
                return result
        return self._scan_block(pos, depth)

    def _scan_block(self, pos: int, depth: int) -> ScanResult:
        """Scan ``name { ... }``, recursing into the body."""
        match = BLOCK_NAME.match(self.source, pos)
        if match is None:
            return None

        name = match.group()
        brace = skip_spaces(self.source, match.end())
        if not self.source.startswith("{", brace):
            return None

        if depth >= self.max_depth:
            raise ParseError.at(
                f"Block '{name}' is nested deeper than {self.max_depth} levels",
                self.source,
                pos,
            )

        children, end = self._parse_document(brace + 1, depth + 1)

        if end >= len(self.source):
            raise ParseError.at(f"Unmatched '{{' in block '{name}'", self.source, brace)
        if self.source[end] != "}":
            raise ParseError.at(f"Expected '}}' to close block '{name}'", self.source, end)

        return Block(name=name, children=children), end + 1


def parse(source: str, max_depth: int = MAX_NESTING_DEPTH) -> Document:
    """
    Parse jail.conf text into a tuple of entries.

    Args:
        source: Complete configuration text
        max_depth: Maximum block nesting depth

    Returns:
        Top-level entries in source order

    Raises:
        ParseError: If any part of the text cannot be parsed
    """
    return JailConfParser(source, max_depth).parse()
