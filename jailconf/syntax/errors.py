"""
Parser error type.
"""


def position(source: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into a 1-based (line, column) pair."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


class ParseError(Exception):
    """Exception raised when jail.conf text cannot be parsed."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.message = message
        self.line = line
        self.column = column
        if line is not None:
            super().__init__(f"Line {line}, column {column}: {message}")
        else:
            super().__init__(message)

    @classmethod
    def at(cls, message: str, source: str, offset: int) -> "ParseError":
        """Build an error located at ``offset`` in ``source``."""
        line, column = position(source, offset)
        return cls(message, line, column)
