"""
Text rendering of a parsed document tree.

Example output:
    Comment(line-hash): ' web server'
    Block: www
        ValueParam: host.hostname = 'www'
        ValueParam: ip4.addr += '10.0.0.2'
        BooleanParam: persist
"""

from .syntax import Block, BooleanParam, Comment, Document, Entry, ValueParam

INDENT = "    "


def _format_entry(entry: Entry, depth: int, lines: list[str]) -> None:
    prefix = INDENT * depth

    if isinstance(entry, Comment):
        style = entry.style.name.lower().replace("_", "-")
        lines.append(f"{prefix}Comment({style}): {entry.text!r}")
    elif isinstance(entry, BooleanParam):
        lines.append(f"{prefix}BooleanParam: {entry.name}")
    elif isinstance(entry, ValueParam):
        operator = "+=" if entry.append else "="
        lines.append(f"{prefix}ValueParam: {entry.name} {operator} {entry.value!r}")
    elif isinstance(entry, Block):
        lines.append(f"{prefix}Block: {entry.name}")
        for child in entry.children:
            _format_entry(child, depth + 1, lines)
    else:
        raise TypeError(f"Not a jail.conf entry: {entry!r}")


def format_document(document: Document) -> str:
    """Render entries one per line, nesting block children by indentation."""
    lines: list[str] = []
    for entry in document:
        _format_entry(entry, 0, lines)
    return "\n".join(lines)
