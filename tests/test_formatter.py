"""
Tests for tree rendering.
"""

from textwrap import dedent

import pytest

from jailconf import format_document, parse


def test_format_empty_document() -> None:
    assert format_document([]) == ""


def test_format_document() -> None:
    document = parse(
        dedent(
            """\
            /* top */
            persist;
            www {
                # web
                host.hostname = "www";
                ip4.addr += 10.0.0.2;
                inner { a; }
            }
            // end
            """
        )
    )

    assert format_document(document) == dedent(
        """\
        Comment(block): ' top '
        BooleanParam: persist
        Block: www
            Comment(line-hash): ' web'
            ValueParam: host.hostname = 'www'
            ValueParam: ip4.addr += '10.0.0.2'
            Block: inner
                BooleanParam: a
        Comment(line-slash): ' end'"""
    )


def test_format_rejects_foreign_objects() -> None:
    with pytest.raises(TypeError):
        format_document(["persist"])  # type: ignore[list-item]
