"""
Document tree for jail.conf.

A parsed configuration is a tuple of entries in source order. Order
matters: jail(8) applies ``+=`` appends and last-wins overrides in the
order statements are declared, so nothing here reorders or merges.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union


class CommentStyle(Enum):
    """Comment syntaxes accepted by jail.conf."""

    BLOCK = auto()         # /* ... */
    LINE_SLASH = auto()    # // ...
    LINE_HASH = auto()     # # ...


@dataclass(frozen=True)
class Comment:
    """
    A comment and its exact interior text.

    Examples:
        /* hi */    -> Comment(text=" hi ", style=CommentStyle.BLOCK)
        # persist   -> Comment(text=" persist", style=CommentStyle.LINE_HASH)
    """

    text: str
    style: CommentStyle


@dataclass(frozen=True)
class BooleanParam:
    """
    A flag-only parameter.

    Examples:
        persist;        -> BooleanParam(name="persist")
        allow.mount;    -> BooleanParam(name="allow.mount")
    """

    name: str


@dataclass(frozen=True)
class ValueParam:
    """
    A parameter with a value.

    Examples:
        path = "/usr/jails/www";    -> ValueParam("path", "/usr/jails/www", False)
        ip4.addr += 10.0.0.2;       -> ValueParam("ip4.addr", "10.0.0.2", True)
    """

    name: str
    value: str
    append: bool = False


@dataclass(frozen=True)
class Block:
    """
    A named group of entries.

    Examples:
        www { persist; }   -> Block(name="www", children=(BooleanParam("persist"),))

    Children given as any iterable are stored as a tuple.
    """

    name: str
    children: tuple["Entry", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def params(self) -> list["BooleanParam | ValueParam"]:
        """Direct parameters, in source order."""
        return [e for e in self.children if isinstance(e, (BooleanParam, ValueParam))]

    @property
    def blocks(self) -> list["Block"]:
        """Direct nested blocks, in source order."""
        return [e for e in self.children if isinstance(e, Block)]

    @property
    def comments(self) -> list[Comment]:
        return [e for e in self.children if isinstance(e, Comment)]

    def get_param(self, name: str) -> "BooleanParam | ValueParam | None":
        """Get first parameter with given name."""
        for p in self.params:
            if p.name == name:
                return p
        return None

    def get_params(self, name: str) -> list["BooleanParam | ValueParam"]:
        """
        Get all parameters with given name.

        Repeated and appended parameters are returned as written:
            ip4.addr = 10.0.0.1;
            ip4.addr += 10.0.0.2;
        Returns both ValueParam entries, the second with append=True.
        """
        return [p for p in self.params if p.name == name]

    def get_block(self, name: str) -> "Block | None":
        """Get first nested block with given name."""
        for b in self.blocks:
            if b.name == name:
                return b
        return None


Entry = Union[Comment, BooleanParam, ValueParam, Block]

# Top-level sequence of entries
Document = tuple[Entry, ...]


def find_blocks(document: Document, name: str) -> list[Block]:
    """Get all top-level blocks with given name."""
    return [e for e in document if isinstance(e, Block) and e.name == name]
