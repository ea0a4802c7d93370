"""
Identifier model - IRIs, blank nodes and contractions.

IRIs are opaque strings. A Contraction is a distinct string type: it marks
a short name that should be resolved through a context, as opposed to an
IRI or a lexical value that happens to be a string.
"""

__all__ = [
    "IRI",
    "Contraction",
    "BLANK_NODE_PATTERN",
    "RESERVED",
    "is_blank_node",
    "is_contraction",
]

import re
from typing import Any

IRI = str

BLANK_NODE_PATTERN = re.compile(r"^_:.*$", re.DOTALL)


class Contraction(str):
    """
    A short name that expands to an IRI through a context.

    Either a bare name (``Contraction("label")``), resolved with the
    context's default prefix, or a prefixed name
    (``Contraction("rdfs:label")``).

    Example:
        >>> Contraction("rdfs:label")
        Contraction('rdfs:label')
        >>> Contraction("rdfs:label") == "rdfs:label"
        True
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"


# Field names of a literal record; never resolved against a context.
RESERVED = frozenset(Contraction(name) for name in ("value", "type", "lang"))


def is_blank_node(value: Any) -> bool:
    """
    Check whether a value is a blank node identifier (``_:`` prefix).

    Example:
        >>> is_blank_node("_:b0")
        True
        >>> is_blank_node("http://example.org/b0")
        False
    """
    return isinstance(value, str) and BLANK_NODE_PATTERN.match(value) is not None


def is_contraction(value: Any) -> bool:
    """Check whether a value is a Contraction."""
    return isinstance(value, Contraction)
