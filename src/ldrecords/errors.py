"""
Exceptions raised by ldrecords.

All errors are local and synchronous: they are raised where they are
detected and never retried.
"""

__all__ = [
    "LDRecordsError",
    "CycleError",
    "InvalidLiteralType",
    "InvalidSubjectSelector",
]

from typing import Any, Sequence


class LDRecordsError(Exception):
    """Base class for ldrecords errors."""


class CycleError(LDRecordsError, ValueError):
    """A contraction could not be expanded because the context loops."""

    def __init__(self, contraction: Any, chain: Sequence[Any] = ()):
        self.contraction = contraction
        self.chain = tuple(chain)
        super().__init__(contraction, self.chain)

    def __str__(self) -> str:
        path = " -> ".join(str(step) for step in self.chain + (self.contraction,))
        return f"Cycle in context while expanding {self.contraction!r}: {path}"


class InvalidLiteralType(LDRecordsError, ValueError):
    """A literal was requested without a usable datatype."""

    def __init__(self, value: Any, type: Any = None):
        self.value = value
        self.type = type
        super().__init__(value, type)

    def __str__(self) -> str:
        return f"'{self.type}' is not a valid type for literal {self.value!r}"


class InvalidSubjectSelector(LDRecordsError, TypeError):
    """The subject selector given to triplify_all has an unknown shape."""

    def __init__(self, selector: Any):
        self.selector = selector
        super().__init__(selector)

    def __str__(self) -> str:
        return f"Unknown type for subject selector: {type(self.selector).__name__}"
