"""
Subject selectors for triplify_all.

Three strategies pick the subject of each record:

- Subjects: an explicit sequence, one subject per record
- SubjectField: a record field whose value is looked up in the resource map
- SubjectFunction: a callable from record to subject
"""

__all__ = [
    "Subjects",
    "SubjectField",
    "SubjectFunction",
    "SubjectSelector",
    "as_selector",
]

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union

from loguru import logger

from ldrecords.errors import InvalidSubjectSelector


@dataclass(frozen=True)
class Subjects:
    """Explicit subjects, paired with records by position."""

    subjects: Any


@dataclass(frozen=True)
class SubjectField:
    """
    Take the subject from a record field, mapped through the resources.

    The field value itself is the subject when it is not a resource key.
    A record without the field raises KeyError.
    """

    name: Any


@dataclass(frozen=True)
class SubjectFunction:
    """Compute the subject from the record."""

    function: Callable[[Mapping[Any, Any]], Any]


SubjectSelector = Union[Subjects, SubjectField, SubjectFunction]


def as_selector(selector: Any) -> SubjectSelector:
    """
    Coerce a plain selector to one of the selector types.

    Sequences (other than strings) and iterators become Subjects, strings
    become SubjectField and callables become SubjectFunction.

    Raises:
        InvalidSubjectSelector: For any other value

    Example:
        >>> as_selector("id")
        SubjectField(name='id')
    """
    if isinstance(selector, (Subjects, SubjectField, SubjectFunction)):
        return selector
    if isinstance(selector, str):
        coerced = SubjectField(selector)
    elif isinstance(selector, (Sequence, Iterator)):
        coerced = Subjects(selector)
    elif callable(selector):
        coerced = SubjectFunction(selector)
    else:
        raise InvalidSubjectSelector(selector)
    logger.debug(f"Using {type(coerced).__name__} subject selector")
    return coerced
