"""
Triplification - turn records into flat triples.

A record is a mapping from predicates to raw values. Each value becomes
either a resource (a Contraction, or a value found in the resource map) or
a Literal.
"""

__all__ = [
    "objectify",
    "triplify_one",
    "triplify",
    "triplify_all",
]

from typing import Any, Iterable, List, Mapping, Optional

from loguru import logger

from ldrecords.terms.identifiers import Contraction
from ldrecords.terms.literals import Literal, literal
from ldrecords.triples.flat import FlatTriple, flat_triple
from ldrecords.triples.selectors import (
    SubjectField,
    SubjectFunction,
    Subjects,
    as_selector,
)

ResourceMap = Optional[Mapping[Any, Any]]

_MISSING = object()


def _resource(resources: ResourceMap, value: Any) -> Any:
    if not resources:
        return _MISSING
    try:
        return resources.get(value, _MISSING)
    except TypeError:
        # unhashable values are never resource keys
        return _MISSING


def objectify(resources: ResourceMap, input: Any) -> Any:
    """
    Decide whether a value is a resource or a literal.

    Args:
        resources: Optional mapping from raw values to IRIs or contractions
        input: Raw value

    Returns:
        The input itself if it is a Contraction or already a Literal, the
        mapped resource if the input is a key of ``resources``, otherwise a
        new Literal

    Example:
        >>> objectify({"Alice": Contraction("ex:alice")}, "Alice")
        Contraction('ex:alice')
        >>> objectify(None, "Alice")
        Literal(value='Alice', type=None, lang=None)
    """
    if isinstance(input, (Contraction, Literal)):
        return input
    resource = _resource(resources, input)
    if resource is not _MISSING:
        return resource
    return literal(input)


def triplify_one(resources: ResourceMap, subject: Any, predicate: Any, obj: Any) -> FlatTriple:
    """
    Build one FlatTriple.

    When the resource map turns the object into the subject itself, the
    object is objectified again without the resource map. This is tried
    once: a Contraction object equal to the subject still gives a
    self-referencing triple.

    Example:
        >>> triplify_one(None, "ex:s", "ex:p", 42)
        ('ex:s', 'ex:p', '42', Contraction('xsd:integer'))
    """
    result = objectify(resources, obj)
    if result == subject:
        logger.debug(f"Object {obj!r} resolves to its subject {subject!r}, ignoring resources")
        result = objectify(None, obj)
    return flat_triple(subject, predicate, result)


def triplify(resources: ResourceMap, subject: Any, record: Mapping[Any, Any]) -> List[FlatTriple]:
    """
    Build one FlatTriple per entry of a record, in record order.

    Args:
        resources: Optional resource map
        subject: Subject of every triple
        record: Mapping from predicates to raw values

    Returns:
        List of FlatTriples
    """
    return [triplify_one(resources, subject, predicate, obj) for predicate, obj in record.items()]


def _field_subject(resources: ResourceMap, record: Mapping[Any, Any], name: Any) -> Any:
    value = record[name]
    resource = _resource(resources, value)
    return value if resource is _MISSING else resource


def triplify_all(resources: ResourceMap, selector: Any, records: Iterable[Mapping[Any, Any]]) -> List[FlatTriple]:
    """
    Triplify a sequence of records.

    Args:
        resources: Optional resource map
        selector: How to find each record's subject: a Subjects,
                  SubjectField or SubjectFunction, or a plain sequence,
                  field name or callable coerced to one of those
        records: Records to triplify

    Returns:
        The triples of every record, concatenated in record order

    Raises:
        InvalidSubjectSelector: If the selector has an unknown shape
        KeyError: If a record lacks the field named by a SubjectField

    Example:
        >>> triplify_all(None, ["ex:a", "ex:b"], [{"ex:n": 1}, {"ex:n": 2}])
        [('ex:a', 'ex:n', '1', Contraction('xsd:integer')), ('ex:b', 'ex:n', '2', Contraction('xsd:integer'))]
    """
    selector = as_selector(selector)

    if isinstance(selector, Subjects):
        pairs = zip(selector.subjects, records)
    elif isinstance(selector, SubjectField):
        pairs = ((_field_subject(resources, record, selector.name), record) for record in records)
    elif isinstance(selector, SubjectFunction):
        pairs = ((selector.function(record), record) for record in records)

    triples = []
    for subject, record in pairs:
        triples.extend(triplify(resources, subject, record))
    return triples
