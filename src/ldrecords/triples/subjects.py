"""
Subject maps - flat triples grouped by subject, then predicate.

A SubjectMap is ``{subject: {predicate: {object, ...}}}``. Object sets
never hold duplicates and are never empty.
"""

__all__ = [
    "SubjectMap",
    "subjectify",
    "squash_objects",
    "squash_predicates",
    "squash",
]

from typing import Any, Dict, Iterable, List, Mapping, Set

from ldrecords.triples.flat import FlatTriple, flat_triple, unflatten

SubjectMap = Dict[Any, Dict[Any, Set[Any]]]


def subjectify(flat_triples: Iterable[FlatTriple]) -> SubjectMap:
    """
    Group flat triples into a SubjectMap.

    Example:
        >>> subjectify([("ex:s", "ex:p", "ex:o"), ("ex:s", "ex:p", "ex:o")])
        {'ex:s': {'ex:p': {'ex:o'}}}
        >>> subjectify([])
        {}
    """
    subject_map: SubjectMap = {}
    for triple in flat_triples:
        subject, predicate, obj = unflatten(triple)
        subject_map.setdefault(subject, {}).setdefault(predicate, set()).add(obj)
    return subject_map


def squash_objects(subject: Any, predicate: Any, objects: Iterable[Any]) -> List[FlatTriple]:
    """Return one FlatTriple per object of a subject and predicate."""
    return [flat_triple(subject, predicate, obj) for obj in objects]


def squash_predicates(subject: Any, predicate_map: Mapping[Any, Iterable[Any]]) -> List[FlatTriple]:
    """Return the FlatTriples of one subject's predicate map."""
    triples = []
    for predicate, objects in predicate_map.items():
        triples.extend(squash_objects(subject, predicate, objects))
    return triples


def squash(subject_map: Mapping[Any, Mapping[Any, Iterable[Any]]]) -> List[FlatTriple]:
    """
    Flatten a SubjectMap back into FlatTriples.

    Subjects, predicates and objects come out in the map's own iteration
    order. ``subjectify(squash(m)) == m`` for any map without empty
    object sets.

    Example:
        >>> squash({})
        []
    """
    triples = []
    for subject, predicate_map in subject_map.items():
        triples.extend(squash_predicates(subject, predicate_map))
    return triples
