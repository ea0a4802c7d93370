"""
Triples subpackage - records to flat triples, flat triples to subject maps.
"""

from ldrecords.triples.flat import (
    FlatTriple,
    flat_triple,
    unflatten,
)

from ldrecords.triples.selectors import (
    Subjects,
    SubjectField,
    SubjectFunction,
    SubjectSelector,
    as_selector,
)

from ldrecords.triples.triplify import (
    objectify,
    triplify_one,
    triplify,
    triplify_all,
)

from ldrecords.triples.subjects import (
    SubjectMap,
    subjectify,
    squash_objects,
    squash_predicates,
    squash,
)

__all__ = [
    # flat
    "FlatTriple",
    "flat_triple",
    "unflatten",
    # selectors
    "Subjects",
    "SubjectField",
    "SubjectFunction",
    "SubjectSelector",
    "as_selector",
    # triplify
    "objectify",
    "triplify_one",
    "triplify",
    "triplify_all",
    # subjects
    "SubjectMap",
    "subjectify",
    "squash_objects",
    "squash_predicates",
    "squash",
]
