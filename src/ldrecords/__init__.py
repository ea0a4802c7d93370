"""
ldrecords - Compact linked-data records, contractions and flat triples.

This package is organized into focused subpackages:

- terms/    Identifier model and literals
            - identifiers: Contraction, is_blank_node
            - literals: Literal, literal, register_type
            - namespaces: COMMON_NAMESPACES, DEFAULT_CONTEXT, XSD_STRING, ...

- context/  Context resolution
            - resolver: expand, expand_all, contract, contract_all, ...
            - config: ResolverConfig

- triples/  Records to triples and back
            - triplify: objectify, triplify_one, triplify, triplify_all
            - subjects: subjectify, squash
            - selectors: Subjects, SubjectField, SubjectFunction

- rdf/      rdflib bridge (requires rdflib)
            - graph: to_graph, from_graph

- df/       DataFrame bridge (requires polars)
            - frames: triplify_frame, triples_frame

Logging goes through loguru and is disabled for this package by default;
call ``logger.enable("ldrecords")`` to see it.

Usage:
    from ldrecords import Contraction, expand, contract, triplify, subjectify
    from ldrecords.rdf import to_graph
    from ldrecords.df import triplify_frame
"""

__version__ = "0.1.0"

from loguru import logger

from ldrecords.errors import (
    LDRecordsError,
    CycleError,
    InvalidLiteralType,
    InvalidSubjectSelector,
)

from ldrecords.terms import (
    IRI,
    Contraction,
    is_blank_node,
    Literal,
    literal,
    get_type,
    register_type,
    COMMON_NAMESPACES,
    DEFAULT_CONTEXT,
    XSD_STRING,
    RDF_LANGSTRING,
)

from ldrecords.context import (
    ResolverConfig,
    expand,
    expand_all,
    reverse_context,
    sort_prefixes,
    get_prefixed,
    contract,
    contract_all,
)

from ldrecords.triples import (
    FlatTriple,
    Subjects,
    SubjectField,
    SubjectFunction,
    objectify,
    triplify_one,
    triplify,
    triplify_all,
    SubjectMap,
    subjectify,
    squash_objects,
    squash_predicates,
    squash,
)

logger.disable("ldrecords")

__all__ = [
    "__version__",
    # errors
    "LDRecordsError",
    "CycleError",
    "InvalidLiteralType",
    "InvalidSubjectSelector",
    # terms
    "IRI",
    "Contraction",
    "is_blank_node",
    "Literal",
    "literal",
    "get_type",
    "register_type",
    "COMMON_NAMESPACES",
    "DEFAULT_CONTEXT",
    "XSD_STRING",
    "RDF_LANGSTRING",
    # context
    "ResolverConfig",
    "expand",
    "expand_all",
    "reverse_context",
    "sort_prefixes",
    "get_prefixed",
    "contract",
    "contract_all",
    # triples
    "FlatTriple",
    "Subjects",
    "SubjectField",
    "SubjectFunction",
    "objectify",
    "triplify_one",
    "triplify",
    "triplify_all",
    "SubjectMap",
    "subjectify",
    "squash_objects",
    "squash_predicates",
    "squash",
]
