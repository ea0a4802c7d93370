"""
Terms subpackage - identifiers, literals and namespaces.

The data model shared by the resolver and the triple converters.
"""

from ldrecords.terms.identifiers import (
    IRI,
    Contraction,
    BLANK_NODE_PATTERN,
    RESERVED,
    is_blank_node,
    is_contraction,
)

from ldrecords.terms.namespaces import (
    COMMON_NAMESPACES,
    DEFAULT_CONTEXT,
    XSD_STRING,
    XSD_INTEGER,
    XSD_FLOAT,
    XSD_DECIMAL,
    XSD_BOOLEAN,
    RDF_LANGSTRING,
    STRING_DATATYPES,
)

from ldrecords.terms.literals import (
    Literal,
    literal,
    get_type,
    register_type,
    unregister_type,
    LANG_MARKER,
)

__all__ = [
    # identifiers
    "IRI",
    "Contraction",
    "BLANK_NODE_PATTERN",
    "RESERVED",
    "is_blank_node",
    "is_contraction",
    # namespaces
    "COMMON_NAMESPACES",
    "DEFAULT_CONTEXT",
    "XSD_STRING",
    "XSD_INTEGER",
    "XSD_FLOAT",
    "XSD_DECIMAL",
    "XSD_BOOLEAN",
    "RDF_LANGSTRING",
    "STRING_DATATYPES",
    # literals
    "Literal",
    "literal",
    "get_type",
    "register_type",
    "unregister_type",
    "LANG_MARKER",
]
