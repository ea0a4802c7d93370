"""
RDF subpackage - requires rdflib.

Convert flat triples to and from rdflib graphs.
"""

from ldrecords.rdf.graph import (
    to_term,
    add_literal,
    add_resource,
    add_flat_triple,
    bind_namespaces,
    to_graph,
    from_graph,
)

__all__ = [
    "to_term",
    "add_literal",
    "add_resource",
    "add_flat_triple",
    "bind_namespaces",
    "to_graph",
    "from_graph",
]
