"""
RDF graph bridge - requires rdflib.

Move flat triples in and out of an rdflib Graph, expanding and
contracting identifiers with a context on the way.
"""

__all__ = [
    "to_term",
    "add_literal",
    "add_resource",
    "add_flat_triple",
    "bind_namespaces",
    "to_graph",
    "from_graph",
]

from typing import Any, Iterable, List, Mapping, Optional

from rdflib import BNode, Graph, Namespace, URIRef
from rdflib import Literal as RDFLiteral
from rdflib.term import Node

from ldrecords.context.resolver import contract, expand
from ldrecords.terms.identifiers import Contraction, is_blank_node
from ldrecords.terms.literals import Literal, literal
from ldrecords.terms.namespaces import DEFAULT_CONTEXT
from ldrecords.triples.flat import FlatTriple, flat_triple, unflatten


def _with_defaults(context: Optional[Mapping[Any, Any]]) -> dict:
    return {**DEFAULT_CONTEXT, **(context or {})}


def to_term(value: Any, context: Optional[Mapping[Any, Any]] = None) -> Node:
    """
    Build an rdflib resource term from an IRI, blank node or contraction.

    Example:
        >>> to_term(Contraction("rdfs:label"))
        rdflib.term.URIRef('http://www.w3.org/2000/01/rdf-schema#label')
        >>> to_term("_:b0")
        rdflib.term.BNode('b0')
    """
    value = expand(_with_defaults(context), value)
    if is_blank_node(value):
        return BNode(value[2:])
    return URIRef(value)


def add_literal(
    graph: Graph,
    subject: Node,
    predicate: Node,
    value: Literal,
    context: Optional[Mapping[Any, Any]] = None,
) -> None:
    """
    Add a literal triple to graph.

    Args:
        graph: RDF graph to add to (mutated in place)
        subject: Subject term
        predicate: Predicate term
        value: Literal to add; its datatype is expanded with the context
        context: Optional context, merged over the default namespaces
    """
    if value.lang:
        term = RDFLiteral(value.value, lang=value.lang)
    elif value.type is not None:
        term = RDFLiteral(value.value, datatype=to_term(value.type, context))
    else:
        term = RDFLiteral(value.value)
    graph.add((subject, predicate, term))


def add_resource(graph: Graph, subject: Node, predicate: Node, obj: Node) -> None:
    """Add a resource triple to graph."""
    graph.add((subject, predicate, obj))


def add_flat_triple(
    graph: Graph,
    triple: FlatTriple,
    context: Optional[Mapping[Any, Any]] = None,
) -> None:
    """Add one FlatTriple to graph, expanding identifiers with the context."""
    subject, predicate, obj = unflatten(triple)
    subject = to_term(subject, context)
    predicate = to_term(predicate, context)
    if isinstance(obj, Literal):
        add_literal(graph, subject, predicate, obj, context)
    else:
        add_resource(graph, subject, predicate, to_term(obj, context))


def bind_namespaces(graph: Graph, context: Mapping[Any, Any]) -> None:
    """
    Bind the prefixes of a context to graph.

    Only named entries that map straight to an IRI are bound; aliases
    (entries mapping to another contraction) and the default prefix are
    skipped.
    """
    for prefix, uri in context.items():
        if prefix is None or isinstance(uri, Contraction) or not isinstance(uri, str):
            continue
        graph.bind(str(prefix), Namespace(uri), override=True, replace=True)


def to_graph(
    flat_triples: Iterable[FlatTriple],
    context: Optional[Mapping[Any, Any]] = None,
    graph: Optional[Graph] = None,
) -> Graph:
    """
    Load flat triples into an rdflib Graph.

    Args:
        flat_triples: FlatTriples, possibly using contractions
        context: Optional context, merged over the default namespaces
        graph: Graph to add to; a new one is created when omitted

    Returns:
        The graph

    Example:
        >>> g = to_graph([(Contraction("ex:s"), Contraction("rdfs:label"), "Thing", Contraction("xsd:string"))],
        ...              {Contraction("ex"): "http://example.org/"})
        >>> len(g)
        1
    """
    if graph is None:
        graph = Graph()
    bind_namespaces(graph, _with_defaults(context))
    for triple in flat_triples:
        add_flat_triple(graph, triple, context)
    return graph


def _from_node(node: Node, context: Mapping[Any, Any]) -> Any:
    if isinstance(node, BNode):
        return f"_:{node}"
    if isinstance(node, RDFLiteral):
        if node.language:
            return literal(str(node), None, node.language)
        if node.datatype is not None:
            return literal(str(node), contract(context, str(node.datatype)), None)
        return Literal(str(node))
    return contract(context, str(node))


def from_graph(graph: Graph, context: Optional[Mapping[Any, Any]] = None) -> List[FlatTriple]:
    """
    Read the triples of an rdflib Graph as sorted FlatTriples.

    IRIs are contracted with the context (merged over the default
    namespaces) and blank nodes are written as ``_:id``.
    """
    context = _with_defaults(context)
    triples = [
        flat_triple(*(_from_node(node, context) for node in (s, p, o)))
        for s, p, o in graph
    ]
    return sorted(triples)
