"""
Common namespace definitions and datatype contractions - requires rdflib.

Pre-defined prefixes for convenience. Users can import these or define
their own contexts.
"""

__all__ = [
    "COMMON_NAMESPACES",
    "DEFAULT_CONTEXT",
    "XSD_STRING",
    "XSD_INTEGER",
    "XSD_FLOAT",
    "XSD_DECIMAL",
    "XSD_BOOLEAN",
    "RDF_LANGSTRING",
    "STRING_DATATYPES",
]

from rdflib.namespace import DCTERMS, OWL, PROV, RDF, RDFS, SKOS, XSD

from ldrecords.terms.identifiers import Contraction

COMMON_NAMESPACES = {
    "rdf": str(RDF),
    "rdfs": str(RDFS),
    "xsd": str(XSD),
    "owl": str(OWL),
    "schema": "http://schema.org/",
    "dcterms": str(DCTERMS),
    "prov": str(PROV),
    "skos": str(SKOS),
}

# Same prefixes keyed by Contraction, usable as a context
DEFAULT_CONTEXT = {
    Contraction(prefix): uri for prefix, uri in COMMON_NAMESPACES.items()
}

# Datatypes
XSD_STRING = Contraction("xsd:string")
XSD_INTEGER = Contraction("xsd:integer")
XSD_FLOAT = Contraction("xsd:float")
XSD_DECIMAL = Contraction("xsd:decimal")
XSD_BOOLEAN = Contraction("xsd:boolean")
RDF_LANGSTRING = Contraction("rdf:langString")

# Spellings of the default literal datatype
STRING_DATATYPES = frozenset([XSD_STRING, str(XSD.string)])
