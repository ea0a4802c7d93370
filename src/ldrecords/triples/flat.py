"""
Flat triples - the streaming form of a triple.

A FlatTriple is a tuple whose length says how to read it:

- ``(subject, predicate, object)`` when the object is a resource
- ``(subject, predicate, value, datatype)`` for a typed literal; default
  literals always carry xsd:string here so they are never mistaken for
  resources
- ``(subject, predicate, value, rdf:langString, lang)`` for a language
  literal
"""

__all__ = [
    "FlatTriple",
    "flat_triple",
    "unflatten",
]

from typing import Any, Tuple

from ldrecords.terms.literals import Literal, literal
from ldrecords.terms.namespaces import XSD_STRING

FlatTriple = Tuple[Any, ...]


def flat_triple(subject: Any, predicate: Any, obj: Any) -> FlatTriple:
    """
    Encode a subject, predicate and object as a FlatTriple.

    Example:
        >>> flat_triple("ex:s", "ex:p", Literal("hello"))
        ('ex:s', 'ex:p', 'hello', Contraction('xsd:string'))
        >>> flat_triple("ex:s", "ex:p", "ex:o")
        ('ex:s', 'ex:p', 'ex:o')
    """
    if not isinstance(obj, Literal):
        return (subject, predicate, obj)
    if obj.lang:
        return (subject, predicate, obj.value, obj.type, obj.lang)
    if obj.type is not None:
        return (subject, predicate, obj.value, obj.type)
    return (subject, predicate, obj.value, XSD_STRING)


def unflatten(triple: FlatTriple) -> Tuple[Any, Any, Any]:
    """
    Decode a FlatTriple into (subject, predicate, object).

    The object is a Literal when a datatype or language is present.
    """
    subject, predicate, obj, *rest = triple
    datatype = rest[0] if rest else None
    lang = rest[1] if len(rest) > 1 else None
    if datatype is not None or lang:
        obj = literal(obj, datatype, lang)
    return subject, predicate, obj
