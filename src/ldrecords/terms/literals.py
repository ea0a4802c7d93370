"""
Literal values and datatype inference.

A Literal is a lexical value with an optional datatype and language tag.
Three shapes are allowed:

- default literal: ``value`` only, the datatype is implicitly xsd:string
- typed literal: ``value`` and ``type``
- language literal: ``value``, ``type`` (always rdf:langString) and ``lang``

Datatype inference for host values goes through a small registry keyed by
Python type. Extend it with :func:`register_type`.
"""

__all__ = [
    "Literal",
    "literal",
    "get_type",
    "register_type",
    "unregister_type",
    "LANG_MARKER",
]

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, Optional, Union

from ldrecords.errors import InvalidLiteralType
from ldrecords.terms.namespaces import (
    RDF_LANGSTRING,
    STRING_DATATYPES,
    XSD_BOOLEAN,
    XSD_DECIMAL,
    XSD_FLOAT,
    XSD_INTEGER,
    XSD_STRING,
)

LANG_MARKER = "@"

_MISSING = object()


@dataclass(frozen=True)
class Literal:
    """A literal value. Hashable, so it can live in object sets."""

    value: Any
    type: Optional[Any] = None
    lang: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        """
        Return the mapping form, leaving out absent fields.

        Example:
            >>> Literal("hi", RDF_LANGSTRING, "en").as_dict()
            {'value': 'hi', 'type': Contraction('rdf:langString'), 'lang': 'en'}
        """
        result = {"value": self.value}
        if self.type is not None:
            result["type"] = self.type
        if self.lang is not None:
            result["lang"] = self.lang
        return result


Handler = Callable[[Any], Any]

_DEFAULT_HANDLERS: Dict[type, Handler] = {
    str: lambda _: XSD_STRING,
    bool: lambda _: XSD_BOOLEAN,
    int: lambda _: XSD_INTEGER,
    float: lambda _: XSD_FLOAT,
    Decimal: lambda _: XSD_DECIMAL,
}

_handlers: Dict[type, Handler] = dict(_DEFAULT_HANDLERS)


def register_type(kind: type, datatype: Union[Handler, Any]) -> None:
    """
    Register the default datatype for values of a Python type.

    Args:
        kind: Python type to register (subclasses are covered too)
        datatype: Datatype IRI or Contraction, or a callable taking the
                  value and returning one

    Example:
        >>> import datetime
        >>> register_type(datetime.date, Contraction("xsd:date"))
        >>> get_type(datetime.date(2020, 1, 1))
        Contraction('xsd:date')
    """
    _handlers[kind] = datatype if callable(datatype) else (lambda _: datatype)


def unregister_type(kind: type) -> None:
    """Remove a registration; built-in kinds revert to their default."""
    if kind in _DEFAULT_HANDLERS:
        _handlers[kind] = _DEFAULT_HANDLERS[kind]
    else:
        _handlers.pop(kind, None)


def get_type(value: Any) -> Any:
    """
    Return the default datatype for a value, falling back to xsd:string.

    Example:
        >>> get_type(1)
        Contraction('xsd:integer')
        >>> get_type(object())
        Contraction('xsd:string')
    """
    for kind in type(value).__mro__:
        handler = _handlers.get(kind)
        if handler is not None:
            return handler(value)
    return XSD_STRING


def _lexical(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def literal(value: Any, type_or_lang: Any = _MISSING, lang: Any = _MISSING) -> Literal:
    """
    Build a Literal with an explicit or inferred datatype.

    Args:
        value: Lexical value, or any host value when the type is inferred
        type_or_lang: Datatype, or a language tag when it starts with "@".
                      When omitted the datatype is inferred from the value.
        lang: Language tag; when non-empty it wins over any given type

    Returns:
        A default, typed or language literal

    Raises:
        InvalidLiteralType: If no datatype can be resolved

    Example:
        >>> literal("hello")
        Literal(value='hello', type=None, lang=None)
        >>> literal("hi", "@en")
        Literal(value='hi', type=Contraction('rdf:langString'), lang='en')
        >>> literal(42)
        Literal(value='42', type=Contraction('xsd:integer'), lang=None)
    """
    if type_or_lang is _MISSING and lang is _MISSING:
        return literal(_lexical(value), get_type(value), None)

    if lang is _MISSING:
        if str(type_or_lang).startswith(LANG_MARKER):
            return literal(value, None, str(type_or_lang)[len(LANG_MARKER):])
        return literal(value, type_or_lang, None)

    datatype = None if type_or_lang is _MISSING else type_or_lang
    if lang:
        return Literal(value, RDF_LANGSTRING, lang)
    if isinstance(datatype, str) and datatype in STRING_DATATYPES:
        return Literal(value)
    if datatype:
        return Literal(value, datatype)
    raise InvalidLiteralType(value, datatype)
