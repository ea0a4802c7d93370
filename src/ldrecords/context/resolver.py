"""
Context resolver - expand contractions to IRIs and contract IRIs back.

A context maps contractions to contractions or IRIs. The ``None`` key, when
present, is the default prefix used for bare names. Contexts are never
mutated, so the lookup tables derived from them are cached by value.

Contraction is not a bijection: when several contractions expand to the
same IRI, only the last one in the context (for exact matches) or the one
with the longest prefix (for prefix matches) comes back from ``contract``.
"""

__all__ = [
    "expand",
    "expand_all",
    "reverse_context",
    "sort_prefixes",
    "get_prefixed",
    "contract",
    "contract_all",
]

from copy import copy
from dataclasses import replace
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Hashable, List, Mapping, MutableMapping, Optional, Tuple

from loguru import logger

from ldrecords.context.config import DEFAULT_RESOLVER_CONFIG, ResolverConfig
from ldrecords.errors import CycleError
from ldrecords.terms.identifiers import RESERVED, Contraction
from ldrecords.terms.literals import Literal

Context = Mapping[Optional[Hashable], Any]


def _expand(context: Context, input: Any, separator: str, chain: Tuple[Any, ...]) -> Any:
    if not isinstance(input, Contraction) or input in RESERVED:
        return input

    if input in context:
        if input in chain:
            raise CycleError(input, chain)
        return _expand(context, context[input], separator, chain + (input,))

    if separator in input:
        prefix, local = input.split(separator, 1)
        key = Contraction(prefix)
        if key not in context:
            return input
        return f"{context[key]}{local}"

    default = ""
    if None in context:
        if None in chain:
            raise CycleError(input, chain)
        default = _expand(context, context[None], separator, chain + (None,))
    return f"{default}{input}"


def expand(context: Context, input: Any, config: Optional[ResolverConfig] = None) -> Any:
    """
    Expand a contraction to an IRI string.

    Args:
        context: Mapping from contractions to contractions or IRIs
        input: Value to expand, usually a Contraction
        config: Resolver configuration

    Returns:
        The expanded IRI. Anything that is not a Contraction, the reserved
        literal field names, and contractions with an unknown prefix are
        returned unchanged.

    Raises:
        CycleError: If the context loops and ``config.strict`` is set

    Example:
        >>> ctx = {Contraction("rdfs"): "http://www.w3.org/2000/01/rdf-schema#",
        ...        Contraction("label"): Contraction("rdfs:label")}
        >>> expand(ctx, Contraction("label"))
        'http://www.w3.org/2000/01/rdf-schema#label'
    """
    config = config or DEFAULT_RESOLVER_CONFIG
    try:
        return _expand(context, input, config.separator, ())
    except CycleError as e:
        if config.strict:
            raise
        logger.warning(f"Leaving {input!r} unexpanded: {e}")
        return input


def _walk(value: Any, leaf: Callable[[Any], Any]) -> Any:
    """Rebuild a nested structure with ``leaf`` applied to every string."""
    if isinstance(value, str):
        return leaf(value)
    if isinstance(value, Literal):
        if value.type is None:
            return value
        return replace(value, type=leaf(value.type))
    if isinstance(value, Mapping):
        items = [(_walk(k, leaf), _walk(v, leaf)) for k, v in value.items()]
        if isinstance(value, MutableMapping):
            result = copy(value)
            result.clear()
            result.update(items)
            return result
        return dict(items)
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return type(value)(*(_walk(v, leaf) for v in value))
    if isinstance(value, (list, tuple, set, frozenset)):
        return type(value)(_walk(v, leaf) for v in value)
    return value


def expand_all(context: Context, value: Any, config: Optional[ResolverConfig] = None) -> Any:
    """
    Expand every Contraction inside a nested structure.

    Mappings (keys and values), lists, tuples, sets and the datatypes of
    Literals are traversed; container types are preserved.

    Example:
        >>> ctx = {Contraction("ex"): "http://example.org/"}
        >>> expand_all(ctx, {Contraction("ex:p"): [Contraction("ex:o"), "text"]})
        {'http://example.org/p': ['http://example.org/o', 'text']}
    """
    return _walk(value, lambda leaf: expand(context, leaf, config))


def _freeze(context: Context) -> Tuple[Tuple[Any, type, Any, type], ...]:
    # Contraction("x") == "x", so the key records each type as well
    return tuple((key, type(key), value, type(value)) for key, value in context.items())


def _prefix_pairs(frozen, config: ResolverConfig) -> List[Tuple[Any, Any]]:
    items = [(key, value) for key, _, value, _ in frozen]
    context = dict(items)
    return [(expand(context, value, config), key) for key, value in items if key is not None]


@lru_cache(maxsize=128)
def _cached_reverse(items, config: ResolverConfig) -> Mapping[Any, Any]:
    return MappingProxyType(dict(_prefix_pairs(items, config)))


@lru_cache(maxsize=128)
def _cached_prefixes(items, config: ResolverConfig) -> Tuple[Tuple[Any, Any], ...]:
    pairs = _prefix_pairs(items, config)
    return tuple(sorted(pairs, key=lambda pair: (-len(pair[0]), pair[0], pair[1])))


def reverse_context(context: Context, config: Optional[ResolverConfig] = None) -> dict:
    """
    Map expanded IRIs back to the contractions that produce them.

    Later entries win when two contractions expand to the same IRI.
    The default prefix entry has no name and is left out.

    Example:
        >>> reverse_context({Contraction("ex"): "http://example.org/"})
        {'http://example.org/': Contraction('ex')}
    """
    config = config or DEFAULT_RESOLVER_CONFIG
    return dict(_cached_reverse(_freeze(context), config))


def sort_prefixes(context: Context, config: Optional[ResolverConfig] = None) -> List[Tuple[Any, Any]]:
    """
    Return (IRI, contraction) pairs from the longest IRI to the shortest.

    Ties are ordered by IRI, then by contraction.
    """
    config = config or DEFAULT_RESOLVER_CONFIG
    return list(_cached_prefixes(_freeze(context), config))


def get_prefixed(
    context: Context,
    input: str,
    config: Optional[ResolverConfig] = None,
) -> Optional[Contraction]:
    """
    Contract an IRI using the longest matching prefix in the context.

    Returns:
        A prefixed Contraction, or None when no prefix matches

    Example:
        >>> ctx = {Contraction("a"): "http://ex.org/",
        ...        Contraction("ab"): "http://ex.org/b/"}
        >>> get_prefixed(ctx, "http://ex.org/b/foo")
        Contraction('ab:foo')
    """
    config = config or DEFAULT_RESOLVER_CONFIG
    for uri, prefix in _cached_prefixes(_freeze(context), config):
        if isinstance(uri, str) and input.startswith(uri):
            return Contraction(f"{prefix}{config.separator}{input[len(uri):]}")
    return None


def contract(context: Context, input: Any, config: Optional[ResolverConfig] = None) -> Any:
    """
    Contract an IRI string to a Contraction.

    Exact matches against the expanded context values are tried first,
    then the longest matching prefix. Anything else is returned unchanged,
    including non-strings and values that are already contractions.

    Example:
        >>> ctx = {Contraction("ex"): "http://example.org/"}
        >>> contract(ctx, "http://example.org/")
        Contraction('ex')
        >>> contract(ctx, "http://example.org/thing")
        Contraction('ex:thing')
        >>> contract(ctx, "urn:other")
        'urn:other'
    """
    if not isinstance(input, str) or isinstance(input, Contraction):
        return input

    config = config or DEFAULT_RESOLVER_CONFIG
    reverse = _cached_reverse(_freeze(context), config)
    if input in reverse:
        return reverse[input]

    prefixed = get_prefixed(context, input, config)
    return input if prefixed is None else prefixed


def contract_all(context: Context, value: Any, config: Optional[ResolverConfig] = None) -> Any:
    """
    Contract every IRI string inside a nested structure.

    Every string leaf is a candidate, so lexical values that look like IRIs
    are contracted too. Literal values are left alone; their datatypes are
    contracted.
    """
    return _walk(value, lambda leaf: contract(context, leaf, config))
