"""
Context subpackage - expansion and contraction of identifiers.

Pure functions over a caller-supplied context (prefix mapping).
"""

from ldrecords.context.config import (
    ResolverConfig,
    DEFAULT_RESOLVER_CONFIG,
)

from ldrecords.context.resolver import (
    expand,
    expand_all,
    reverse_context,
    sort_prefixes,
    get_prefixed,
    contract,
    contract_all,
)

__all__ = [
    # config
    "ResolverConfig",
    "DEFAULT_RESOLVER_CONFIG",
    # resolver
    "expand",
    "expand_all",
    "reverse_context",
    "sort_prefixes",
    "get_prefixed",
    "contract",
    "contract_all",
]
