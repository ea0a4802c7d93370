"""Configuration for context resolution."""

__all__ = [
    "ResolverConfig",
    "DEFAULT_RESOLVER_CONFIG",
]

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolverConfig:
    """
    Configuration for expansion and contraction.

    Attributes:
        separator: Separator between prefix and local name in a contraction
        strict: If True, a cycle in the context raises CycleError.
                If False, the unresolved contraction is returned and a
                warning is logged.
    """

    separator: str = ":"
    strict: bool = True


DEFAULT_RESOLVER_CONFIG = ResolverConfig()
