"""Dependency injection module."""

from typing import Type

from qeta.util.di.application import ProdApplicationProvider
from qeta.util.di.base import Component, ProviderBase
from qeta.util.di.core import ProdConfigProvider
from qeta.util.di.domain import ProdDomainProvider
from qeta.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Config, domain and use case providers are concrete; persistence is the
# one component with a production (PostgreSQL) and a mock (in-memory) variant
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Args:
        base: Entry of PROVIDERS
        use_mock: Pick the in-memory variant of a mockable component

    Returns:
        `base` itself when it is concrete, otherwise the subclass whose
        `__is_mock__` matches `use_mock`

    Raises:
        ValueError: If the component has no variant of the requested kind
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if variant.__is_mock__ == use_mock:
            return variant

    kind = "in-memory" if use_mock else "production"
    raise ValueError(f"No {kind} provider for {base.__mock_component__}")


__all__ = [
    "Component",
    "PersistenceProvider",
    "PROVIDERS",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
