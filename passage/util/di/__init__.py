"""Dependency injection module.

Providers come in two kinds. Core providers have no subclasses and are
always used as they are. Infrastructure components (Google, the ephemeral
store, persistence) are abstract bases with one production and one mock
subclass; which one a container gets is chosen per component.
"""

from typing import Type

from passage.util.di.application import ProdApplicationProvider
from passage.util.di.base import Component, ProviderBase
from passage.util.di.core import ProdConfigProvider
from passage.util.di.domain import ProdDomainProvider
from passage.util.di.infrastructure import (
    GoogleProvider,
    MemoryProvider,
    OAuthAggregatorProvider,
    PersistenceProvider,
    ProdGoogleProvider,
    ProdMemoryProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    GoogleProvider,
    MemoryProvider,
    PersistenceProvider,
    OAuthAggregatorProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for `base`.

    Raises:
        ValueError: If the component lacks the requested implementation
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if variant.__is_mock__ is use_mock:
            return variant

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "GoogleProvider",
    "MemoryProvider",
    "OAuthAggregatorProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdGoogleProvider",
    "ProdMemoryProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "mockable_components",
]
