"""Dependency injection wiring.

Every provider listed in ``PROVIDERS`` is either concrete (no subclasses)
or a mockable component whose production and in-memory variants subclass
it. Production code always resolves the production variant; the test
suite swaps in the in-memory one per component.
"""

from typing import Type

from blog.util.di.application import ProdApplicationProvider
from blog.util.di.base import Component, ProviderBase
from blog.util.di.core import ProdConfigProvider
from blog.util.di.domain import ProdDomainProvider
from blog.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from blog.util.di.interface import ProdInterfaceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    ProdInterfaceProvider,
    # Content tree and taxonomy file, swapped for dicts in tests
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Raises:
        ValueError: If a mockable component lacks the requested variant
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if getattr(variant, "__is_mock__", False) == use_mock:
            return variant

    kind = "in-memory" if use_mock else "production"
    raise ValueError(
        f"Component {base.__mock_component__ or base.__name__!r} "
        f"has no {kind} provider"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdInterfaceProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
