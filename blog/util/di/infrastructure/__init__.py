"""Storage providers.

``ProdPersistenceProvider`` is imported so that it registers as a subclass
of ``PersistenceProvider`` before ``get_provider`` looks it up.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
