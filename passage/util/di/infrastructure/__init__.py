"""Infrastructure providers."""

# Import bases
from .google import GoogleProvider
from .memory import MemoryProvider
from .oauth import OAuthAggregatorProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .google import ProdGoogleProvider  # noqa: F401
from .memory import ProdMemoryProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "GoogleProvider",
    "MemoryProvider",
    "OAuthAggregatorProvider",
    "PersistenceProvider",
    "ProdGoogleProvider",
    "ProdMemoryProvider",
    "ProdPersistenceProvider",
]
