from .base import SearchProvider
from .tavily import TavilySearchProvider

__all__ = [
    "SearchProvider",
    "TavilySearchProvider",
]
