# Core modules

from .config import Settings, get_settings
from .exceptions import CatalogError, FetchTimeout, FetchError, NotPublic, ParseError

__all__ = [
    "Settings",
    "get_settings",
    "CatalogError",
    "FetchTimeout",
    "FetchError",
    "NotPublic",
    "ParseError",
]
