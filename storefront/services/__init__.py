# Services

from .cart_reducer import reduce_cart, cart_total
from .relay import WebhookRelay
from .catalog import CatalogLoader, CatalogRegistry, SheetSource

__all__ = [
    "reduce_cart",
    "cart_total",
    "WebhookRelay",
    "CatalogLoader",
    "CatalogRegistry",
    "SheetSource",
]
