"""Request dependencies for the stores built in the app lifespan"""

from fastapi import Request

from .config import Settings
from ..database.carts import CartDatabase
from ..database.orders import OrderDatabase
from ..services.catalog import CatalogRegistry
from ..services.relay import WebhookRelay


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalogs(request: Request) -> CatalogRegistry:
    return request.app.state.catalogs


def get_cart_db(request: Request) -> CartDatabase:
    return request.app.state.cart_db


def get_order_db(request: Request) -> OrderDatabase:
    return request.app.state.order_db


def get_relay(request: Request) -> WebhookRelay:
    return request.app.state.relay
