"""
Wildlife Print Store

Storefront backend for a wildlife photographer: print and limited edition
catalogs sourced from published spreadsheets, shopping carts, checkout and
inquiry relays to spreadsheet webhooks.
"""

import asyncio
import os
import logging
from contextlib import asynccontextmanager, suppress
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from .core.config import ENV_FILE, Settings, get_settings
from .database.carts import CartDatabase
from .database.orders import OrderDatabase
from .routes import products_router, cart_router, checkout_router, inquiries_router
from .services.catalog import CatalogRegistry
from .services.relay import WebhookRelay

# Load environment variables
load_dotenv(ENV_FILE)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use instead of the environment
        http_client: Shared client for sheet fetches and webhooks; one is
            created (and closed on shutdown) when omitted
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info(f"{settings.app_name} starting up...")
        logger.info(f"Webhooks configured: {settings.webhooks_configured}")

        client = http_client or httpx.AsyncClient(follow_redirects=True)
        app.state.settings = settings
        app.state.catalogs = CatalogRegistry.from_settings(settings, client=client)
        app.state.cart_db = CartDatabase()
        app.state.order_db = OrderDatabase()
        app.state.relay = WebhookRelay(timeout=settings.webhook_timeout, client=client)

        load_task = None
        if settings.load_catalogs_on_startup:
            load_task = asyncio.create_task(app.state.catalogs.load_all())

        yield

        logger.info(f"{settings.app_name} shutting down...")
        app.state.catalogs.close()
        if load_task and not load_task.done():
            load_task.cancel()
            with suppress(asyncio.CancelledError):
                await load_task
        await app.state.relay.close()
        if http_client is None:
            await client.aclose()

    app = FastAPI(
        title=settings.app_name,
        description="Print store, limited edition catalog, cart and checkout",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Static images
    if settings.images_dir and os.path.isdir(settings.images_dir):
        app.mount("/images", StaticFiles(directory=settings.images_dir), name="images")

    # Include API routers
    app.include_router(products_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    app.include_router(inquiries_router)

    @app.get("/")
    async def home():
        """Service index"""
        return {
            "message": f"{settings.app_name} API",
            "docs": "/docs",
            "endpoints": {
                "products": "/api/products",
                "limited_edition": "/api/limited-edition",
                "cart": "/api/cart",
                "checkout": "/api/checkout",
                "contact": "/api/contact",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "wildlife-print-store",
            "webhooks_configured": settings.webhooks_configured,
        }

    return app


configure_logging(get_settings())
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
