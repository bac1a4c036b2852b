"""
Catalog Loading

Loads a product catalog from its spreadsheet, racing the whole
fetch-parse-map pipeline against a timeout and substituting static data
on any failure.
"""

import asyncio
import logging
from functools import partial
from typing import Awaitable, Callable, Optional

import httpx

from ..core.config import Settings
from ..core.exceptions import ParseError
from ..database import fallback
from ..models.product import CatalogName, CatalogSource, CatalogState, Product, SheetRow
from ..sheets.fetcher import fetch_csv
from ..sheets.images import limited_edition_images, print_images
from ..sheets.mapper import map_limited_edition, map_print, unique_by_id
from ..sheets.parser import parse_csv

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "Loading timeout - falling back to static data"


class SheetSource:
    """Fetch, parse and map one spreadsheet into products"""

    def __init__(
        self,
        url: str,
        fetch_timeout: float,
        map_row: Callable[[SheetRow], Product],
        strict: bool = False,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self.fetch_timeout = fetch_timeout
        self.map_row = map_row
        self.strict = strict
        self.client = client

    async def __call__(self) -> list[Product]:
        text = await fetch_csv(self.url, self.fetch_timeout, client=self.client)
        rows = parse_csv(text, strict=self.strict)
        products = unique_by_id([self.map_row(row) for row in rows])
        if not products:
            raise ParseError("Sheet contains no products")
        return products


class CatalogLoader:
    """
    Holds one catalog snapshot and refreshes it from its source.

    Each load() is a single attempt: the source is raced against the
    timeout, and on timeout or any error the fallback list is loaded
    instead. Results that arrive after close(), or after a newer load()
    has started, are discarded.
    """

    def __init__(
        self,
        name: CatalogName,
        source: Callable[[], Awaitable[list[Product]]],
        fallback: Callable[[], list[Product]],
        timeout: float,
    ):
        self.name = name
        self.timeout = timeout
        self._source = source
        self._fallback = fallback
        self._state = CatalogState()
        self._mounted = True
        self._generation = 0

    @property
    def state(self) -> CatalogState:
        """Current snapshot"""
        return self._state.model_copy()

    @property
    def mounted(self) -> bool:
        return self._mounted

    def close(self) -> None:
        """Stop accepting results from in-flight loads"""
        self._mounted = False
        self._state = self._state.model_copy(update={"loading": False})

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product from the current snapshot"""
        return next((p for p in self._state.products if p.id == product_id), None)

    def _is_current(self, generation: int) -> bool:
        return self._mounted and generation == self._generation

    async def load(self) -> CatalogState:
        """Run one load attempt and return the resulting snapshot"""
        self._generation += 1
        generation = self._generation
        self._state = self._state.model_copy(update={"loading": True})

        logger.info(f"Loading {self.name.value} catalog...")

        try:
            products = await asyncio.wait_for(self._source(), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error(f"{self.name.value} catalog load timed out after {self.timeout:g} seconds")
            self._load_fallback(generation, TIMEOUT_MESSAGE)
        except Exception as e:
            logger.error(f"Error loading {self.name.value} catalog: {e}")
            self._load_fallback(generation, str(e) or "Failed to load products")
        else:
            if self._is_current(generation):
                self._state = CatalogState(
                    products=products,
                    loading=False,
                    error=None,
                    source=CatalogSource.SHEET,
                )
                logger.info(f"{self.name.value} catalog loaded from sheet: {len(products)} products")
            else:
                logger.info(f"Discarding stale {self.name.value} catalog result")

        return self.state

    def _load_fallback(self, generation: int, error: str) -> None:
        if not self._is_current(generation):
            logger.info(f"Discarding stale {self.name.value} catalog error: {error}")
            return

        try:
            products = self._fallback()
        except Exception as e:
            logger.error(f"Failed to load static fallback for {self.name.value}: {e}")
            self._state = CatalogState(products=[], loading=False, error=error, source=None)
            return

        self._state = CatalogState(
            products=products,
            loading=False,
            error=error,
            source=CatalogSource.FALLBACK,
        )
        logger.info(f"Loaded static fallback {self.name.value} products: {len(products)}")


class CatalogRegistry:
    """One loader per catalog"""

    def __init__(self, loaders: dict[CatalogName, CatalogLoader]):
        self.loaders = loaders

    def get(self, name: CatalogName) -> CatalogLoader:
        return self.loaders[name]

    async def load_all(self) -> None:
        """Load every catalog concurrently"""
        await asyncio.gather(*(loader.load() for loader in self.loaders.values()))

    def close(self) -> None:
        for loader in self.loaders.values():
            loader.close()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        client: Optional[httpx.AsyncClient] = None,
    ) -> "CatalogRegistry":
        """Build the print and limited-edition loaders from settings"""
        prints = CatalogLoader(
            name=CatalogName.PRINTS,
            source=SheetSource(
                url=settings.prints_sheet_url,
                fetch_timeout=settings.prints_fetch_timeout,
                map_row=partial(
                    map_print,
                    resolver=print_images,
                    legacy_gallery=settings.legacy_gallery,
                ),
                strict=settings.strict_prices,
                client=client,
            ),
            fallback=fallback.load_prints,
            timeout=settings.catalog_load_timeout,
        )
        limited_edition = CatalogLoader(
            name=CatalogName.LIMITED_EDITION,
            source=SheetSource(
                url=settings.limited_edition_sheet_url,
                fetch_timeout=settings.limited_edition_fetch_timeout,
                map_row=partial(map_limited_edition, resolver=limited_edition_images),
                strict=settings.strict_prices,
                client=client,
            ),
            fallback=fallback.load_limited_edition,
            timeout=settings.catalog_load_timeout,
        )
        return cls({
            CatalogName.PRINTS: prints,
            CatalogName.LIMITED_EDITION: limited_edition,
        })
