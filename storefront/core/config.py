"""Storefront Configuration"""

import os
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache

ENV_FILE = os.path.join(os.path.dirname(__file__), "..", "..", "config", ".env")


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Wildlife Print Store"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001

    # Catalog sources (published spreadsheet CSV exports)
    prints_sheet_url: str = (
        "https://docs.google.com/spreadsheets/d/"
        "1g9BnlXJ8-LePOFRGGrOTi0v8B_6nKlVTGlPzbMUQ75I/export?format=csv&gid=0"
    )
    limited_edition_sheet_url: str = (
        "https://docs.google.com/spreadsheets/d/e/"
        "2PACX-1vTyaRU4DoK-iQJTrBGxVG5thCvMM_-KygFo-xZystMfNc-ftAvw4udPGudzZI99O1x1yBckFujNJWhz"
        "/pub?output=csv"
    )
    prints_fetch_timeout: float = 5.0
    limited_edition_fetch_timeout: float = 8.0
    catalog_load_timeout: float = 8.0
    load_catalogs_on_startup: bool = True

    # Sheet data handling
    strict_prices: bool = False
    legacy_gallery: bool = True

    # Submission webhooks
    order_webhook_url: str = ""
    contact_webhook_url: str = ""
    inquiry_webhook_url: str = ""
    webhook_timeout: float = 10.0
    mask_order_failures: bool = True
    order_timezone: str = "Asia/Bangkok"

    # Static images served at /images
    images_dir: Optional[str] = None

    class Config:
        env_file = ENV_FILE
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @property
    def webhooks_configured(self) -> bool:
        """Check if every submission webhook is configured"""
        return all([
            self.order_webhook_url,
            self.contact_webhook_url,
            self.inquiry_webhook_url,
        ])


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
