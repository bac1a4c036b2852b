"""Product models for the print store"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class CatalogName(str, Enum):
    PRINTS = "prints"
    LIMITED_EDITION = "limited-edition"


class CatalogSource(str, Enum):
    SHEET = "sheet"
    FALLBACK = "fallback"


class Product(BaseModel):
    """Product record in a catalog snapshot"""
    id: str
    name: str
    price: float = Field(ge=0)
    description: str = ""
    full_description: Optional[str] = None
    category: Optional[str] = None
    size: Optional[str] = None
    image: str
    gallery: list[str] = []
    extra: dict[str, str] = {}


class SheetRow(BaseModel):
    """One parsed spreadsheet row, keyed by canonical field names"""
    line: int
    id: str = ""
    title: str = ""
    price: float = 0.0
    description: str = ""
    full_description: Optional[str] = None
    image_filename: Optional[str] = None
    category: Optional[str] = None
    size: Optional[str] = None
    gallery: Optional[list[str]] = None
    extra: dict[str, str] = {}
    issues: list[str] = []


class CatalogState(BaseModel):
    """Snapshot exposed to clients: products plus load status"""
    products: list[Product] = []
    loading: bool = False
    error: Optional[str] = None
    source: Optional[CatalogSource] = None


class CatalogResponse(BaseModel):
    """Catalog API response"""
    catalog: CatalogName
    products: list[Product]
    loading: bool
    error: Optional[str] = None
    source: Optional[CatalogSource] = None
    total: int
