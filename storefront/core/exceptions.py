"""Catalog pipeline errors"""

from typing import Optional


class CatalogError(Exception):
    """Base exception for catalog fetch/parse/map errors"""
    pass


class FetchTimeout(CatalogError):
    """The spreadsheet did not answer within the configured bound"""
    pass


class FetchError(CatalogError):
    """Non-2xx response or network failure"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class NotPublic(CatalogError):
    """An HTML page came back instead of CSV (sheet not shared publicly)"""
    pass


class ParseError(CatalogError):
    """Malformed CSV structure or field value"""

    def __init__(self, message: str, field: Optional[str] = None, row: Optional[int] = None):
        self.field = field
        self.row = row
        super().__init__(message)
