# Spreadsheet catalog pipeline

from .fetcher import fetch_csv
from .parser import parse_csv, split_csv_line, parse_price
from .mapper import map_print, map_limited_edition, unique_by_id
from .images import ImageResolver, print_images, limited_edition_images

__all__ = [
    "fetch_csv",
    "parse_csv",
    "split_csv_line",
    "parse_price",
    "map_print",
    "map_limited_edition",
    "unique_by_id",
    "ImageResolver",
    "print_images",
    "limited_edition_images",
]
