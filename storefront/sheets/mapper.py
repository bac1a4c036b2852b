"""Map parsed sheet rows to product records"""

import logging

from ..models.product import Product, SheetRow
from .images import ImageResolver

logger = logging.getLogger(__name__)

# Gallery images for print ids whose rows carry no gallery column.
# Matches the images uploaded for the current print set.
LEGACY_PRINT_GALLERIES: dict[str, tuple[str, ...]] = {
    "1": ("2.jpg", "3.jpg", "4.jpg"),
    "2": ("2.jpg", "3.jpg", "4.jpg"),
    "3": ("2.jpg", "3.jpg", "4.jpg"),
    "4": ("2.jpg", "3.jpg", "4.jpg"),
    "5": ("5.jpg", "6.jpg", "7.jpg"),
    "6": ("6.jpg", "7.jpg", "8.jpg"),
    "7": ("7.jpg", "8.jpg", "9.jpg"),
    "8": ("8.jpg", "9.jpg", "10.jpg"),
    "9": ("9.jpg", "10.jpg", "11.jpg"),
    "10": ("10.jpg", "11.jpg", "1.jpg"),
    "11": ("11.jpg", "1.jpg", "2.jpg"),
}


def map_print(
    row: SheetRow,
    resolver: ImageResolver,
    legacy_gallery: bool = True,
) -> Product:
    """Convert a print-store row to a product"""
    image = resolver.resolve(row.image_filename or f"{row.id}.jpg")

    if row.gallery:
        gallery = [resolver.resolve(name) for name in row.gallery]
    elif legacy_gallery and row.id in LEGACY_PRINT_GALLERIES:
        gallery = [resolver.resolve(name) for name in LEGACY_PRINT_GALLERIES[row.id]]
    else:
        gallery = [image]

    return Product(
        id=row.id,
        name=row.title,
        price=row.price,
        description=row.description,
        full_description=row.full_description or row.description,
        category=row.category or None,
        size=row.size or None,
        image=image,
        gallery=gallery,
        extra=row.extra,
    )


def map_limited_edition(row: SheetRow, resolver: ImageResolver) -> Product:
    """Convert a limited-edition row to a product; the image is always <id>.jpg"""
    gallery = [resolver.resolve(name) for name in row.gallery] if row.gallery else []

    return Product(
        id=row.id,
        name=row.title,
        price=row.price,
        description=row.description,
        full_description=row.full_description or None,
        category=row.category or None,
        size=row.size or None,
        image=resolver.resolve(f"{row.id}.jpg"),
        gallery=gallery,
        extra=row.extra,
    )


def unique_by_id(products: list[Product]) -> list[Product]:
    """Drop products whose id was already seen, keeping the first"""
    seen: set[str] = set()
    result = []
    for product in products:
        if product.id in seen:
            logger.warning(f"Duplicate product id {product.id!r} in sheet, keeping the first row")
            continue
        seen.add(product.id)
        result.append(product)
    return result
