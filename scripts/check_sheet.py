#!/usr/bin/env python3
"""
Sheet check script.

Fetches a catalog spreadsheet the same way the storefront does and prints
what it would serve. Useful after editing the sheet or its sharing settings.

Usage:
    python scripts/check_sheet.py [prints|limited-edition] [--url URL]
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from storefront.core.config import get_settings
from storefront.core.exceptions import CatalogError, FetchTimeout, NotPublic
from storefront.models.product import CatalogName
from storefront.sheets import (
    fetch_csv,
    parse_csv,
    split_csv_line,
    map_print,
    map_limited_edition,
    print_images,
    limited_edition_images,
)


async def check(catalog: CatalogName, url: str, timeout: float, strict: bool) -> int:
    print(f"Testing {catalog.value} sheet access...")
    print(f"URL: {url}")

    try:
        text = await fetch_csv(url, timeout)
    except NotPublic:
        print("\n✗ The sheet returned an HTML page instead of CSV.")
        print("  Share it with: Share → Anyone with the link can view")
        return 1
    except FetchTimeout:
        print(f"\n✗ The sheet did not respond within {timeout:g} seconds")
        return 1
    except CatalogError as e:
        print(f"\n✗ {e}")
        return 1

    print(f"✓ Fetched {len(text)} characters")
    header_line = text.split("\n")[0]
    print(f"\nHeaders found: {split_csv_line(header_line)}")

    try:
        rows = parse_csv(text, strict=strict)
    except CatalogError as e:
        print(f"\n✗ {e}")
        return 1

    print(f"Rows parsed: {len(rows)}")

    for row in rows:
        if catalog == CatalogName.PRINTS:
            product = map_print(row, print_images)
        else:
            product = map_limited_edition(row, limited_edition_images)

        print(f"\n  [{product.id}] {product.name} - ${product.price:g}")
        print(f"      image: {product.image}")
        if product.gallery:
            print(f"      gallery: {', '.join(product.gallery)}")
        for issue in row.issues:
            print(f"      ! {issue}")
        if row.extra:
            print(f"      extra columns: {row.extra}")

    print("\n✓ Sheet is ready to serve")
    return 0


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Check a catalog spreadsheet")
    parser.add_argument(
        "catalog",
        nargs="?",
        default=CatalogName.PRINTS.value,
        choices=[c.value for c in CatalogName],
    )
    parser.add_argument("--url", help="Override the configured sheet URL")
    parser.add_argument("--strict", action="store_true", help="Fail on malformed prices")
    args = parser.parse_args()

    catalog = CatalogName(args.catalog)
    if catalog == CatalogName.PRINTS:
        url = args.url or settings.prints_sheet_url
        timeout = settings.prints_fetch_timeout
    else:
        url = args.url or settings.limited_edition_sheet_url
        timeout = settings.limited_edition_fetch_timeout

    sys.exit(asyncio.run(check(catalog, url, timeout, args.strict or settings.strict_prices)))


if __name__ == "__main__":
    main()
