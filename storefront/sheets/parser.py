"""Parse spreadsheet CSV exports into canonical rows."""

import logging
import re
from typing import Optional

from ..core.exceptions import ParseError
from ..models.product import SheetRow

logger = logging.getLogger(__name__)

# Spreadsheet header (lowercased) -> canonical field
HEADER_ALIASES = {
    "id": "id",
    "title": "title",
    "name": "title",
    "price": "price",
    "description": "description",
    "short_description": "description",
    "full_description": "full_description",
    "long_description": "full_description",
    "image": "image_filename",
    "image_filename": "image_filename",
    "category": "category",
    "size": "size",
    "gallery": "gallery",
}

# Leading number, the same prefix parseFloat() would accept
_NUMBER_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_GALLERY_SEPARATORS = re.compile(r"[;|]")


def split_csv_line(line: str) -> list[str]:
    """
    Split one CSV line into fields.

    A double quote toggles quoted mode; commas inside quotes are literal.
    Quote characters themselves are dropped from the output.
    """
    fields = []
    current = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields


def parse_price(value: str) -> tuple[float, bool]:
    """
    Parse a price cell.

    Returns:
        Tuple of (price, clean) where clean is False when the cell was not
        a plain number. Unparseable cells give 0.
    """
    text = value.strip()
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return 0.0, False
    return float(match.group(0)), match.group(0) == text


def _parse_gallery(value: str) -> Optional[list[str]]:
    names = [part.strip() for part in _GALLERY_SEPARATORS.split(value)]
    names = [name for name in names if name]
    return names or None


def _clean(value: str) -> str:
    return value.strip().replace('"', "")


def parse_csv(text: str, strict: bool = False) -> list[SheetRow]:
    """
    Parse CSV text into rows keyed by canonical field names.

    The first line is the header row. Blank lines are skipped. Headers that
    have no canonical mapping are kept verbatim in ``extra``.

    Args:
        text: Raw CSV text
        strict: Raise ParseError for a malformed price instead of using 0

    Raises:
        ParseError: No header row, or a malformed price in strict mode
    """
    lines = text.split("\n")
    if not lines or not lines[0].strip():
        raise ParseError("CSV has no header row")

    headers = [_clean(h) for h in split_csv_line(lines[0])]
    rows: list[SheetRow] = []

    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue

        values = split_csv_line(line)
        fields: dict = {"line": line_number}
        extra: dict[str, str] = {}
        issues: list[str] = []

        for index, header in enumerate(headers):
            if not header:
                continue
            value = _clean(values[index]) if index < len(values) else ""
            key = HEADER_ALIASES.get(header.lower())

            if key is None:
                extra[header] = value
            elif key == "price":
                price, clean = parse_price(value)
                if price < 0:
                    price, clean = 0.0, False
                if not clean:
                    if strict:
                        raise ParseError(
                            f"Invalid price {value!r} on line {line_number}",
                            field="price",
                            row=line_number,
                        )
                    issues.append(f"price: {value!r} read as {price:g}")
                    logger.warning(
                        f"Line {line_number}: price {value!r} is not a valid number, using {price:g}"
                    )
                fields["price"] = price
            elif key == "gallery":
                fields["gallery"] = _parse_gallery(value)
            else:
                fields[key] = value

        rows.append(SheetRow(**fields, extra=extra, issues=issues))

    logger.debug(f"Parsed {len(rows)} rows with headers {headers}")
    return rows
