import pytest

from storefront.core.exceptions import ParseError
from storefront.sheets.parser import parse_csv, parse_price, split_csv_line


def test_parser_skips_blank_lines():
    text = "id,title,price\n1,A,10\n\n2,B,20\n   \n3,C,30\n"
    rows = parse_csv(text)
    assert [r.id for r in rows] == ["1", "2", "3"]


def test_quoted_comma_stays_in_one_field():
    assert split_csv_line('3,"Tiger, Portrait",420') == ["3", "Tiger, Portrait", "420"]

    rows = parse_csv('id,title,price\n3,"Tiger, Portrait",420\n')
    assert rows[0].title == "Tiger, Portrait"
    assert rows[0].price == 420


def test_headers_map_case_insensitively():
    text = (
        "ID,Name,PRICE,Short_Description,Long_Description,Image,Category,Size\n"
        "7,Forest Antelope,320,Graceful,Longer text,7.jpg,Wildlife,A3\n"
    )
    row = parse_csv(text)[0]
    assert row.id == "7"
    assert row.title == "Forest Antelope"
    assert row.price == 320
    assert row.description == "Graceful"
    assert row.full_description == "Longer text"
    assert row.image_filename == "7.jpg"
    assert row.category == "Wildlife"
    assert row.size == "A3"
    assert row.extra == {}


def test_unmapped_headers_are_kept_verbatim():
    row = parse_csv("id,title,price,Edition Size\n1,A,10,50 prints\n")[0]
    assert row.extra == {"Edition Size": "50 prints"}


def test_non_numeric_price_becomes_zero():
    row = parse_csv("id,title,price\n1,A,call us\n")[0]
    assert row.price == 0
    assert row.issues
    assert "price" in row.issues[0]


def test_price_uses_leading_number():
    row = parse_csv("id,title,price\n1,A,280 USD\n")[0]
    assert row.price == 280


def test_strict_mode_raises_on_malformed_price():
    with pytest.raises(ParseError) as exc:
        parse_csv("id,title,price\n1,A,10\n2,B,abc\n", strict=True)
    assert exc.value.field == "price"
    assert exc.value.row == 3


def test_negative_price_is_clamped():
    row = parse_csv("id,title,price\n1,A,-5\n")[0]
    assert row.price == 0
    with pytest.raises(ParseError):
        parse_csv("id,title,price\n1,A,-5\n", strict=True)


def test_missing_trailing_values_are_empty():
    row = parse_csv("id,title,price,description\n1,A\n")[0]
    assert row.description == ""
    assert row.price == 0


def test_crlf_line_endings_are_trimmed():
    rows = parse_csv('id,title,price\r\n1,"A",10\r\n')
    assert rows[0].title == "A"
    assert rows[0].price == 10


def test_gallery_column_is_split():
    row = parse_csv('id,title,price,gallery\n1,A,10,"2.jpg; 3.jpg|4.jpg"\n')[0]
    assert row.gallery == ["2.jpg", "3.jpg", "4.jpg"]

    row = parse_csv("id,title,price,gallery\n1,A,10,\n")[0]
    assert row.gallery is None


def test_empty_text_has_no_header():
    with pytest.raises(ParseError):
        parse_csv("")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("350", (350.0, True)),
        ("12.50", (12.5, True)),
        ("", (0.0, False)),
        ("$20", (0.0, False)),
        ("1e3", (1000.0, True)),
    ],
)
def test_parse_price(value, expected):
    assert parse_price(value) == expected
