import pytest

from core.listing import (
    ListingFields,
    build_details,
    build_display_item,
    find_item,
    format_case_size,
    format_price,
    format_year,
    with_images,
)

from factories import files, number, select, title


@pytest.mark.parametrize(
    "value, expected",
    [
        (1250, "$1,250"),
        (12345, "$12,345"),
        (1234567.0, "$1,234,567"),
        (0, "Inquire"),
        ("", "Inquire"),
        (None, "Inquire"),
        ("not a number", "Inquire"),
        (0.0001, "$0"),
        (1234.5, "$1,234.5"),
    ],
)
def test_format_price(value, expected):
    assert format_price(value) == expected


def test_case_size_and_year():
    assert format_case_size(40) == "40mm"
    assert format_case_size(39.5) == "39.5mm"
    assert format_case_size("") == ""
    assert format_year(2019.5) == "2020"
    assert format_year(1968) == "1968"
    assert format_year("") == ""


def test_details_joins_present_parts():
    assert build_details("Steel", "Black", "40mm", "Box included") == (
        "Steel, Black dial, 40mm, Box included."
    )
    assert build_details("", "Blue", "", "") == "Blue dial."
    assert build_details("", "", "", "") == ""


def test_full_record(full_watch_page):
    item = build_display_item(full_watch_page, ListingFields())

    assert item.id == "watch-1"
    assert item.name == "Rolex Submariner"
    assert item.ref == "124060"
    assert item.price == "$12,345"
    assert item.caseSize == "41mm"
    assert item.year == "2022"
    assert item.details == "Steel, Black dial, 41mm, Full set."
    assert item.contents == "Box & Papers"
    assert item.image == "https://img/1.jpg"
    assert item.images == ["https://img/1.jpg", "https://img/2.jpg"]


def test_dedicated_name_wins(make_page):
    page = make_page(
        "p", **{"Watch": title("Pepsi GMT"), "Brand": select("Rolex")}
    )
    assert build_display_item(page, ListingFields()).name == "Pepsi GMT"


def test_empty_record_degrades_to_defaults(make_page):
    item = build_display_item(make_page("empty"), ListingFields())

    assert item.to_dict() == {
        "id": "empty",
        "brand": "",
        "name": "",
        "ref": "",
        "price": "Inquire",
        "details": "",
        "image": "",
        "images": [],
        "year": "",
        "condition": "",
        "material": "",
        "dial": "",
        "caseSize": "",
        "contents": "Watch Only",
        "description": "",
        "model": "",
    }


def test_page_without_properties_key():
    item = build_display_item({"id": "bare"}, ListingFields())
    assert item.id == "bare"
    assert item.price == "Inquire"


def test_collectible_field_names(make_page):
    fields = ListingFields(name="Piece", material="Case Material", extra="Bracelet/Strap")
    page = make_page(
        "c1",
        **{
            "Piece": title("Speedmaster 145.022"),
            "Case Material": select("Steel"),
            "Bracelet/Strap": select("1171 bracelet"),
            "Asking Price": number(0),
        },
    )
    item = build_display_item(page, fields)
    assert item.name == "Speedmaster 145.022"
    assert item.details == "Steel, 1171 bracelet."
    assert item.price == "Inquire"


def test_find_and_image_filter(make_page):
    a = build_display_item(make_page("a", Images=files("x")), ListingFields())
    b = build_display_item(make_page("b"), ListingFields())

    assert find_item([a, b], "b") is b
    assert find_item([a, b], "zzz") is None
    assert with_images([a, b]) == [a]
