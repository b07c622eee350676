import asyncio
import logging

import pytest

from maplist.models.enums import PrimaryCategory
from maplist.parsers.map_list import dedupe_places, identity_key, parse_map_data, parse_map_text
from maplist.schemas.places import Place
from maplist.services.ui_config import build_ui_config


MESSY_CAPTURE = "\n".join(
    [
        "List Name: Weekend in Kyoto",
        "",
        "By Aiko · 14 places",
        "+3",
        "Share",
        "Gion Tanto | 4.4 | (2,101) | Okonomiyaki · $$ [LINK: https://maps.google.com/a]",
        "Bar Rocking Chair | 4.7 | (388) | Cocktail Bar | $$$",
        "Gion Tanto | 4.4 | (2,101) | Okonomiyaki · $$ [LINK: https://maps.google.com/a]",
        "Starbucks | 4.1 | (900) | Coffee Shop | $$",
        "Starbucks | 4.3 | (1,500) | Coffee Shop | $$",
        "Fushimi Inari Taisha | 4.8 | (80,000) | Shinto Shrine | Visited",
        "Nishiki Market | 4.3 | (33,000) | Market",
        "Closed Diner | Diner | $",
        "Hotel Granvia | 4.2 | (4,000) | Accommodation · Hotel",
        "| | |",
        "Extraction Complete",
        "Found 9 places. Copy to MapList.",
    ]
)


def test_empty_input():
    result = parse_map_text("")
    assert result.list_title == "My Saved Places"
    assert result.list_source_url == ""
    assert result.places == []
    assert result.ui_config == build_ui_config()


def test_tokyo_trip_example(tokyo_trip):
    result = parse_map_text(tokyo_trip)
    assert result.list_title == "Tokyo Trip"
    assert len(result.places) == 1
    place = result.places[0]
    assert place.place_name == "Ramen Ikkousha"
    assert place.star_rating == 4.5
    assert place.review_count == 1234
    assert place.price_range == "$$"
    assert place.price_range_code == 2
    assert "Ramen" in place.detailed_category
    assert place.primary_category is PrimaryCategory.food
    assert place.google_maps_link == "https://maps.google.com/x"


def test_duplicate_paragraph_kept_once():
    line = "Ramen Ikkousha | 4.5 | (1,234) | Ramen · $$"
    result = parse_map_text(f"{line}\n\n{line}\n")
    assert len(result.places) == 1


def test_rating_without_name():
    result = parse_map_text("| 4.2 | (10) | Ramen")
    assert [p.place_name for p in result.places] == ["Unknown Place"]


def test_unrated_lines_dropped():
    result = parse_map_text("Closed Diner | Diner | $\n\nNo Rating | (12)")
    assert result.places == []


def test_messy_capture():
    result = parse_map_text(MESSY_CAPTURE)
    assert result.list_title == "Weekend in Kyoto"

    names = [p.place_name for p in result.places]
    assert names == [
        "Gion Tanto",
        "Bar Rocking Chair",
        "Starbucks",
        "Starbucks",
        "Fushimi Inari Taisha",
        "Nishiki Market",
        "Hotel Granvia",
    ]

    by_category = {p.place_name: p.primary_category for p in result.places}
    assert by_category["Gion Tanto"] is PrimaryCategory.food
    assert by_category["Bar Rocking Chair"] is PrimaryCategory.drink
    assert by_category["Starbucks"] is PrimaryCategory.food
    assert by_category["Fushimi Inari Taisha"] is PrimaryCategory.see
    assert by_category["Nishiki Market"] is PrimaryCategory.shop
    assert by_category["Hotel Granvia"] is PrimaryCategory.see

    shrine = result.places[4]
    assert shrine.user_notes == "Visited"
    assert shrine.review_count == 80000


def test_retained_records_invariants(tokyo_trip):
    result = parse_map_text(MESSY_CAPTURE + "\n" + tokyo_trip)
    keys = [identity_key(p) for p in result.places]
    assert len(keys) == len(set(keys))
    for place in result.places:
        assert 0 < place.star_rating <= 5.0
        assert place.review_count >= 0
        assert place.price_range_code == len(place.price_range)


def test_identity_key_ignores_name_case():
    a = Place(place_name="Cafe Kitsune", star_rating=4.1, review_count=7)
    b = Place(place_name="CAFE KITSUNE", star_rating=4.1, review_count=7)
    assert identity_key(a) == identity_key(b)
    assert dedupe_places([a, b]) == [a]


def test_dedupe_state_is_per_call():
    line = "Ramen Ikkousha | 4.5 | (1,234)"
    assert len(parse_map_text(line).places) == 1
    assert len(parse_map_text(line).places) == 1


@pytest.mark.parametrize("text", ["\n\n\n", "|||", "[LINK: x]", "List Name:", "$$$ | 9.9 | ((1))", "\r\n\r\n"])
def test_never_raises(text):
    result = parse_map_text(text)
    assert result.places == []


def test_async_entry_point(tokyo_trip):
    result = asyncio.run(parse_map_data(tokyo_trip))
    assert result == parse_map_text(tokyo_trip)


def test_nothing_found_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="maplist.parsers.map_list"):
        parse_map_text("Error: Could not find places.")
    assert "No places found" in caplog.text


def test_output_is_json_ready(tokyo_trip):
    payload = parse_map_text(tokyo_trip).model_dump(mode="json")
    assert payload["places"][0]["primary_category"] == "Food"
    assert payload["ui_config"]["filter_groups"][0]["unique_values"] == ["Food", "Drink", "See", "Shop"]


def test_blank_list_name_gives_empty_title():
    result = parse_map_text("List Name:   \n\nA | 4.5")
    assert result.list_title == ""
    assert [p.place_name for p in result.places] == ["A"]
