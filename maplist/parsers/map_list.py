from __future__ import annotations

import logging

from maplist.parsers.categories import categorize
from maplist.parsers.fields import extract_place
from maplist.parsers.lines import candidate_lines, extract_title, split_lines
from maplist.schemas.places import ExtractedData, Place
from maplist.services.ui_config import build_ui_config

logger = logging.getLogger(__name__)

# Below this size an empty result is most likely the scraper's own error text.
SHORT_INPUT_CHARS = 50


def identity_key(place: Place) -> str:
    return f"{place.place_name.lower()}|{place.star_rating}|{place.review_count}"


def dedupe_places(places: list[Place]) -> list[Place]:
    """Keep rated places whose identity key is seen for the first time.

    Name + rating + reviews tells apart branches of one chain while collapsing
    the same paragraph captured twice by the scroller.
    """
    seen: set[str] = set()
    kept: list[Place] = []
    for place in places:
        if place.star_rating <= 0:
            continue
        key = identity_key(place)
        if key in seen:
            continue
        seen.add(key)
        kept.append(place)
    return kept


def parse_map_text(text: str) -> ExtractedData:
    """Turn pasted scraper output into structured places plus UI config."""
    lines = split_lines(text)
    title = extract_title(lines)

    candidates = candidate_lines(lines)
    logger.debug("Skipped %s noise lines", len(lines) - len(candidates))

    extracted: list[Place] = []
    for line in candidates:
        place = extract_place(line)
        if place is None:
            continue
        place.primary_category = categorize(place.detailed_category)
        extracted.append(place)

    places = dedupe_places(extracted)

    if not places and len(text.strip()) < SHORT_INPUT_CHARS:
        logger.info("No places found in short input (%s chars)", len(text))
    logger.info(
        "Parsed list %r: %s places kept of %s candidate lines", title, len(places), len(candidates)
    )

    return ExtractedData(list_title=title, ui_config=build_ui_config(), places=places)


async def parse_map_data(text: str) -> ExtractedData:
    return parse_map_text(text)
