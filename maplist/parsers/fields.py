from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from maplist.schemas.places import DEFAULT_DETAILED_CATEGORY, DEFAULT_PLACE_NAME, Place

MIDDLE_DOT = "·"

_LINK = re.compile(r"\[LINK:\s*(.*?)\]")
_RATING = re.compile(r"[0-5]\.\d")
_REVIEW_COUNT = re.compile(r"\((?=[\d,]*\d)[\d,]+\)")
_DOLLARS = re.compile(r"\$+")
_DIGIT = re.compile(r"\d")


@dataclass(frozen=True)
class FieldRule:
    """A segment classifier: ``matches`` decides, ``apply`` writes into the place."""

    name: str
    matches: Callable[[str, Place], bool]
    apply: Callable[[str, Place], None]


def _is_rating(segment: str, place: Place | None = None) -> bool:
    return _RATING.fullmatch(segment) is not None and float(segment) <= 5.0


def _set_rating(segment: str, place: Place) -> None:
    place.star_rating = float(segment)


def _is_review_count(segment: str, place: Place) -> bool:
    return _REVIEW_COUNT.fullmatch(segment) is not None


def _set_review_count(segment: str, place: Place) -> None:
    place.review_count = int(re.sub(r"[(),]", "", segment))


def _is_price(segment: str, place: Place) -> bool:
    return "$" in segment


def _set_price(segment: str, place: Place) -> None:
    price = max(_DOLLARS.findall(segment), key=len)
    place.price_range = price
    place.price_range_code = len(price)

    # "Ramen · $$" carries the category next to the price.
    # NOTE: this overwrites a category taken from another segment.
    rest = segment.replace("$", "").replace(MIDDLE_DOT, "").strip()
    if len(rest) > 2 and not _DIGIT.search(rest):
        place.detailed_category = rest


def _is_note(segment: str, place: Place) -> bool:
    lowered = segment.lower()
    return "visited" in lowered or "note:" in lowered


def _set_note(segment: str, place: Place) -> None:
    place.user_notes = segment


def _is_category(segment: str, place: Place) -> bool:
    return (
        place.detailed_category == DEFAULT_DETAILED_CATEGORY
        and not _DIGIT.search(segment)
        and len(segment) > 2
    )


def _set_category(segment: str, place: Place) -> None:
    place.detailed_category = segment.replace(MIDDLE_DOT, "").strip()


# Order is the priority: a segment is claimed by the first rule that matches.
FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("rating", _is_rating, _set_rating),
    FieldRule("review_count", _is_review_count, _set_review_count),
    FieldRule("price", _is_price, _set_price),
    FieldRule("notes", _is_note, _set_note),
    FieldRule("detailed_category", _is_category, _set_category),
)


def split_link(line: str) -> tuple[str, str]:
    """Return ``(clean_line, link)`` with the first ``[LINK: ...]`` tag removed."""
    match = _LINK.search(line)
    link = match.group(1) if match else ""
    clean = re.sub(r"\[LINK:.*?\]", "", line, count=1).strip()
    return clean, link


def split_segments(clean_line: str) -> list[str]:
    return [s for s in (part.strip() for part in clean_line.split("|")) if s]


def classify_segment(segment: str, place: Place) -> FieldRule | None:
    """Apply the first matching rule to ``place``; unmatched segments are ignored."""
    for rule in FIELD_RULES:
        if rule.matches(segment, place):
            rule.apply(segment, place)
            return rule
    return None


def extract_place(line: str) -> Place | None:
    """Build a partially filled place from one captured paragraph.

    Returns ``None`` when the line has no usable segments.
    """
    clean, link = split_link(line)
    segments = split_segments(clean)
    if not segments:
        return None

    place = Place(google_maps_link=link)

    # A paragraph that opens with its rating has lost its name.
    if _is_rating(segments[0]):
        rest = segments
    else:
        place.place_name = segments[0]
        rest = segments[1:]

    for segment in rest:
        classify_segment(segment, place)

    return place
