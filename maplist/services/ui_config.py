from __future__ import annotations

from maplist.models.enums import PrimaryCategory
from maplist.schemas.places import FilterGroup, SortingOption, UIConfig

# (field, label, icon)
SORTING_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("star_rating", "Rating", "star"),
    ("review_count", "Popularity", "flame"),
    ("price_range_code", "Price", "tag"),
)


def build_ui_config() -> UIConfig:
    """Static sort/filter controls for the client; never depends on parsed data."""
    return UIConfig(
        sorting_options=[
            SortingOption(field=field, label=label, icon_svg_placeholder=icon)
            for field, label, icon in SORTING_FIELDS
        ],
        filter_groups=[
            FilterGroup(
                field="primary_category",
                label="Category",
                icon_svg_placeholder="map_pin",
                unique_values=[c.value for c in PrimaryCategory],
            )
        ],
    )
