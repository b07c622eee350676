from __future__ import annotations

from pydantic import BaseModel, Field

from maplist.models.enums import PrimaryCategory

DEFAULT_LIST_TITLE = "My Saved Places"
DEFAULT_PLACE_NAME = "Unknown Place"
DEFAULT_DETAILED_CATEGORY = "Place"


class Place(BaseModel):
    """One saved point of interest.

    Zero values (``star_rating=0``, ``review_count=0``, empty strings) mean the
    field was not found in the captured text.
    """

    place_name: str = Field(default=DEFAULT_PLACE_NAME, min_length=1)
    primary_category: PrimaryCategory = PrimaryCategory.food
    detailed_category: str = DEFAULT_DETAILED_CATEGORY
    star_rating: float = Field(default=0.0, ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    price_range: str = ""
    price_range_code: int = Field(default=0, ge=0)
    user_notes: str = ""
    google_maps_link: str = ""


class SortingOption(BaseModel):
    field: str
    label: str
    icon_svg_placeholder: str


class FilterGroup(BaseModel):
    field: str
    label: str
    icon_svg_placeholder: str
    unique_values: list[str]


class UIConfig(BaseModel):
    sorting_options: list[SortingOption]
    filter_groups: list[FilterGroup]


class ExtractedData(BaseModel):
    list_title: str = DEFAULT_LIST_TITLE
    # Reserved; the scraper output carries no source URL yet.
    list_source_url: str = ""
    ui_config: UIConfig
    places: list[Place] = Field(default_factory=list)
