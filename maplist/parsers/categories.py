from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from maplist.models.enums import PrimaryCategory


@dataclass(frozen=True)
class CategoryRule:
    category: PrimaryCategory
    keywords: frozenset[str]
    veto: Callable[[str], bool] | None = None

    def matches(self, text: str) -> bool:
        if not any(k in text for k in self.keywords):
            return False
        return not (self.veto and self.veto(text))


DRINK_KEYWORDS = frozenset({
    "bar", "cocktail", "pub", "brewery", "wine", "izakaya", "club", "speakeasy", "lounge", "taproom",
    "beverage", "nightclub", "disco", "biergarten", "cider", "whisky", "sake", "distillery", "tavern",
    "gastropub",
})

SEE_KEYWORDS = frozenset({
    # nature, parks
    "park", "garden", "nature", "hiking", "trail", "beach", "island", "view", "lookout", "scenic",
    "waterfall", "camp", "glacier", "forest", "mountain", "lake", "river", "cave", "bay", "reserve",
    "botanical",
    # culture, history
    "museum", "gallery", "art", "historic", "landmark", "monument", "statue", "castle", "palace", "fort",
    "temple", "church", "cathedral", "mosque", "synagogue", "shrine", "chapel", "monastery", "pagoda",
    "cemetery", "memorial", "ruin", "heritage",
    # entertainment, activities
    "attraction", "theater", "theatre", "cinema", "movie", "stadium", "arena", "coliseum", "racetrack",
    "casino", "bowling", "golf", "gym", "fitness", "yoga", "pilates", "swim", "pool", "skate", "rink",
    "zoo", "aquarium", "amusement", "theme park", "water park", "fairground", "circus", "escape room",
    "karaoke", "billard", "play", "playground",
    # institutions
    "library", "school", "college", "university", "institute", "academy", "center", "centre",
    "hall", "auditorium", "embassy", "consulate", "hospital", "clinic", "airport", "station", "terminal",
    "bridge", "tower", "observatory", "observation", "pier", "harbor", "port",
    # lodging
    "hotel", "motel", "hostel", "resort", "inn", "lodge", "guesthouse", "villa", "cottage", "apartment",
})

SHOP_KEYWORDS = frozenset({
    # retail
    "mall", "store", "market", "plaza", "boutique", "shop", "outlet", "center", "mart", "supermarket",
    "grocery", "retail", "dealer", "supplier", "wholesaler", "distributor", "agency", "broker",
    # food retail stays in Shop
    "bakery", "patisserie", "cake", "pastry", "butcher", "deli", "convenience", "liquor", "wine store",
    # goods
    "fashion", "clothing", "shoe", "apparel", "jewelry", "jeweler", "goldsmith", "watch",
    "furniture", "decor", "hardware", "diy", "tool", "paint", "garden center", "florist", "flower",
    "electronics", "computer", "phone", "camera", "appliance", "music store", "book", "stationery",
    "sport", "toy", "hobby", "gift", "souvenir", "antique", "cosmetic", "beauty supply", "pharmacy",
    "drug store", "auto", "car", "motorcycle", "vehicle", "tire", "parts",
    # services
    "salon", "hair", "barber", "beauty", "spa", "nail", "tattoo", "massage",
    "bank", "atm", "finance", "insurance", "real estate", "legal", "lawyer",
    "repair", "cleaner", "laundry", "tailor", "photo", "print", "post", "shipping",
})

LODGING_WORDS = ("hotel", "resort")


def _is_cafe(text: str) -> bool:
    return "coffee" in text or "cafe" in text


# Checked in order; Food is never matched by keyword, only used as the fallback.
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(PrimaryCategory.drink, DRINK_KEYWORDS),
    CategoryRule(PrimaryCategory.see, SEE_KEYWORDS),
    # "Coffee Shop" is somewhere to eat, not retail
    CategoryRule(PrimaryCategory.shop, SHOP_KEYWORDS, veto=_is_cafe),
)


def categorize(detailed_category: str) -> PrimaryCategory:
    text = detailed_category.lower()
    for rule in CATEGORY_RULES:
        if rule.matches(text):
            return rule.category
    if any(word in text for word in LODGING_WORDS):
        return PrimaryCategory.see
    return PrimaryCategory.food
