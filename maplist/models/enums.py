from __future__ import annotations

from enum import Enum


class PrimaryCategory(str, Enum):
    food = "Food"
    drink = "Drink"
    see = "See"
    shop = "Shop"
