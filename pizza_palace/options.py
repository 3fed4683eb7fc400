"""Closed choice sets shared by the models and the pricing tables."""

from __future__ import annotations

from enum import Enum


class DietaryCategory(Enum):
    VEGETARIAN = "Vegetarian"
    NON_VEGETARIAN = "Non-Vegetarian"


class Size(Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    EXTRA_LARGE = "Extra Large"


class OrderType(Enum):
    DINE_IN = "Dine In"
    TAKE_AWAY = "Take Away"
