"""Static pizza and topping catalog."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pizza_palace.constant import (
    NON_VEG_PIZZAS,
    NON_VEG_TOPPINGS,
    VEG_DEFAULT_TOPPINGS,
    VEG_PIZZAS,
    VEG_TOPPINGS,
)
from pizza_palace.models import DietaryCategory, PizzaOffering, ToppingOffering


def _veg_pizza(raw: dict[str, str | bool]) -> PizzaOffering:
    return PizzaOffering(
        name=str(raw["name"]),
        category=DietaryCategory.VEGETARIAN,
        base_price=Decimal(str(raw["base_price"])),
        default_toppings=tuple(VEG_DEFAULT_TOPPINGS),
        jain_friendly=bool(raw["jain_friendly"]),
    )


def _non_veg_pizza(raw: dict[str, str]) -> PizzaOffering:
    meat_type = raw["meat_type"]
    return PizzaOffering(
        name=raw["name"],
        category=DietaryCategory.NON_VEGETARIAN,
        base_price=Decimal(raw["base_price"]),
        default_toppings=(*VEG_DEFAULT_TOPPINGS, meat_type),
        meat_type=meat_type,
    )


def _toppings(raw: dict[str, str], is_vegetarian: bool) -> tuple[ToppingOffering, ...]:
    return tuple(ToppingOffering(name, Decimal(price), is_vegetarian) for name, price in raw.items())


@dataclass(frozen=True)
class Catalog:
    """Read-only menu partitioned by dietary category."""

    _veg_pizzas: tuple[PizzaOffering, ...]
    _non_veg_pizzas: tuple[PizzaOffering, ...]
    _veg_toppings: tuple[ToppingOffering, ...]
    _non_veg_toppings: tuple[ToppingOffering, ...]

    def veg_pizzas(self) -> tuple[PizzaOffering, ...]:
        return self._veg_pizzas

    def non_veg_pizzas(self) -> tuple[PizzaOffering, ...]:
        return self._non_veg_pizzas

    def veg_toppings(self) -> tuple[ToppingOffering, ...]:
        return self._veg_toppings

    def non_veg_toppings(self) -> tuple[ToppingOffering, ...]:
        return self._non_veg_toppings

    def pizzas_for(self, category: DietaryCategory) -> tuple[PizzaOffering, ...]:
        if category is DietaryCategory.VEGETARIAN:
            return self._veg_pizzas
        if category is DietaryCategory.NON_VEGETARIAN:
            return self._non_veg_pizzas
        raise ValueError(f"Unknown dietary category: {category!r}")

    def toppings_for(self, category: DietaryCategory) -> tuple[ToppingOffering, ...]:
        """Vegetarian toppings always; non-veg toppings appended for non-veg pizzas."""
        if category is DietaryCategory.VEGETARIAN:
            return self._veg_toppings
        if category is DietaryCategory.NON_VEGETARIAN:
            return self._veg_toppings + self._non_veg_toppings
        raise ValueError(f"Unknown dietary category: {category!r}")


def default_catalog() -> Catalog:
    """Build the catalog from the editable constants."""
    return Catalog(
        _veg_pizzas=tuple(_veg_pizza(raw) for raw in VEG_PIZZAS),
        _non_veg_pizzas=tuple(_non_veg_pizza(raw) for raw in NON_VEG_PIZZAS),
        _veg_toppings=_toppings(VEG_TOPPINGS, is_vegetarian=True),
        _non_veg_toppings=_toppings(NON_VEG_TOPPINGS, is_vegetarian=False),
    )
