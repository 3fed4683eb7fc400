"""Pricing engine: size multipliers, line-item totals and order charges.

All amounts are ``Decimal`` and stay un-rounded; only :func:`to_display`
rounds, and only for presentation.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Iterable

from pizza_palace.constant import (
    EXTRA_CHEESE_PRICE as _EXTRA_CHEESE_PRICE_RAW,
    PACKAGING_CHARGES as _PACKAGING_CHARGES_RAW,
    SIZE_MULTIPLIERS as _SIZE_MULTIPLIERS_RAW,
    TAX_RATE as _TAX_RATE_RAW,
)
from pizza_palace.options import OrderType, Size

if TYPE_CHECKING:
    from pizza_palace.models import ToppingOffering

TAX_RATE = Decimal(_TAX_RATE_RAW)
EXTRA_CHEESE_PRICE = Decimal(_EXTRA_CHEESE_PRICE_RAW)
_CENT = Decimal("0.01")

SIZE_MULTIPLIERS: dict[Size, Decimal] = {size: Decimal(_SIZE_MULTIPLIERS_RAW[size.value]) for size in Size}
PACKAGING_CHARGES: dict[OrderType, Decimal] = {
    order_type: Decimal(_PACKAGING_CHARGES_RAW[order_type.value]) for order_type in OrderType
}


def size_multiplier(size: Size) -> Decimal:
    """Return the base-price multiplier for a size; unknown values are rejected."""
    try:
        return SIZE_MULTIPLIERS[size]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Unknown pizza size: {size!r}") from exc


def packaging_charge(order_type: OrderType) -> Decimal:
    """Return the per-line-item packaging charge for an order type."""
    try:
        return PACKAGING_CHARGES[order_type]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Unknown order type: {order_type!r}") from exc


def extra_cheese_price(extra_cheese: bool) -> Decimal:
    return EXTRA_CHEESE_PRICE if extra_cheese else Decimal("0.00")


def sized_price(base_price: Decimal, size: Size) -> Decimal:
    return Decimal(base_price) * size_multiplier(size)


def line_item_total(
    sized_price: Decimal,
    toppings: Iterable[ToppingOffering],
    extra_cheese: bool,
    quantity: int,
) -> Decimal:
    """Per-unit price (sized price, toppings, extra cheese) times quantity."""
    toppings_price = sum((topping.price for topping in toppings), Decimal("0"))
    return (Decimal(sized_price) + toppings_price + extra_cheese_price(extra_cheese)) * quantity


def to_display(amount: Decimal) -> Decimal:
    """Round an amount to two places for display."""
    return Decimal(amount).quantize(_CENT, rounding=ROUND_HALF_UP)
