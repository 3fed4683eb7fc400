"""Domain models for the pizza ordering flow."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from pizza_palace import pricing
from pizza_palace.constant import MAX_QUANTITY, MIN_QUANTITY
from pizza_palace.options import DietaryCategory, OrderType, Size

__all__ = [
    "DietaryCategory",
    "LineItem",
    "Order",
    "OrderType",
    "PizzaOffering",
    "Size",
    "ToppingOffering",
]


@dataclass(frozen=True)
class PizzaOffering:
    """A pizza on the menu; default toppings are descriptive and never priced."""

    name: str
    category: DietaryCategory
    base_price: Decimal
    default_toppings: tuple[str, ...] = ()
    jain_friendly: bool = False
    meat_type: str | None = None

    @property
    def is_vegetarian(self) -> bool:
        return self.category is DietaryCategory.VEGETARIAN

    @property
    def description(self) -> str:
        if self.is_vegetarian:
            return "Delicious vegetarian pizza" + (" (Jain Friendly)" if self.jain_friendly else "")
        return f"Mouth-watering non-vegetarian pizza with {self.meat_type}"


@dataclass(frozen=True)
class ToppingOffering:
    """A paid custom topping."""

    name: str
    price: Decimal
    is_vegetarian: bool


@dataclass(frozen=True)
class LineItem:
    """One configured pizza within an order. Every amount is derived on request."""

    pizza: PizzaOffering
    size: Size
    quantity: int
    toppings: tuple[ToppingOffering, ...] = ()
    extra_cheese: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.size, Size):
            raise ValueError(f"Unknown pizza size: {self.size!r}")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"quantity must be an integer, got {self.quantity!r}")
        if not (MIN_QUANTITY <= self.quantity <= MAX_QUANTITY):
            raise ValueError(f"quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}")
        object.__setattr__(self, "toppings", tuple(self.toppings))

    def sized_price(self) -> Decimal:
        return pricing.sized_price(self.pizza.base_price, self.size)

    def base_total(self) -> Decimal:
        """Sized price for the whole quantity, before toppings and cheese."""
        return self.sized_price() * self.quantity

    def topping_total(self, topping: ToppingOffering) -> Decimal:
        return topping.price * self.quantity

    def extra_cheese_total(self) -> Decimal:
        return pricing.extra_cheese_price(self.extra_cheese) * self.quantity

    def total(self) -> Decimal:
        return pricing.line_item_total(self.sized_price(), self.toppings, self.extra_cheese, self.quantity)


@dataclass
class Order:
    """An order type plus an append-only sequence of line items.

    Once sealed the order is final and rejects further items.
    """

    order_type: OrderType
    ordered_at: datetime = field(default_factory=datetime.now)
    _items: list[LineItem] = field(default_factory=list, init=False, repr=False)
    _sealed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.order_type, OrderType):
            raise ValueError(f"Unknown order type: {self.order_type!r}")

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def add_item(self, item: LineItem) -> None:
        if self._sealed:
            raise RuntimeError("Cannot add items to a sealed order")
        self._items.append(item)

    def seal(self) -> None:
        self._sealed = True

    def subtotal(self) -> Decimal:
        return sum((item.total() for item in self._items), Decimal("0"))

    def packaging_charges(self) -> Decimal:
        """Charged per line item, not per pizza unit."""
        return pricing.packaging_charge(self.order_type) * len(self._items)

    def tax(self) -> Decimal:
        return (self.subtotal() + self.packaging_charges()) * pricing.TAX_RATE

    def total(self) -> Decimal:
        return self.subtotal() + self.packaging_charges() + self.tax()
