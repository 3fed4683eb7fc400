"""Ordering session state and input helpers that need no console."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from pizza_palace.data import Catalog
from pizza_palace.models import DietaryCategory, LineItem, Order, OrderType, Size, ToppingOffering

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToppingSelection:
    """Parsed topping choice: zero-based indices to apply and rejected tokens."""

    indices: tuple[int, ...]
    invalid_tokens: tuple[str, ...]


def parse_topping_selection(raw: str, count: int) -> ToppingSelection:
    """
    Parse a comma-separated, 1-based topping selection.

    ``0`` (or an empty answer) selects nothing. Non-numeric tokens are
    collected in ``invalid_tokens``; numeric tokens outside ``1..count`` are
    dropped without a report. Repeated indices are applied once.
    """
    text = raw.strip()
    if text in {"", "0"}:
        return ToppingSelection((), ())

    indices: list[int] = []
    invalid: list[str] = []
    for token in text.split(","):
        stripped = token.strip()
        try:
            index = int(stripped) - 1
        except ValueError:
            invalid.append(stripped)
            continue
        if 0 <= index < count and index not in indices:
            indices.append(index)
    return ToppingSelection(tuple(indices), tuple(invalid))


def build_line_item(
    catalog: Catalog,
    category: DietaryCategory,
    pizza_index: int,
    size: Size,
    quantity: int,
    extra_cheese: bool = False,
    topping_indices: Sequence[int] = (),
) -> LineItem:
    """Resolve zero-based menu positions against the catalog into a line item."""
    pizzas = catalog.pizzas_for(category)
    if not (0 <= pizza_index < len(pizzas)):
        raise ValueError(f"pizza_index must be between 0 and {len(pizzas) - 1}")
    available: Sequence[ToppingOffering] = catalog.toppings_for(category)
    toppings = tuple(available[idx] for idx in topping_indices if 0 <= idx < len(available))
    return LineItem(
        pizza=pizzas[pizza_index],
        size=size,
        quantity=quantity,
        toppings=toppings,
        extra_cheese=extra_cheese,
    )


@dataclass
class OrderSession:
    """A single customer's ordering session: the catalog plus the order being built."""

    catalog: Catalog
    order: Order
    is_open: bool = True

    @classmethod
    def start(cls, catalog: Catalog, order_type: OrderType) -> OrderSession:
        logger.info("session_start order_type=%s", order_type.value)
        return cls(catalog=catalog, order=Order(order_type))

    def add_item(self, item: LineItem) -> None:
        if not self.is_open:
            raise RuntimeError("Cannot add items to a closed session")
        self.order.add_item(item)
        logger.info(
            "item_added pizza=%r size=%s qty=%d toppings=%d extra_cheese=%s total=%s",
            item.pizza.name,
            item.size.value,
            item.quantity,
            len(item.toppings),
            item.extra_cheese,
            item.total(),
        )

    def close(self) -> Order:
        """End the session and seal its order; neither accepts further items."""
        self.is_open = False
        self.order.seal()
        logger.info("session_closed items=%d total=%s", len(self.order.items), self.order.total())
        return self.order
