"""Bill and menu rendering helpers."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from pizza_palace.constant import CLOSING_MESSAGES, CURRENCY_PREFIX, SHOP_NAME, SIZE_MENU_LABELS, TAX_LABEL
from pizza_palace.data import Catalog
from pizza_palace.models import DietaryCategory, LineItem, Order, OrderType, PizzaOffering, Size, ToppingOffering
from pizza_palace.pricing import EXTRA_CHEESE_PRICE, to_display

BILL_WIDTH = 50
RULE = "=" * BILL_WIDTH
THIN_RULE = "-" * BILL_WIDTH
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def money(amount: Decimal) -> str:
    """Format an amount as currency with exactly two decimals."""
    return f"{CURRENCY_PREFIX}{to_display(amount):.2f}"


def category_heading(category: DietaryCategory) -> str:
    return f"------- {category.value.upper()} PIZZAS -------"


def format_pizza_menu_line(position: int, pizza: PizzaOffering) -> str:
    """Menu row with the Medium reference price in whole currency units."""
    return f"{position}. {pizza.name:<20} - {CURRENCY_PREFIX}{pizza.base_price:.0f} (Medium)"


def format_size_menu_line(position: int, size: Size) -> str:
    return f"{position}. {SIZE_MENU_LABELS[size.value]}"


def format_topping_menu_line(position: int, topping: ToppingOffering) -> str:
    return f"{position}. {topping.name:<20} - {CURRENCY_PREFIX}{topping.price:.0f}"


def render_menu_lines(catalog: Catalog) -> list[str]:
    """Full catalog listing with descriptions and default toppings."""
    lines = [RULE, f"{SHOP_NAME.upper()} MENU".center(BILL_WIDTH).rstrip(), RULE]
    for category in DietaryCategory:
        lines.extend(["", category_heading(category)])
        for position, pizza in enumerate(catalog.pizzas_for(category), start=1):
            lines.append(format_pizza_menu_line(position, pizza))
            lines.append(f"     {pizza.description}")
            lines.append(f"     Includes: {', '.join(pizza.default_toppings)}")
    lines.extend(["", "------- SIZE OPTIONS -------"])
    lines.extend(format_size_menu_line(position, size) for position, size in enumerate(Size, start=1))
    lines.extend(["", "------- VEG TOPPINGS -------"])
    lines.extend(
        format_topping_menu_line(position, topping)
        for position, topping in enumerate(catalog.veg_toppings(), start=1)
    )
    lines.extend(["", "------- NON-VEG TOPPINGS (non-veg pizzas only) -------"])
    lines.extend(
        format_topping_menu_line(position, topping)
        for position, topping in enumerate(catalog.non_veg_toppings(), start=1)
    )
    lines.append(f"Extra cheese: {money(EXTRA_CHEESE_PRICE)} per pizza")
    return lines


def _item_lines(item: LineItem, item_number: int) -> list[str]:
    qty = item.quantity
    lines = [
        "",
        f"Item {item_number}:",
        f"  {item.pizza.name} ({item.size.value}) x {qty}",
        f"  Base Price: {money(item.base_total())}",
    ]
    if item.toppings:
        lines.append("  Toppings:")
        for topping in item.toppings:
            lines.append(
                f"    - {topping.name}: {money(topping.price)} x {qty} = {money(item.topping_total(topping))}"
            )
    if item.extra_cheese:
        lines.append(f"  Extra Cheese: {money(EXTRA_CHEESE_PRICE)} x {qty} = {money(item.extra_cheese_total())}")
    lines.append(f"  Item Total: {money(item.total())}")
    return lines


def _summary_lines(order: Order) -> list[str]:
    lines = ["", THIN_RULE, f"Subtotal: {money(order.subtotal())}"]
    if order.order_type is OrderType.TAKE_AWAY:
        lines.append(f"Packaging Charges: {money(order.packaging_charges())}")
    lines.extend(
        [
            f"{TAX_LABEL}: {money(order.tax())}",
            RULE,
            f"TOTAL AMOUNT: {money(order.total())}",
            RULE,
            "",
            f"Thank you for choosing {SHOP_NAME}!",
            "Enjoy your delicious pizza!",
            "",
            CLOSING_MESSAGES[order.order_type.value],
        ]
    )
    return lines


def render_bill_lines(order: Order) -> list[str]:
    """Render an order as plain bill lines; every amount comes from the order itself."""
    lines = [
        RULE,
        f"{SHOP_NAME.upper()} BILL".center(BILL_WIDTH).rstrip(),
        RULE,
        f"Date: {order.ordered_at.strftime(DATE_FORMAT)}",
        f"Order Type: {order.order_type.value}",
        RULE,
    ]
    for item_number, item in enumerate(order.items, start=1):
        lines.extend(_item_lines(item, item_number))
    lines.extend(_summary_lines(order))
    return lines


def render_bill(order: Order) -> str:
    return "\n".join(render_bill_lines(order))


def format_bill(order: Order) -> Text:
    """Styled bill for console output; the plain text matches :func:`render_bill`."""
    text = Text()
    for idx, line in enumerate(render_bill_lines(order)):
        if idx > 0:
            text.append("\n")
        if line.startswith("TOTAL AMOUNT") or line.strip().endswith(" BILL"):
            text.append(line, style="bold")
        elif line.strip().startswith("Item "):
            text.append(line, style="bold cyan")
        elif line in {RULE, THIN_RULE}:
            text.append(line, style="dim")
        else:
            text.append(line)
    return text
