"""Interactive console ordering flow."""

from __future__ import annotations

import logging
from typing import TextIO

from rich.console import Console

from pizza_palace.constant import MAX_QUANTITY, MIN_QUANTITY, SHOP_NAME
from pizza_palace.data import Catalog
from pizza_palace.models import DietaryCategory, LineItem, Order, OrderType, Size
from pizza_palace.rendering import (
    category_heading,
    format_pizza_menu_line,
    format_size_menu_line,
    format_topping_menu_line,
)
from pizza_palace.session import OrderSession, build_line_item, parse_topping_selection

logger = logging.getLogger(__name__)

_YES_ANSWERS = {"y", "yes"}
_SIZES = list(Size)


def make_console(file: TextIO | None = None) -> Console:
    """Plain console: no markup, highlighting or wrapping of prompt text."""
    return Console(file=file, highlight=False, markup=False, emoji=False, soft_wrap=True)


class Prompter:
    """Reads answers from the operator and writes prompts through a rich console."""

    def __init__(self, console: Console, stream: TextIO | None = None) -> None:
        self.console = console
        self.stream = stream

    def say(self, message: object = "", end: str = "\n") -> None:
        self.console.print(message, end=end)

    def read(self, prompt: str = "") -> str:
        raw = self.console.input(prompt, markup=False, emoji=False, stream=self.stream)
        # A stream reports end of input with an empty read instead of EOFError.
        if self.stream is not None and raw == "":
            raise EOFError
        return raw.strip()

    def ask_int(self, low: int, high: int) -> int:
        """Read an integer in ``low..high``, re-prompting until one arrives."""
        while True:
            raw = self.read()
            if not raw:
                continue
            try:
                value = int(raw)
            except ValueError:
                logger.debug("invalid_number raw=%r range=%d-%d", raw, low, high)
                self.say(f"Invalid input. Please enter a number between {low} and {high}: ", end="")
                continue
            if low <= value <= high:
                return value
            logger.debug("out_of_range value=%d range=%d-%d", value, low, high)
            self.say(f"Please enter a number between {low} and {high}: ", end="")

    def ask_yes_no(self, prompt: str) -> bool:
        return self.read(prompt).lower() in _YES_ANSWERS


def choose_order_type(prompter: Prompter) -> OrderType:
    prompter.say("Dine in or Take away? \n1. Dine in\n2. Take away")
    choice = prompter.ask_int(1, 2)
    return OrderType.DINE_IN if choice == 1 else OrderType.TAKE_AWAY


def choose_category(prompter: Prompter) -> DietaryCategory:
    prompter.say("\nChoose pizza category \n1. Veg\n2. Non-Veg")
    choice = prompter.ask_int(1, 2)
    return DietaryCategory.VEGETARIAN if choice == 1 else DietaryCategory.NON_VEGETARIAN


def choose_pizza(prompter: Prompter, catalog: Catalog, category: DietaryCategory) -> int:
    """Show the category's pizzas and return the zero-based choice."""
    pizzas = catalog.pizzas_for(category)
    prompter.say(f"\n{category_heading(category)}\n")
    for position, pizza in enumerate(pizzas, start=1):
        prompter.say(format_pizza_menu_line(position, pizza))
    prompter.say()
    prompter.say(f"Choose pizza (1-{len(pizzas)}): ", end="")
    return prompter.ask_int(1, len(pizzas)) - 1


def choose_size(prompter: Prompter) -> Size:
    prompter.say("\n------- SIZE OPTIONS -------\n")
    for position, size in enumerate(_SIZES, start=1):
        prompter.say(format_size_menu_line(position, size))
    prompter.say(f"\nChoose size (1-{len(_SIZES)}): ", end="")
    return _SIZES[prompter.ask_int(1, len(_SIZES)) - 1]


def choose_quantity(prompter: Prompter) -> int:
    prompter.say("\nEnter quantity: ", end="")
    return prompter.ask_int(MIN_QUANTITY, MAX_QUANTITY)


def choose_toppings(prompter: Prompter, catalog: Catalog, category: DietaryCategory) -> list[int]:
    """Show the toppings available for the category and return zero-based picks."""
    available = catalog.toppings_for(category)
    prompter.say("\n------- AVAILABLE TOPPINGS -------")
    for position, topping in enumerate(available, start=1):
        prompter.say(format_topping_menu_line(position, topping))
    prompter.say("\nEnter topping numbers (comma-separated, e.g., 1,3,5) or 0 for no toppings:")
    selection = parse_topping_selection(prompter.read(), len(available))
    for token in selection.invalid_tokens:
        logger.debug("invalid_topping token=%r", token)
        prompter.say(f"Invalid topping choice: {token}")
    return list(selection.indices)


def prompt_line_item(prompter: Prompter, catalog: Catalog) -> LineItem:
    """Walk one pizza through category, size, quantity and customizations."""
    category = choose_category(prompter)
    pizza_index = choose_pizza(prompter, catalog, category)
    size = choose_size(prompter)
    quantity = choose_quantity(prompter)
    extra_cheese = prompter.ask_yes_no("\nAdd extra cheese? (y/n): ")
    topping_indices: list[int] = []
    if prompter.ask_yes_no("\nAdd custom toppings? (y/n): "):
        topping_indices = choose_toppings(prompter, catalog, category)
    return build_line_item(
        catalog,
        category,
        pizza_index,
        size,
        quantity,
        extra_cheese=extra_cheese,
        topping_indices=topping_indices,
    )


def run_session(prompter: Prompter, catalog: Catalog) -> Order:
    """Run the full ordering conversation and return the closed order."""
    prompter.say(" ")
    prompter.say(f"=== WELCOME TO {SHOP_NAME.upper()} ===")
    prompter.say("Your favorite pizza destination!")
    prompter.say("\n")

    session = OrderSession.start(catalog, choose_order_type(prompter))
    ordering = True
    while ordering:
        session.add_item(prompt_line_item(prompter, catalog))
        ordering = prompter.ask_yes_no("\nAdd more pizzas to order? (y/n): ")
    return session.close()
