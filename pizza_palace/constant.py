"""Editable static menu and pricing configuration."""

from __future__ import annotations

SHOP_NAME = "Pizza Palace"
CURRENCY_PREFIX = "Rs."

TAX_RATE = "0.18"
TAX_LABEL = "GST (18%)"
EXTRA_CHEESE_PRICE = "50.00"
MIN_QUANTITY = 1
MAX_QUANTITY = 10

VEG_DEFAULT_TOPPINGS: list[str] = ["Cheese", "Tomato Sauce"]

# Raw values consumed by pizza_palace.data, which wraps them into offering dataclasses.
VEG_PIZZAS: list[dict[str, str | bool]] = [
    {"name": "Margherita", "base_price": "200.00", "jain_friendly": True},
    {"name": "Veggie Supreme", "base_price": "280.00", "jain_friendly": False},
    {"name": "Paneer Makhani", "base_price": "320.00", "jain_friendly": True},
    {"name": "Corn & Cheese", "base_price": "250.00", "jain_friendly": True},
]

NON_VEG_PIZZAS: list[dict[str, str]] = [
    {"name": "Chicken Tikka", "base_price": "380.00", "meat_type": "Chicken"},
    {"name": "Pepperoni Classic", "base_price": "400.00", "meat_type": "Pepperoni"},
    {"name": "Chicken BBQ", "base_price": "420.00", "meat_type": "Chicken"},
    {"name": "Meat Lovers", "base_price": "480.00", "meat_type": "Mixed Meat"},
]

VEG_TOPPINGS: dict[str, str] = {
    "Extra Mushrooms": "30.00",
    "Bell Peppers": "25.00",
    "Onions": "20.00",
    "Tomatoes": "20.00",
    "Olives": "35.00",
    "Corn": "25.00",
}

NON_VEG_TOPPINGS: dict[str, str] = {
    "Extra Chicken": "60.00",
    "Pepperoni": "50.00",
    "Sausage": "55.00",
    "Bacon": "65.00",
}

# Keyed by Size value.
SIZE_MULTIPLIERS: dict[str, str] = {
    "Small": "0.70",
    "Medium": "1.00",
    "Large": "1.40",
    "Extra Large": "1.80",
}

SIZE_MENU_LABELS: dict[str, str] = {
    "Small": "Small (30% off)",
    "Medium": "Medium (Base price)",
    "Large": "Large (40% extra)",
    "Extra Large": "Extra Large (80% extra)",
}

# Keyed by OrderType value; charged once per line item.
PACKAGING_CHARGES: dict[str, str] = {
    "Dine In": "0.00",
    "Take Away": "25.00",
}

CLOSING_MESSAGES: dict[str, str] = {
    "Dine In": "Your order will be served to your table shortly.",
    "Take Away": "Your order will be ready for pickup in 20-25 minutes.",
}
