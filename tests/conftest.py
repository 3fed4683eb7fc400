from __future__ import annotations

import logging
from datetime import datetime

import pytest

from pizza_palace.data import Catalog, default_catalog
from pizza_palace.logs import LOGGER_NAME
from pizza_palace.models import LineItem, Order, OrderType, Size


@pytest.fixture
def catalog() -> Catalog:
    return default_catalog()


@pytest.fixture
def margherita(catalog):
    return catalog.veg_pizzas()[0]


@pytest.fixture
def chicken_tikka(catalog):
    return catalog.non_veg_pizzas()[0]


@pytest.fixture
def topping(catalog):
    by_name = {t.name: t for t in catalog.veg_toppings() + catalog.non_veg_toppings()}
    return by_name.__getitem__


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2026, 1, 2, 19, 30, 5)


@pytest.fixture
def scenario_a_order(margherita, fixed_time) -> Order:
    order = Order(OrderType.DINE_IN, ordered_at=fixed_time)
    order.add_item(LineItem(margherita, Size.MEDIUM, 1))
    return order


@pytest.fixture
def scenario_b_order(chicken_tikka, topping, fixed_time) -> Order:
    order = Order(OrderType.TAKE_AWAY, ordered_at=fixed_time)
    order.add_item(
        LineItem(
            chicken_tikka,
            Size.LARGE,
            2,
            toppings=(topping("Extra Chicken"), topping("Pepperoni")),
            extra_cheese=True,
        )
    )
    return order


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
