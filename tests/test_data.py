"""Catalog tests."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from pizza_palace.data import default_catalog
from pizza_palace.models import DietaryCategory


class TestCatalog:

    def test_pizza_entries(self, catalog):
        veg = [(p.name, p.base_price, p.jain_friendly) for p in catalog.veg_pizzas()]
        assert veg == [
            ("Margherita", Decimal("200.00"), True),
            ("Veggie Supreme", Decimal("280.00"), False),
            ("Paneer Makhani", Decimal("320.00"), True),
            ("Corn & Cheese", Decimal("250.00"), True),
        ]
        non_veg = [(p.name, p.base_price, p.meat_type) for p in catalog.non_veg_pizzas()]
        assert non_veg == [
            ("Chicken Tikka", Decimal("380.00"), "Chicken"),
            ("Pepperoni Classic", Decimal("400.00"), "Pepperoni"),
            ("Chicken BBQ", Decimal("420.00"), "Chicken"),
            ("Meat Lovers", Decimal("480.00"), "Mixed Meat"),
        ]

    def test_topping_entries(self, catalog):
        assert [(t.name, t.price) for t in catalog.veg_toppings()] == [
            ("Extra Mushrooms", Decimal("30.00")),
            ("Bell Peppers", Decimal("25.00")),
            ("Onions", Decimal("20.00")),
            ("Tomatoes", Decimal("20.00")),
            ("Olives", Decimal("35.00")),
            ("Corn", Decimal("25.00")),
        ]
        assert [(t.name, t.price) for t in catalog.non_veg_toppings()] == [
            ("Extra Chicken", Decimal("60.00")),
            ("Pepperoni", Decimal("50.00")),
            ("Sausage", Decimal("55.00")),
            ("Bacon", Decimal("65.00")),
        ]
        assert all(t.is_vegetarian for t in catalog.veg_toppings())
        assert not any(t.is_vegetarian for t in catalog.non_veg_toppings())

    def test_categories(self, catalog):
        assert {p.category for p in catalog.veg_pizzas()} == {DietaryCategory.VEGETARIAN}
        assert {p.category for p in catalog.non_veg_pizzas()} == {DietaryCategory.NON_VEGETARIAN}

    def test_accessors_are_immutable(self, catalog):
        pizzas = catalog.veg_pizzas()
        assert isinstance(pizzas, tuple)
        with pytest.raises(FrozenInstanceError):
            pizzas[0].base_price = Decimal("1.00")
        with pytest.raises(FrozenInstanceError):
            catalog._veg_pizzas = ()
        assert catalog.veg_pizzas()[0].base_price == Decimal("200.00")

    def test_toppings_for_category(self, catalog):
        assert catalog.toppings_for(DietaryCategory.VEGETARIAN) == catalog.veg_toppings()
        combined = catalog.toppings_for(DietaryCategory.NON_VEGETARIAN)
        assert combined == catalog.veg_toppings() + catalog.non_veg_toppings()
        assert len(combined) == 10

    def test_pizzas_for_category(self, catalog):
        assert catalog.pizzas_for(DietaryCategory.VEGETARIAN) == catalog.veg_pizzas()
        assert catalog.pizzas_for(DietaryCategory.NON_VEGETARIAN) == catalog.non_veg_pizzas()

    def test_unknown_category_is_rejected(self, catalog):
        with pytest.raises(ValueError, match="Unknown dietary category"):
            catalog.pizzas_for("Vegan")
        with pytest.raises(ValueError, match="Unknown dietary category"):
            catalog.toppings_for(None)

    def test_catalogs_compare_equal(self):
        assert default_catalog() == default_catalog()
