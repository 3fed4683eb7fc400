"""Session state and selection parsing tests; no console involved."""

from decimal import Decimal

import pytest

from pizza_palace.models import DietaryCategory, LineItem, OrderType, Size
from pizza_palace.session import OrderSession, build_line_item, parse_topping_selection


class TestParseToppingSelection:

    def test_mixed_tokens(self):
        selection = parse_topping_selection("1,x,9,3", 6)
        assert selection.indices == (0, 2)
        assert selection.invalid_tokens == ("x",)

    @pytest.mark.parametrize("raw", ["0", "", "  0  "])
    def test_nothing_selected(self, raw):
        selection = parse_topping_selection(raw, 6)
        assert selection.indices == ()
        assert selection.invalid_tokens == ()

    def test_whitespace_around_tokens(self):
        assert parse_topping_selection(" 2 , 4 ", 6).indices == (1, 3)

    def test_out_of_range_is_silent(self):
        selection = parse_topping_selection("0,7,-1", 6)
        assert selection.indices == ()
        assert selection.invalid_tokens == ()

    def test_repeated_index_applied_once(self):
        assert parse_topping_selection("3,3,1", 6).indices == (2, 0)

    def test_empty_token_is_reported(self):
        assert parse_topping_selection("1,,2", 6).invalid_tokens == ("",)


class TestBuildLineItem:

    def test_non_veg_can_use_non_veg_toppings(self, catalog):
        item = build_line_item(
            catalog,
            DietaryCategory.NON_VEGETARIAN,
            0,
            Size.LARGE,
            2,
            extra_cheese=True,
            topping_indices=[6, 7],
        )
        assert item.pizza.name == "Chicken Tikka"
        assert [t.name for t in item.toppings] == ["Extra Chicken", "Pepperoni"]
        assert item.total() == Decimal("1384.00")

    def test_veg_topping_indices_stay_in_veg_list(self, catalog):
        item = build_line_item(catalog, DietaryCategory.VEGETARIAN, 3, Size.SMALL, 1, topping_indices=[5, 6])
        assert item.pizza.name == "Corn & Cheese"
        assert [t.name for t in item.toppings] == ["Corn"]

    def test_rejects_bad_pizza_index(self, catalog):
        with pytest.raises(ValueError, match="pizza_index"):
            build_line_item(catalog, DietaryCategory.VEGETARIAN, 4, Size.SMALL, 1)


class TestOrderSession:

    def test_accumulates_items(self, catalog, margherita):
        session = OrderSession.start(catalog, OrderType.DINE_IN)
        session.add_item(LineItem(margherita, Size.MEDIUM, 1))
        session.add_item(LineItem(margherita, Size.SMALL, 2))
        assert session.is_open
        order = session.close()
        assert not session.is_open
        assert order.order_type is OrderType.DINE_IN
        assert len(order.items) == 2

    def test_closed_session_rejects_items(self, catalog, margherita):
        session = OrderSession.start(catalog, OrderType.TAKE_AWAY)
        session.add_item(LineItem(margherita, Size.MEDIUM, 1))
        order = session.close()
        with pytest.raises(RuntimeError, match="closed session"):
            session.add_item(LineItem(margherita, Size.MEDIUM, 1))
        assert len(order.items) == 1

    def test_closed_session_seals_its_order(self, catalog, margherita):
        session = OrderSession.start(catalog, OrderType.TAKE_AWAY)
        session.add_item(LineItem(margherita, Size.MEDIUM, 1))
        order = session.close()
        total = order.total()
        assert order.is_sealed
        with pytest.raises(RuntimeError, match="sealed order"):
            order.add_item(LineItem(margherita, Size.LARGE, 2))
        assert len(order.items) == 1
        assert order.total() == total
