"""Unit tests for the order total calculation."""

import itertools

from foodorder.domain.model.extras import Extra
from foodorder.domain.model.value_objects import Money
from foodorder.domain.service.price_calculator import calculate_total, format_currency


def _extra(extra_id: int, value: str, qty: int) -> Extra:
    return Extra(id=extra_id, name=f"Extra {extra_id}", value=Money.of(value), quantity=qty)


class TestCalculateTotal:

    def test_base_price_only(self):
        assert calculate_total(Money.of("10.00"), [], 1) == Money.of("10.00")

    def test_formula(self):
        extras = [_extra(1, "2.00", 2), _extra(2, "3.50", 1)]
        # (10 + 4 + 3.5) * 3
        assert calculate_total(Money.of("10.00"), extras, 3) == Money.of("52.50")

    def test_zero_quantity_extras_do_not_count(self):
        extras = [_extra(1, "2.00", 0), _extra(2, "99.00", 0)]
        assert calculate_total(Money.of("10.00"), extras, 2) == Money.of("20.00")

    def test_extras_order_is_irrelevant(self):
        extras = [_extra(1, "2.00", 2), _extra(2, "3.50", 1), _extra(3, "0.99", 4)]
        totals = {
            calculate_total(Money.of("12.30"), list(perm), 2)
            for perm in itertools.permutations(extras)
        }
        assert totals == {Money.of("47.52")}

    def test_missing_base_price_counts_as_zero(self):
        assert calculate_total(None, [], 1) == Money.zero()

    def test_missing_base_price_with_extras(self):
        assert calculate_total(None, [_extra(1, "2.00", 1)], 2) == Money.of("4.00")

    def test_inputs_are_not_mutated(self):
        extras = [_extra(1, "2.00", 2)]
        calculate_total(Money.of("10.00"), extras, 2)
        assert extras == [_extra(1, "2.00", 2)]


class TestFormatCurrency:

    def test_default_format(self):
        assert format_currency(Money.of("14")) == "$14.00"

    def test_zero(self):
        assert format_currency(Money.zero()) == "$0.00"
