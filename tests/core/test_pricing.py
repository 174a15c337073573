"""Tests for the pricing engine."""

import pytest

from hotelsim.core.pricing import BREAKFAST_FACTOR, final_price


class TestFinalPrice:
    """Tests for final_price()."""

    def test_tier_discount(self) -> None:
        assert final_price(100, 3, 0.10, False) == pytest.approx(270.00)

    def test_breakfast_applies_after_tier_discount(self) -> None:
        """Breakfast multiplies the discounted total rather than adding 5 points."""
        assert final_price(100, 3, 0.10, True) == pytest.approx(256.50)
        assert final_price(100, 3, 0.10, True) != pytest.approx(100 * 3 * (1 - 0.15))

    @pytest.mark.parametrize("base_price,nights", [(80, 1), (95, 7), (150, 30)])
    def test_no_discount_identity(self, base_price: int, nights: int) -> None:
        assert final_price(base_price, nights, 0.0, False) == pytest.approx(base_price * nights)

    def test_breakfast_only(self) -> None:
        assert final_price(120, 2, 0.0, True) == pytest.approx(240 * BREAKFAST_FACTOR)

    def test_custom_breakfast_factor(self) -> None:
        assert final_price(100, 1, 0.0, True, breakfast_factor=0.5) == pytest.approx(50.0)

    def test_same_inputs_give_same_total(self) -> None:
        """Recomputing from stored inputs must match the quoted total."""
        quoted = final_price(137, 11, 0.20, True)
        assert final_price(137, 11, 0.20, True) == quoted
