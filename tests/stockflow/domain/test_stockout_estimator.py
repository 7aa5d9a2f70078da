"""Tests for the stockout estimator."""

from datetime import UTC, datetime, timedelta

import pytest
from stockflow.alerts.estimator import (
    SALES_WINDOW_DAYS,
    UNBOUNDED_DAYS,
    days_spanned,
    estimate_days_until_stockout,
)
from stockflow.alerts.store import SaleEvent

NOW = datetime(2025, 6, 30, 12, 0, tzinfo=UTC)


def _sale(units, days_ago, hours_ago=0):
    return SaleEvent(
        product_id="prod-1",
        warehouse_id="wh-1",
        change=-units,
        created_at=NOW - timedelta(days=days_ago, hours=hours_ago),
    )


class TestNoSalesHistory:
    def test_slow_moving_projection(self):
        assert estimate_days_until_stockout([], 50, NOW) == 500

    def test_zero_stock(self):
        assert estimate_days_until_stockout([], 0, NOW) == 0

    def test_projection_is_exact(self):
        # 3 / 0.1 in floating point is just below 30
        assert estimate_days_until_stockout([], 3, NOW) == 30

    def test_single_unit(self):
        assert estimate_days_until_stockout([], 1, NOW) == 10


class TestSteadySales:
    def test_thirty_units_over_ten_days(self):
        sales = [_sale(3, days_ago) for days_ago in range(10, 0, -1)]
        assert sum(-s.change for s in sales) == 30
        assert estimate_days_until_stockout(sales, 60, NOW) == 20

    def test_zero_stock_with_sales(self):
        sales = [_sale(5, 4)]
        assert estimate_days_until_stockout(sales, 0, NOW) == 0

    def test_result_is_floored(self):
        # 10 units over 4 days = 2.5/day; 9 / 2.5 = 3.6
        sales = [_sale(4, 4), _sale(6, 1)]
        assert estimate_days_until_stockout(sales, 9, NOW) == 3

    def test_uses_absolute_change(self):
        positive = SaleEvent(product_id="p", warehouse_id="w", change=10, created_at=NOW - timedelta(days=5))
        negative = SaleEvent(product_id="p", warehouse_id="w", change=-10, created_at=NOW - timedelta(days=5))
        assert estimate_days_until_stockout([positive], 20, NOW) == estimate_days_until_stockout([negative], 20, NOW)

    def test_partial_day_rounds_span_up(self):
        # 2.5 days elapsed counts as 3 days: 6 units / 3 days = 2/day
        sales = [_sale(6, 2, hours_ago=12)]
        assert estimate_days_until_stockout(sales, 8, NOW) == 4

    def test_span_is_capped_at_window(self):
        # Earliest sale 45 days ago still divides by 30
        sales = [_sale(30, 45)]
        assert estimate_days_until_stockout(sales, 10, NOW) == 10

    def test_zero_change_sales_are_unbounded(self):
        sales = [SaleEvent(product_id="p", warehouse_id="w", change=0, created_at=NOW - timedelta(days=2))]
        assert estimate_days_until_stockout(sales, 7, NOW) == UNBOUNDED_DAYS
        assert estimate_days_until_stockout(sales, 0, NOW) == 0

    def test_naive_timestamps_are_treated_as_utc(self):
        naive = SaleEvent(
            product_id="p",
            warehouse_id="w",
            change=-20,
            created_at=(NOW - timedelta(days=10)).replace(tzinfo=None),
        )
        assert estimate_days_until_stockout([naive], 10, NOW) == 5


class TestSpanClamp:
    def test_sale_at_now_counts_as_one_day(self):
        sales = [_sale(4, 0)]
        assert days_spanned(sales[0].created_at, NOW) == 1
        assert estimate_days_until_stockout(sales, 8, NOW) == 2

    def test_sale_in_the_future_counts_as_one_day(self):
        assert days_spanned(NOW + timedelta(hours=3), NOW) == 1

    def test_span_never_exceeds_window(self):
        assert days_spanned(NOW - timedelta(days=365), NOW) == SALES_WINDOW_DAYS

    def test_exact_days(self):
        assert days_spanned(NOW - timedelta(days=7), NOW) == 7


class TestMonotonicity:
    @pytest.mark.parametrize(
        "sales",
        [
            [],
            [_sale(1, 0)],
            [_sale(3, 10), _sale(7, 3)],
            [_sale(13, 29), _sale(2, 1)],
        ],
    )
    def test_non_decreasing_in_current_stock(self, sales):
        estimates = [estimate_days_until_stockout(sales, qty, NOW) for qty in range(0, 120)]
        assert all(a <= b for a, b in zip(estimates, estimates[1:]))
        assert all(e >= 0 for e in estimates)

    def test_does_not_mutate_input(self):
        sales = [_sale(3, 2), _sale(1, 1)]
        snapshot = list(sales)
        estimate_days_until_stockout(sales, 10, NOW)
        assert sales == snapshot
