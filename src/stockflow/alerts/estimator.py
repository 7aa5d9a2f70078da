"""Days until a stock position runs out at its recent sales velocity.

A pure function over a slice of sale history. ``now`` is always passed in so
the 30-day window and the elapsed-time span are deterministic.

Arithmetic is exact (``Fraction``): 3 units at 0.1/day is 30 days, not 29.
"""

import math
from collections.abc import Sequence
from datetime import datetime, timedelta
from fractions import Fraction

from stockflow.alerts.store import SaleEvent
from stockflow.shared.timestamps import as_utc

SALES_WINDOW_DAYS = 30
SALES_WINDOW = timedelta(days=SALES_WINDOW_DAYS)

# Assumed consumption for items without sales in the window
SLOW_MOVING_DAILY_RATE = Fraction(1, 10)

# Returned when sales exist but average to nothing
UNBOUNDED_DAYS = 999

_ONE_DAY = timedelta(days=1)


def days_spanned(earliest: datetime, now: datetime) -> int:
    """Whole days between the earliest sale and ``now``, within ``[1, SALES_WINDOW_DAYS]``.

    A sale stamped at ``now`` (or later, with clock skew) counts as one day.
    """
    elapsed = as_utc(now) - as_utc(earliest)
    return max(1, min(SALES_WINDOW_DAYS, math.ceil(elapsed / _ONE_DAY)))


def estimate_days_until_stockout(sales: Sequence[SaleEvent], current_quantity: int, now: datetime) -> int:
    """Project how many whole days ``current_quantity`` lasts.

    ``sales`` are the ``sale`` entries for one (product, warehouse) inside the
    trailing window.
    """
    if not sales:
        if current_quantity > 0:
            return math.floor(Fraction(current_quantity) / SLOW_MOVING_DAILY_RATE)
        return 0

    total_sold = sum(abs(sale.change) for sale in sales)
    earliest = min(as_utc(sale.created_at) for sale in sales)
    average_daily_sales = Fraction(total_sold, days_spanned(earliest, now))

    if average_daily_sales <= 0:
        return UNBOUNDED_DAYS if current_quantity > 0 else 0

    return max(0, math.floor(Fraction(current_quantity) / average_daily_sales))
