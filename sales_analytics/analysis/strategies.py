"""Default revenue and bonus policies.

Both are plain functions so callers can swap in their own with the same
signatures:

    calculate_revenue(item, product) -> float
    calculate_bonus(index, total, seller_stat) -> float
"""
from sales_analytics.models.product import Product
from sales_analytics.models.purchase import LineItem
from sales_analytics.models.report import SellerStat
from sales_analytics.utils.constants import (
    FIRST_PLACE_BONUS_RATE, PODIUM_BONUS_RATE,
    STANDARD_BONUS_RATE, LAST_PLACE_BONUS_RATE
)

def calculate_simple_revenue(item: LineItem, product: Product) -> float:
    """Revenue of one line item after its percentage discount"""
    discount_factor = 1 - (item.discount / 100)
    return item.gross_amount * discount_factor

def bonus_rate_for_rank(index: int, total: int) -> float:
    """Share of profit paid out at 0-based profit rank ``index``.

    Rank 0 is checked first, so a lone seller gets the top rate rather
    than the last-place one. Last place comes before the podium ranks:
    with two or three sellers the last one still gets nothing.
    """
    if index == 0:
        return FIRST_PLACE_BONUS_RATE
    elif index >= total - 1:
        return LAST_PLACE_BONUS_RATE
    elif index == 1 or index == 2:
        return PODIUM_BONUS_RATE
    return STANDARD_BONUS_RATE

def calculate_bonus_by_profit(index: int, total: int, seller: SellerStat) -> float:
    """Bonus for a seller from their position in the profit ranking"""
    return seller.profit * bonus_rate_for_rank(index, total)
