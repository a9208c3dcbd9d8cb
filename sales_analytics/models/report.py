from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Tuple

from sales_analytics.utils.constants import MONEY_PRECISION

def round_money(value: float, precision: int = MONEY_PRECISION) -> float:
    """Round half away from zero on the shortest decimal form of ``value``.

    ``repr`` is used so 2.675 rounds to 2.68 as written, not to 2.67 as its
    binary approximation would.
    """
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))

@dataclass
class SellerStat:
    """Running totals for one seller while records are aggregated"""
    id: str
    name: str
    revenue: float = 0.0
    profit: float = 0.0
    sales_count: int = 0
    products_sold: Dict[str, int] = field(default_factory=dict)
    
    def add_sale(self, total_amount: float):
        self.sales_count += 1
        self.revenue += total_amount
    
    def add_item(self, sku: str, quantity: int, profit: float):
        self.profit += profit
        self.products_sold[sku] = self.products_sold.get(sku, 0) + quantity

@dataclass(frozen=True)
class TopProduct:
    sku: str
    quantity: int
    
    def to_dict(self) -> Dict[str, Any]:
        return {'sku': self.sku, 'quantity': self.quantity}

@dataclass(frozen=True)
class ReportRow:
    """Final per-seller line of the sales report"""
    seller_id: str
    name: str
    revenue: float
    profit: float
    sales_count: int
    top_products: Tuple[TopProduct, ...]
    bonus: float
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'seller_id': self.seller_id,
            'name': self.name,
            'revenue': self.revenue,
            'profit': self.profit,
            'sales_count': self.sales_count,
            'top_products': [p.to_dict() for p in self.top_products],
            'bonus': self.bonus
        }
