from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass(frozen=True)
class LineItem:
    """One product line within a purchase record"""
    sku: str
    quantity: int
    discount: float  # percent, 0-100
    sale_price: float  # unit price before discount
    
    @property
    def gross_amount(self) -> float:
        return self.sale_price * self.quantity

@dataclass(frozen=True)
class PurchaseRecord:
    """One completed transaction by one seller"""
    seller_id: str
    total_amount: float
    items: Tuple[LineItem, ...] = ()
    receipt_id: Optional[str] = None
    date: Optional[str] = None
    customer_id: Optional[str] = None
    total_discount: Optional[float] = None
