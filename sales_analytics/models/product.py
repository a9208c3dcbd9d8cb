from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class Product:
    """Catalog entry, keyed by sku"""
    sku: str
    purchase_price: float
    sale_price: Optional[float] = None
    name: Optional[str] = None
    category: Optional[str] = None
    
    @property
    def unit_margin(self) -> Optional[float]:
        """List margin per unit, if the catalog carries a sale price"""
        if self.sale_price is None:
            return None
        return self.sale_price - self.purchase_price
