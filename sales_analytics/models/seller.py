from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class Seller:
    """Seller identity record"""
    id: str
    first_name: str
    last_name: str
    start_date: Optional[str] = None
    position: Optional[str] = None
    
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

@dataclass(frozen=True)
class Customer:
    """Customer identity record.

    Customers only take part in validation; no figure in the report
    depends on them.
    """
    id: str
    first_name: str = ""
    last_name: str = ""
    phone: Optional[str] = None
