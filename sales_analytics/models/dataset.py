from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Tuple

from sales_analytics.models.product import Product
from sales_analytics.models.purchase import LineItem, PurchaseRecord
from sales_analytics.models.seller import Customer, Seller
from sales_analytics.utils.constants import REQUIRED_COLLECTIONS
from sales_analytics.utils.error_handler import DataLoadError, InvalidInputError

def is_sequence(value: Any) -> bool:
    """True for list-like collections; strings and mappings do not count"""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))

def _optional_float(value: Any):
    return None if value is None else float(value)

def _seller(entry: Mapping) -> Seller:
    return Seller(
        id=entry['id'],
        first_name=str(entry['first_name']),
        last_name=str(entry['last_name']),
        start_date=entry.get('start_date'),
        position=entry.get('position')
    )

def _customer(entry: Mapping) -> Customer:
    return Customer(
        id=entry['id'],
        first_name=str(entry.get('first_name', '')),
        last_name=str(entry.get('last_name', '')),
        phone=entry.get('phone')
    )

def _product(entry: Mapping) -> Product:
    return Product(
        sku=entry['sku'],
        purchase_price=float(entry['purchase_price']),
        sale_price=_optional_float(entry.get('sale_price')),
        name=entry.get('name'),
        category=entry.get('category')
    )

def _quantity(value: Any) -> int:
    """Whole, positive unit count; 3.0 is accepted, 2.9 and 0 are not"""
    if isinstance(value, bool):
        raise TypeError(f"quantity must be a number, got {value!r}")
    quantity = float(value)
    if quantity != int(quantity):
        raise ValueError(f"quantity must be a whole number, got {value!r}")
    if quantity <= 0:
        raise ValueError(f"quantity must be positive, got {value!r}")
    return int(quantity)

def _line_item(entry: Mapping) -> LineItem:
    return LineItem(
        sku=entry['sku'],
        quantity=_quantity(entry['quantity']),
        discount=float(entry.get('discount', 0)),
        sale_price=float(entry['sale_price'])
    )

def _purchase_record(entry: Mapping) -> PurchaseRecord:
    items = entry.get('items', [])
    if not is_sequence(items):
        raise TypeError("'items' must be a list")
    return PurchaseRecord(
        seller_id=entry['seller_id'],
        total_amount=float(entry['total_amount']),
        items=tuple(_line_item(item) for item in items),
        receipt_id=entry.get('receipt_id'),
        date=entry.get('date'),
        customer_id=entry.get('customer_id'),
        total_discount=_optional_float(entry.get('total_discount'))
    )

_BUILDERS: Dict[str, Callable[[Mapping], Any]] = {
    'sellers': _seller,
    'customers': _customer,
    'products': _product,
    'purchase_records': _purchase_record
}

@dataclass(frozen=True)
class SalesDataset:
    """The four collections one analysis run consumes"""
    sellers: Tuple[Seller, ...]
    customers: Tuple[Customer, ...]
    products: Tuple[Product, ...]
    purchase_records: Tuple[PurchaseRecord, ...]
    
    @classmethod
    def from_dict(cls, raw: Mapping) -> 'SalesDataset':
        """Build a dataset from the raw JSON shape.

        Raises InvalidInputError when a collection is absent, not a list, or
        empty, and DataLoadError when an entry is missing a field or holds a
        value of the wrong type, including a line-item quantity that is not a
        positive whole number.
        """
        if not isinstance(raw, Mapping):
            raise InvalidInputError(f"Dataset must be a mapping, got {type(raw).__name__}")
        
        collections = {}
        for name in REQUIRED_COLLECTIONS:
            entries = raw.get(name)
            if not is_sequence(entries) or len(entries) == 0:
                raise InvalidInputError(f"'{name}' must be a non-empty list")
            
            built: List[Any] = []
            for index, entry in enumerate(entries):
                try:
                    built.append(_BUILDERS[name](entry))
                except (KeyError, TypeError, ValueError, AttributeError, OverflowError) as e:
                    raise DataLoadError(f"Malformed entry {name}[{index}]: {e!r}") from e
            collections[name] = tuple(built)
        
        return cls(**collections)
    
    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        """Inverse of from_dict"""
        data = {name: [asdict(entry) for entry in getattr(self, name)]
                for name in REQUIRED_COLLECTIONS}
        for record in data['purchase_records']:
            record['items'] = list(record['items'])
        return data
