from collections.abc import Mapping
from datetime import datetime
from typing import Any, Callable, List, Optional, Tuple

from sales_analytics.models.dataset import SalesDataset, is_sequence
from sales_analytics.models.product import Product
from sales_analytics.models.purchase import LineItem, PurchaseRecord
from sales_analytics.models.seller import Customer, Seller
from sales_analytics.utils.constants import REQUIRED_COLLECTIONS
from sales_analytics.utils.error_handler import InvalidInputError, InvalidOptionsError

ENTRY_TYPES = {
    'sellers': Seller,
    'customers': Customer,
    'products': Product,
    'purchase_records': PurchaseRecord
}

class DataValidator:
    """Validate data quality and completeness"""
    
    def __init__(self):
        self.warnings = []
        self.errors = []
    
    def validate_dataset(self, data: Any) -> SalesDataset:
        """Check the four collections and return the data as a SalesDataset.

        Raises InvalidInputError if a collection is missing, is not a list,
        is empty, holds entries of the wrong model type, has a line item
        whose quantity is not a positive whole number, or if seller ids or
        product SKUs repeat.
        """
        if data is None:
            raise InvalidInputError("No sales data provided")
        
        if isinstance(data, SalesDataset):
            for name in REQUIRED_COLLECTIONS:
                collection = getattr(data, name)
                if not is_sequence(collection) or len(collection) == 0:
                    raise InvalidInputError(f"'{name}' must be a non-empty list")
                self._check_entry_types(name, collection, ENTRY_TYPES[name])
            for record in data.purchase_records:
                self._check_line_items(record)
            dataset = data
        elif isinstance(data, Mapping):
            dataset = SalesDataset.from_dict(data)
        else:
            raise InvalidInputError(f"Unsupported sales data type: {type(data).__name__}")
        
        self._check_unique('seller id', [s.id for s in dataset.sellers])
        self._check_unique('product sku', [p.sku for p in dataset.products])
        return dataset
    
    def _check_entry_types(self, name: str, collection, entry_type: type):
        for index, entry in enumerate(collection):
            if not isinstance(entry, entry_type):
                raise InvalidInputError(
                    f"{name}[{index}] must be a {entry_type.__name__}, got {type(entry).__name__}"
                )

    def _check_line_items(self, record: PurchaseRecord):
        label = record.receipt_id or record.seller_id
        if not is_sequence(record.items):
            raise InvalidInputError(f"{label}: items must be a list")
        for item in record.items:
            if not isinstance(item, LineItem):
                raise InvalidInputError(f"{label}: items must be LineItem, got {type(item).__name__}")
            if isinstance(item.quantity, bool) or not isinstance(item.quantity, int) or item.quantity <= 0:
                raise InvalidInputError(
                    f"{label}: quantity for {item.sku} must be a positive whole number, got {item.quantity!r}"
                )

    def _check_unique(self, label: str, keys: List[Any]):
        seen = set()
        duplicates = []
        for key in keys:
            if key in seen and key not in duplicates:
                duplicates.append(key)
            seen.add(key)
        if duplicates:
            raise InvalidInputError(f"Duplicate {label}(s) found: {duplicates}")
    
    def validate_options(self, options: Any) -> Tuple[Callable, Callable]:
        """Return the (calculate_revenue, calculate_bonus) pair from ``options``"""
        if options is None:
            raise InvalidOptionsError("No analysis options provided")
        
        strategies = []
        for name in ('calculate_revenue', 'calculate_bonus'):
            if isinstance(options, Mapping):
                strategy = options.get(name)
            else:
                strategy = getattr(options, name, None)
            if strategy is None:
                raise InvalidOptionsError(f"Option '{name}' is missing")
            if not callable(strategy):
                raise InvalidOptionsError(f"Option '{name}' must be callable, got {type(strategy).__name__}")
            strategies.append(strategy)
        
        return strategies[0], strategies[1]
    
    def audit_records(self, dataset: SalesDataset) -> Tuple[bool, List[str]]:
        """Semantic checks that do not stop an analysis run.

        Returns (is_valid, issues). Errors are records the aggregation would
        mis-count; warnings are suspicious but consistent data.
        """
        self.warnings = []
        self.errors = []
        
        customer_ids = {c.id for c in dataset.customers}
        
        for product in dataset.products:
            if product.purchase_price < 0:
                self.errors.append(f"Product {product.sku}: negative purchase price")
            if product.sale_price is not None and product.sale_price < product.purchase_price:
                self.warnings.append(f"Product {product.sku}: list price below purchase price")
        
        for index, record in enumerate(dataset.purchase_records):
            label = record.receipt_id or f"record #{index}"
            self._audit_single_record(record, label, customer_ids)
        
        all_issues = self.errors + self.warnings
        return len(self.errors) == 0, all_issues
    
    def _audit_single_record(self, record, label: str, customer_ids: set):
        """Validate individual purchase record"""
        if not record.items:
            self.warnings.append(f"{label}: purchase record has no items")
        
        if record.customer_id is not None and record.customer_id not in customer_ids:
            self.warnings.append(f"{label}: unknown customer {record.customer_id}")
        
        expected_total = 0.0
        for item in record.items:
            if item.quantity <= 0:
                self.errors.append(f"{label}: non-positive quantity for {item.sku}")
            if item.discount < 0 or item.discount > 100:
                self.errors.append(f"{label}: discount {item.discount} for {item.sku} outside 0-100")
            if item.sale_price < 0:
                self.errors.append(f"{label}: negative sale price for {item.sku}")
            expected_total += item.gross_amount * (1 - item.discount / 100)
        
        if record.items and abs(expected_total - record.total_amount) > 0.01:
            self.warnings.append(
                f"{label}: total_amount {record.total_amount:.2f} differs from "
                f"line items {expected_total:.2f}"
            )
    
    def generate_validation_report(self, generated_at: Optional[datetime] = None) -> str:
        """Generate a comprehensive validation report"""
        generated_at = generated_at or datetime.now()
        report = []
        report.append("DATA VALIDATION REPORT")
        report.append("=" * 50)
        report.append(f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}")
        report.append("")
        
        if self.errors:
            report.append(f"ERRORS ({len(self.errors)}):")
            report.append("-" * 30)
            for error in self.errors:
                report.append(f"❌ {error}")
            report.append("")
        
        if self.warnings:
            report.append(f"WARNINGS ({len(self.warnings)}):")
            report.append("-" * 30)
            for warning in self.warnings:
                report.append(f"⚠️  {warning}")
            report.append("")
        
        if not self.errors and not self.warnings:
            report.append("✅ All validations passed!")
        
        return "\n".join(report)
