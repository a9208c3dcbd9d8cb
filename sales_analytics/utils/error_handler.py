from functools import wraps
from typing import Any, Callable, Optional, Type

class SalesAnalyticsError(Exception):
    """Base exception for the sales analytics package"""
    pass

class InvalidInputError(SalesAnalyticsError):
    """Dataset is missing a collection, or a collection is not a non-empty sequence"""
    pass

class InvalidOptionsError(SalesAnalyticsError):
    """Revenue or bonus strategy is missing or not callable"""
    pass

class UnknownSellerError(SalesAnalyticsError):
    """Purchase record references a seller that is not in the dataset"""

    def __init__(self, seller_id: Any, receipt_id: Optional[str] = None):
        self.seller_id = seller_id
        self.receipt_id = receipt_id
        where = f" (receipt {receipt_id})" if receipt_id else ""
        super().__init__(f"Unknown seller id: {seller_id!r}{where}")

class UnknownProductError(SalesAnalyticsError):
    """Line item references a SKU that is not in the product catalog"""

    def __init__(self, sku: Any, receipt_id: Optional[str] = None):
        self.sku = sku
        self.receipt_id = receipt_id
        where = f" (receipt {receipt_id})" if receipt_id else ""
        super().__init__(f"Unknown product sku: {sku!r}{where}")

class DataLoadError(SalesAnalyticsError):
    """Error loading data"""
    pass

class ExportError(SalesAnalyticsError):
    """Error writing a report"""
    pass

def handle_errors(default_return=None, raise_on_error=True,
                  error_cls: Type[SalesAnalyticsError] = SalesAnalyticsError):
    """Decorator for error handling"""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except SalesAnalyticsError:
                if raise_on_error:
                    raise
                return default_return
            except Exception as e:
                if raise_on_error:
                    raise error_cls(f"Unexpected error in {func.__name__}: {str(e)}") from e
                return default_return
        return wrapper
    return decorator
