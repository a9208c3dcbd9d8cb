from .error_handler import (
    SalesAnalyticsError, InvalidInputError, InvalidOptionsError,
    UnknownSellerError, UnknownProductError, DataLoadError, ExportError,
    handle_errors
)
from .logger import get_logger

__all__ = ['SalesAnalyticsError', 'InvalidInputError', 'InvalidOptionsError',
           'UnknownSellerError', 'UnknownProductError', 'DataLoadError',
           'ExportError', 'handle_errors', 'get_logger']
