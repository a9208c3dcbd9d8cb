"""Per-seller sales performance reports: revenue, profit, bonus, top products."""
from sales_analytics.analysis import (
    AnalysisOptions, SalesAggregator, analyze_sales_data,
    calculate_simple_revenue, calculate_bonus_by_profit
)
from sales_analytics.models import SalesDataset, ReportRow
from sales_analytics.utils.error_handler import (
    SalesAnalyticsError, InvalidInputError, InvalidOptionsError,
    UnknownSellerError, UnknownProductError
)

__version__ = "0.1.0"

__all__ = ['AnalysisOptions', 'SalesAggregator', 'analyze_sales_data',
           'calculate_simple_revenue', 'calculate_bonus_by_profit',
           'SalesDataset', 'ReportRow', 'SalesAnalyticsError', 'InvalidInputError',
           'InvalidOptionsError', 'UnknownSellerError', 'UnknownProductError']
