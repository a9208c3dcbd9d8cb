from .strategies import calculate_simple_revenue, calculate_bonus_by_profit, bonus_rate_for_rank
from .aggregator import AnalysisOptions, SalesAggregator, analyze_sales_data

__all__ = ['calculate_simple_revenue', 'calculate_bonus_by_profit', 'bonus_rate_for_rank',
           'AnalysisOptions', 'SalesAggregator', 'analyze_sales_data']
