from typing import Any, Dict, List

import pandas as pd

from sales_analytics.models.report import ReportRow, round_money
from sales_analytics.utils.constants import REPORT_COLUMNS

class DataTransformer:
    """Reshape report rows for tabular output"""
    
    def report_to_dataframe(self, rows: List[ReportRow]) -> pd.DataFrame:
        """One row per seller, ranked; top products flattened to ``sku x qty``"""
        records = []
        for rank, row in enumerate(rows, start=1):
            records.append({
                'Rank': rank,
                REPORT_COLUMNS['seller_id']: row.seller_id,
                REPORT_COLUMNS['name']: row.name,
                REPORT_COLUMNS['revenue']: row.revenue,
                REPORT_COLUMNS['profit']: row.profit,
                REPORT_COLUMNS['sales_count']: row.sales_count,
                REPORT_COLUMNS['bonus']: row.bonus,
                REPORT_COLUMNS['top_products']: ", ".join(
                    f"{p.sku} x{p.quantity}" for p in row.top_products
                )
            })
        columns = ['Rank'] + [REPORT_COLUMNS[key] for key in
                              ('seller_id', 'name', 'revenue', 'profit', 'sales_count', 'bonus', 'top_products')]
        return pd.DataFrame(records, columns=columns)
    
    def top_products_to_dataframe(self, rows: List[ReportRow]) -> pd.DataFrame:
        """Long format: one line per (seller, product) pair"""
        records = [
            {
                REPORT_COLUMNS['seller_id']: row.seller_id,
                REPORT_COLUMNS['name']: row.name,
                'Position': position,
                'SKU': product.sku,
                'Quantity': product.quantity
            }
            for row in rows
            for position, product in enumerate(row.top_products, start=1)
        ]
        return pd.DataFrame(records, columns=[REPORT_COLUMNS['seller_id'], REPORT_COLUMNS['name'],
                                              'Position', 'SKU', 'Quantity'])
    
    def summarize(self, rows: List[ReportRow]) -> Dict[str, Any]:
        """Totals across all sellers"""
        return {
            'sellers': len(rows),
            'sales_count': sum(row.sales_count for row in rows),
            'revenue': round_money(sum(row.revenue for row in rows)),
            'profit': round_money(sum(row.profit for row in rows)),
            'bonus': round_money(sum(row.bonus for row in rows)),
            'top_seller': rows[0].name if rows else None
        }
