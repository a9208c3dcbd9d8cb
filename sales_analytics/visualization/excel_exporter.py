from pathlib import Path
from typing import List, Union

import pandas as pd

from sales_analytics.data_processing.data_transformer import DataTransformer
from sales_analytics.models.report import ReportRow
from sales_analytics.utils.constants import OUTPUT_DIR
from sales_analytics.utils.error_handler import ExportError, handle_errors
from sales_analytics.utils.logger import get_logger

class ExcelExporter:
    """Export sales reports to Excel format for easy reading"""
    
    def __init__(self, output_dir: Union[str, Path] = OUTPUT_DIR):
        self.output_dir = Path(output_dir)
        self.transformer = DataTransformer()
        self.logger = get_logger()
    
    @handle_errors(error_cls=ExportError)
    def export_report_to_excel(self, rows: List[ReportRow], filename: str = "sales_report") -> str:
        """Write sellers, top products and summary sheets to ``<filename>.xlsx``"""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        excel_path = self.output_dir / f"{filename}.xlsx"
        
        with pd.ExcelWriter(excel_path, engine='openpyxl') as writer:
            
            # Sheet 1: Ranked sellers
            sellers_df = self.transformer.report_to_dataframe(rows)
            sellers_df.to_excel(writer, sheet_name='Sellers', index=False)
            
            # Sheet 2: Top products per seller
            products_df = self.transformer.top_products_to_dataframe(rows)
            products_df.to_excel(writer, sheet_name='Top Products', index=False)
            
            # Sheet 3: Totals
            summary_df = self._create_summary_sheet(rows)
            summary_df.to_excel(writer, sheet_name='Summary', index=False)
        
        self.logger.info(f"Excel export saved to {excel_path}")
        return str(excel_path)
    
    def _create_summary_sheet(self, rows: List[ReportRow]) -> pd.DataFrame:
        summary = self.transformer.summarize(rows)
        labels = {
            'sellers': 'Sellers',
            'sales_count': 'Total Sales',
            'revenue': 'Total Revenue',
            'profit': 'Total Profit',
            'bonus': 'Total Bonus',
            'top_seller': 'Top Seller'
        }
        return pd.DataFrame(
            [{'Metric': labels[key], 'Value': value} for key, value in summary.items()]
        )
