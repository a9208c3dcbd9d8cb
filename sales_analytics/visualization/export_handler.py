import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from sales_analytics.data_processing.data_transformer import DataTransformer
from sales_analytics.models.report import ReportRow
from sales_analytics.utils.constants import OUTPUT_DIR
from sales_analytics.utils.error_handler import ExportError, handle_errors
from sales_analytics.utils.logger import get_logger

class ExportHandler:
    """Handle exporting sales reports in various formats"""
    
    def __init__(self, output_dir: Union[str, Path] = OUTPUT_DIR):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.transformer = DataTransformer()
        self.logger = get_logger()
    
    @handle_errors(error_cls=ExportError)
    def export_to_json(self, rows: List[ReportRow], filename: str = "sales_report.json",
                       created_at: Optional[datetime] = None) -> str:
        """Export report rows plus run metadata to JSON"""
        export_data = {
            'metadata': {
                'created_at': (created_at or datetime.now()).isoformat(),
                'summary': self.transformer.summarize(rows)
            },
            'sellers': [row.to_dict() for row in rows]
        }
        
        filepath = self.output_dir / filename
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(export_data, f, indent=2, ensure_ascii=False)
        
        self.logger.info(f"Exported sales report to {filepath}")
        return str(filepath)
    
    @handle_errors(error_cls=ExportError)
    def export_to_csv(self, rows: List[ReportRow], filename: str = "sales_report.csv") -> str:
        """Export the flattened report table to CSV"""
        df = self.transformer.report_to_dataframe(rows)
        
        filepath = self.output_dir / filename
        df.to_csv(filepath, index=False)
        
        self.logger.info(f"Exported sales report to {filepath}")
        return str(filepath)
