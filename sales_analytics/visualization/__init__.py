from .export_handler import ExportHandler
from .excel_exporter import ExcelExporter
from .report_visualizer import ReportVisualizer

__all__ = ['ExportHandler', 'ExcelExporter', 'ReportVisualizer']
