#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path
from typing import List, Optional

def print_report(rows) -> None:
    """Print the ranked report as a console table"""
    print("\n" + "=" * 78)
    print("SELLER PERFORMANCE REPORT")
    print("=" * 78)
    print(f"{'#':>3}  {'Seller':<24}{'Revenue':>12}{'Profit':>12}{'Sales':>7}{'Bonus':>12}")
    print("-" * 78)
    for rank, row in enumerate(rows, start=1):
        print(f"{rank:>3}  {row.name:<24}{row.revenue:>12.2f}{row.profit:>12.2f}"
              f"{row.sales_count:>7}{row.bonus:>12.2f}")
        if row.top_products:
            top = ", ".join(f"{p.sku} x{p.quantity}" for p in row.top_products[:3])
            print(f"     top: {top}")
    print("=" * 78)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Seller sales performance report')
    parser.add_argument('data', help='Path to a JSON dataset file')
    parser.add_argument('--format', choices=['json', 'csv', 'excel', 'none'], default='json',
                        help='Export format (default: json)')
    parser.add_argument('--output-dir', default=None, help='Directory for exported files')
    parser.add_argument('--name', default='sales_report', help='Base name for exported files')
    parser.add_argument('--log-dir', default=None, help='Directory for the dated log file')
    parser.add_argument('--chart', action='store_true', help='Save a profit/bonus bar chart')
    parser.add_argument('--audit', action='store_true',
                        help='Report suspicious purchase data before analysing')
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    from sales_analytics.analysis.aggregator import AnalysisOptions, SalesAggregator
    from sales_analytics.data_processing.data_loader import DataLoader
    from sales_analytics.data_processing.data_validator import DataValidator
    from sales_analytics.utils.constants import LOG_DIR, OUTPUT_DIR
    from sales_analytics.utils.error_handler import SalesAnalyticsError
    from sales_analytics.utils.logger import enable_file_logging, get_logger

    enable_file_logging(args.log_dir or LOG_DIR)
    logger = get_logger()
    output_dir = Path(args.output_dir or OUTPUT_DIR)

    try:
        dataset = DataLoader().load_file(args.data)

        if args.audit:
            validator = DataValidator()
            is_valid, issues = validator.audit_records(dataset)
            print(validator.generate_validation_report())
            if not is_valid:
                print(f"\n⚠️  Data audit found {len(issues)} issues; figures may be off")

        rows = SalesAggregator(AnalysisOptions()).analyze(dataset)
        print_report(rows)

        if args.format == 'json':
            from sales_analytics.visualization.export_handler import ExportHandler
            path = ExportHandler(output_dir).export_to_json(rows, f"{args.name}.json")
            print(f"\n✅ Report saved to {path}")
        elif args.format == 'csv':
            from sales_analytics.visualization.export_handler import ExportHandler
            path = ExportHandler(output_dir).export_to_csv(rows, f"{args.name}.csv")
            print(f"\n✅ Report saved to {path}")
        elif args.format == 'excel':
            from sales_analytics.visualization.excel_exporter import ExcelExporter
            path = ExcelExporter(output_dir).export_report_to_excel(rows, args.name)
            print(f"\n✅ Report saved to {path}")

        if args.chart:
            from sales_analytics.visualization.report_visualizer import ReportVisualizer
            output_dir.mkdir(parents=True, exist_ok=True)
            chart_path = output_dir / f"{args.name}.png"
            ReportVisualizer().plot_report(rows, save_path=str(chart_path))
            print(f"📊 Chart saved to {chart_path}")

    except SalesAnalyticsError as e:
        logger.error(f"Analysis failed: {e}")
        print(f"\n❌ Error: {e}")
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
