from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from sales_analytics.analysis.strategies import calculate_simple_revenue, calculate_bonus_by_profit
from sales_analytics.data_processing.data_validator import DataValidator
from sales_analytics.models.dataset import SalesDataset
from sales_analytics.models.product import Product
from sales_analytics.models.report import ReportRow, SellerStat, TopProduct, round_money
from sales_analytics.utils.constants import TOP_PRODUCTS_LIMIT
from sales_analytics.utils.error_handler import UnknownProductError, UnknownSellerError
from sales_analytics.utils.logger import get_logger
from sales_analytics.utils.monitor import monitor

@dataclass(frozen=True)
class AnalysisOptions:
    """Revenue and bonus policies applied during one analysis run"""
    calculate_revenue: Callable[..., float] = calculate_simple_revenue
    calculate_bonus: Callable[..., float] = calculate_bonus_by_profit

class SalesAggregator:
    """Join sellers, products and purchase records into a ranked sales report"""
    
    def __init__(self, options: Any = None, top_products_limit: int = TOP_PRODUCTS_LIMIT):
        self.options = AnalysisOptions() if options is None else options
        self.top_products_limit = top_products_limit
        self.validator = DataValidator()
        self.logger = get_logger()
    
    @monitor.time_it
    def analyze(self, data: Any) -> List[ReportRow]:
        """Compute the per-seller report, best profit first.

        ``data`` is a SalesDataset or the raw mapping it is built from.
        Inputs are validated before options; the first unknown seller id or
        product SKU aborts the whole run.
        """
        dataset = self.validator.validate_dataset(data)
        calculate_revenue, calculate_bonus = self.validator.validate_options(self.options)
        
        self.logger.info(
            f"Analyzing {len(dataset.purchase_records)} purchase records "
            f"for {len(dataset.sellers)} sellers"
        )
        
        seller_stats = [
            SellerStat(id=seller.id, name=seller.full_name)
            for seller in dataset.sellers
        ]
        stats_by_id = {stat.id: stat for stat in seller_stats}
        product_index = {product.sku: product for product in dataset.products}
        
        for record in dataset.purchase_records:
            stat = stats_by_id.get(record.seller_id)
            if stat is None:
                raise UnknownSellerError(record.seller_id, record.receipt_id)
            
            stat.add_sale(record.total_amount)
            
            for item in record.items:
                product = self._lookup_product(product_index, item.sku, record.receipt_id)
                cost = product.purchase_price * item.quantity
                revenue = calculate_revenue(item, product)
                stat.add_item(item.sku, item.quantity, revenue - cost)
        
        # sorted() is stable, so equal profits keep seller-list order
        ranked = sorted(seller_stats, key=lambda s: s.profit, reverse=True)
        total = len(ranked)
        
        report = []
        for index, stat in enumerate(ranked):
            bonus = calculate_bonus(index, total, stat)
            report.append(self._build_row(stat, bonus))
            self.logger.debug(
                f"#{index + 1} {stat.name}: profit={stat.profit:.2f} bonus={bonus:.2f}"
            )
        
        self.logger.info(f"Sales report ready: {total} sellers ranked")
        return report
    
    def _lookup_product(self, product_index: Dict[str, Product], sku: str, receipt_id) -> Product:
        product = product_index.get(sku)
        if product is None:
            raise UnknownProductError(sku, receipt_id)
        return product
    
    def _top_products(self, stat: SellerStat) -> List[TopProduct]:
        """Best-selling SKUs by quantity; ties keep first-sold order"""
        ordered = sorted(stat.products_sold.items(), key=lambda entry: entry[1], reverse=True)
        return [TopProduct(sku=sku, quantity=quantity)
                for sku, quantity in ordered[:self.top_products_limit]]
    
    def _build_row(self, stat: SellerStat, bonus: float) -> ReportRow:
        return ReportRow(
            seller_id=stat.id,
            name=stat.name,
            revenue=round_money(stat.revenue),
            profit=round_money(stat.profit),
            sales_count=stat.sales_count,
            top_products=tuple(self._top_products(stat)),
            bonus=round_money(bonus)
        )

def analyze_sales_data(data: Any, options: Any) -> List[ReportRow]:
    """Build the ranked per-seller report for ``data`` using ``options``.

    ``options`` must supply ``calculate_revenue`` and ``calculate_bonus``,
    either as attributes (AnalysisOptions) or as mapping keys.
    """
    return SalesAggregator({} if options is None else options).analyze(data)
