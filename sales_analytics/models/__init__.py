from .seller import Seller, Customer
from .product import Product
from .purchase import LineItem, PurchaseRecord
from .dataset import SalesDataset
from .report import SellerStat, TopProduct, ReportRow, round_money

__all__ = ['Seller', 'Customer', 'Product', 'LineItem', 'PurchaseRecord',
           'SalesDataset', 'SellerStat', 'TopProduct', 'ReportRow', 'round_money']
