"""System-wide constants"""
import os

# Bonus rates by profit rank
FIRST_PLACE_BONUS_RATE = 0.15
PODIUM_BONUS_RATE = 0.10  # ranks 2 and 3
STANDARD_BONUS_RATE = 0.05
LAST_PLACE_BONUS_RATE = 0.0

# Report settings
TOP_PRODUCTS_LIMIT = 10
MONEY_PRECISION = 2

# Input collections every dataset must carry
REQUIRED_COLLECTIONS = ('sellers', 'customers', 'products', 'purchase_records')

# Runtime overrides
LOG_DIR = os.getenv('SALES_ANALYTICS_LOG_DIR', 'logs')
LOG_LEVEL = os.getenv('SALES_ANALYTICS_LOG_LEVEL', 'INFO').upper()
OUTPUT_DIR = os.getenv('SALES_ANALYTICS_OUTPUT_DIR', 'output')

# Column labels used by tabular exports
REPORT_COLUMNS = {
    'seller_id': 'Seller ID',
    'name': 'Seller',
    'revenue': 'Revenue',
    'profit': 'Profit',
    'sales_count': 'Sales',
    'bonus': 'Bonus',
    'top_products': 'Top Products'
}
