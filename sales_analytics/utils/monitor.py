import time
from functools import wraps

from sales_analytics.utils.logger import get_logger

class PerformanceMonitor:
    """Monitor system performance"""
    
    def time_it(self, func):
        """Decorator to log function execution time"""
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            result = func(*args, **kwargs)
            duration = time.perf_counter() - start
            get_logger().debug(f"{func.__qualname__} took {duration:.4f}s")
            return result
        return wrapper

monitor = PerformanceMonitor()
