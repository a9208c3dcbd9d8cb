import json
from pathlib import Path
from typing import Any, Dict, Union

from sales_analytics.data_processing.data_validator import DataValidator
from sales_analytics.models.dataset import SalesDataset
from sales_analytics.utils.error_handler import DataLoadError, handle_errors
from sales_analytics.utils.logger import get_logger

class DataLoader:
    """Handle all data loading operations"""
    
    def __init__(self, data_path: Union[str, Path] = "data"):
        self.data_path = Path(data_path)
        self.validator = DataValidator()
        self.logger = get_logger()
    
    def resolve(self, filename: Union[str, Path]) -> Path:
        """Absolute paths are used as given, relative ones under data_path"""
        path = Path(filename)
        return path if path.is_absolute() or path.exists() else self.data_path / path
    
    @handle_errors(error_cls=DataLoadError)
    def load_raw(self, filename: Union[str, Path]) -> Dict[str, Any]:
        """Read a dataset file without building models"""
        file_path = self.resolve(filename)
        
        if not file_path.exists():
            raise DataLoadError(f"Data file not found: {file_path}")
        
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise DataLoadError(f"Invalid JSON in {file_path}: {e}") from e
        
        if not isinstance(raw, dict):
            raise DataLoadError(f"{file_path}: top-level JSON value must be an object")
        return raw
    
    def load_file(self, filename: Union[str, Path]) -> SalesDataset:
        """Load and validate a dataset file"""
        raw = self.load_raw(filename)
        dataset = self.validator.validate_dataset(raw)
        self.logger.info(
            f"Loaded {len(dataset.sellers)} sellers, {len(dataset.products)} products, "
            f"{len(dataset.purchase_records)} purchase records from {self.resolve(filename)}"
        )
        return dataset
