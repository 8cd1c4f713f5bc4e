"""Market data provider implementations."""

from .base import MarketDataProvider
from .csv_data import CsvDataProvider
from .sample_data import SampleDataProvider

__all__ = ["MarketDataProvider", "CsvDataProvider", "SampleDataProvider"]
