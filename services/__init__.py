"""Business logic services module."""
from .csv_exporter import CSVExport, CSVExporter
from .kpi_calculator import KPICalculator, KPISnapshot
from .table_builder import TableBuilder

__all__ = ["CSVExport", "CSVExporter", "KPICalculator", "KPISnapshot", "TableBuilder"]
