"""Reference-table adapters - Implementations of the ReferenceTablePort.

Available implementations:
- ReferenceTable: Airport records loaded from CSV
"""

from .csv_table import ReferenceTable

__all__ = ["ReferenceTable"]
