"""
Core presentation engine: record type, dataset snapshot, column model,
renderer registry and the layout sizer
"""

from .record import Record
from .dataset import EmployeeDataset
from .columns import ColumnSpec, FilterKind, build_column_specs, column_specs
from .renderers import RendererKind, RendererRegistry, default_registry
from .layout_sizer import compute_dynamic_page_size

__all__ = [
    "Record",
    "EmployeeDataset",
    "ColumnSpec",
    "FilterKind",
    "build_column_specs",
    "column_specs",
    "RendererKind",
    "RendererRegistry",
    "default_registry",
    "compute_dynamic_page_size",
]
