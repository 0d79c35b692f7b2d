"""
Config package for emp_grid.

Responsible for:
- config model (GlobalConfig)
- config I/O helpers (load_global_config / load_dataset)
"""

from .model import GlobalConfig
from .loader import load_global_config, load_dataset, load_app_data
