from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from emp_grid.core.layout_sizer import DEFAULT_HEADER_HEIGHT_PX, DEFAULT_PAGE_SIZE_OPTIONS


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title / subtitle: navbar text
    - data_file: employee dataset, resolved against the config root
    - default_page_size: page size before the grid has been measured, and the
      page size used when dynamic sizing is off
    - page_size_options: page sizes offered by the pagination selector
    - header_height_px: approximate rendered height of the grid header row
    - dynamic_page_size: fit the page size to the available height
    """
    data_file: Path
    ui_title: str = "Employee Dashboard"
    subtitle: str = "Interactive employee directory"
    default_page_size: int = 10
    page_size_options: List[int] = field(default_factory=lambda: list(DEFAULT_PAGE_SIZE_OPTIONS))
    header_height_px: int = DEFAULT_HEADER_HEIGHT_PX
    dynamic_page_size: bool = True
