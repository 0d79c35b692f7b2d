from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from emp_grid.config.model import GlobalConfig
from emp_grid.core.columns import ColumnSpec
from emp_grid.core.dataset import EmployeeDataset
from emp_grid.core.renderers import RendererRegistry


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    dataset: EmployeeDataset

    columns: Tuple[ColumnSpec, ...] = ()
    registry: Optional[RendererRegistry] = None
    row_data: List[Dict[str, Any]] = field(default_factory=list)

    def validate(self) -> None:
        """Ensure the presentation engine is wired before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if not self.columns:
            raise RuntimeError("AppConfig.columns must be initialized.")
