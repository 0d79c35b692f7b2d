"""
Rows-per-page from container and row metrics.

The grid is laid out with autoHeight, so without a page size that matches the
available space it either leaves a gap below the last row or pushes the
pagination bar out of view. ``compute_dynamic_page_size`` picks the number of
rows that fit; the UI applies it to the grid's pagination control whenever the
grid becomes ready or the window is resized.

Vertical stack the numbers refer to:

    container height   measured in the browser (top of grid to viewport bottom)
    - header height    fixed approximation of the column header row
    - footer height    measured chrome below the rows: pagination bar, status
                       line, card and page padding
    = available        divided by the theme row height, floored, at least 1
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONTAINER_HEIGHT_PX = 400
DEFAULT_ROW_HEIGHT_PX = 30
DEFAULT_HEADER_HEIGHT_PX = 50
DEFAULT_PAGE_SIZE_OPTIONS = (10, 20, 50, 100)


def _measured(value: Any, fallback: float) -> float:
    """
    A usable positive pixel value, or the fallback.

    Browser metrics arrive as JSON numbers, strings or null depending on how
    far the page got before measuring; anything non-positive counts as
    "not measured yet".
    """
    if isinstance(value, bool):
        return fallback
    try:
        px = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(px) or px <= 0:
        return fallback
    return px


def compute_dynamic_page_size(
    container_height_px: Any,
    row_height_px: Any,
    header_height_px: Any = DEFAULT_HEADER_HEIGHT_PX,
) -> int:
    """
    Number of rows that fit in the container below the header.

    max(1, floor((container - header) / row)). Unmeasurable container or row
    heights fall back to DEFAULT_CONTAINER_HEIGHT_PX / DEFAULT_ROW_HEIGHT_PX.
    Never returns less than 1 and never raises.
    """
    container = _measured(container_height_px, DEFAULT_CONTAINER_HEIGHT_PX)
    row = _measured(row_height_px, DEFAULT_ROW_HEIGHT_PX)
    header = _measured(header_height_px, 0.0)

    available = container - header
    return max(1, math.floor(available / row))


def page_size_from_metrics(
    metrics: Optional[Mapping[str, Any]],
    header_height_px: Any = DEFAULT_HEADER_HEIGHT_PX,
) -> int:
    """
    Page size for a measurement payload sent by the browser:
    {"containerHeight": <px>, "rowHeight": <px>, "footerHeight": <px>}.
    Missing keys or a missing payload use the defaults; an unmeasured footer
    counts as 0.

    The footer takes space from the rows just like the header does, so the two
    are added before dividing.
    """
    if not isinstance(metrics, Mapping):
        metrics = {}

    chrome = _measured(header_height_px, 0.0) + _measured(metrics.get("footerHeight"), 0.0)
    size = compute_dynamic_page_size(
        metrics.get("containerHeight"),
        metrics.get("rowHeight"),
        chrome,
    )
    logger.debug(
        "dynamic_page_size",
        extra={
            "container_height": metrics.get("containerHeight"),
            "row_height": metrics.get("rowHeight"),
            "header_height": header_height_px,
            "footer_height": metrics.get("footerHeight"),
            "page_size": size,
        },
    )
    return size


def page_size_options(
    page_size: int,
    base_options: Iterable[int] = DEFAULT_PAGE_SIZE_OPTIONS,
) -> List[int]:
    """Selectable page sizes with the computed one merged in, ascending."""
    return sorted(set(base_options) | {page_size})
