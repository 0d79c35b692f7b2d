from __future__ import annotations

from typing import List, Optional

from dash import html

from emp_grid.core.dataset import DatasetSummary
from emp_grid.core.renderers import format_currency


def summary_bar(summary: DatasetSummary) -> List[html.Span]:
    """Headline numbers for the snapshot, one pill per figure."""
    mean_salary = (
        format_currency(round(summary.mean_salary))
        if summary.mean_salary is not None
        else "n/a"
    )
    items = [
        ("Employees", str(summary.n_employees)),
        ("Active", str(summary.n_active)),
        ("Departments", str(summary.n_departments)),
        ("Mean salary", mean_salary),
    ]
    return [
        html.Span(
            [html.Strong(f"{label}: "), value],
            className="emp-summary-item me-3",
        )
        for label, value in items
    ]


def status_text(
    n_total: int,
    n_visible: Optional[int],
    page_size: Optional[int],
    n_selected: int,
) -> str:
    """
    One-line grid status, e.g.
    "Showing 42 of 120 employees · 11 per page · 3 selected".
    """
    shown = n_total if n_visible is None else n_visible
    if shown == n_total:
        parts = [f"Showing {n_total} employees"]
    else:
        parts = [f"Showing {shown} of {n_total} employees"]

    if page_size:
        parts.append(f"{page_size} per page")
    if n_selected:
        parts.append(f"{n_selected} selected")
    return " · ".join(parts)
