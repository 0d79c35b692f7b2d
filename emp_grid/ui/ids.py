from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        GRID_METRICS = "grid-metrics"
        RESIZE_TICK = "resize-tick"

    class Control:
        # Grid + its measured container
        EMPLOYEE_GRID = "employee-grid"
        GRID_CONTAINER = "grid-container"

        # Navbar
        NAVBAR_SUBTITLE = "navbar-subtitle"
        SUMMARY_BAR = "summary-bar"

        # Status bar
        STATUS_BAR = "status-bar"
