"""
Top-level package for the employee grid.

This package exposes the presentation engine (columns, renderers, layout sizing)
and the Dash UI adapter. Most code should import from submodules such as:
    emp_grid.core
    emp_grid.config
    emp_grid.ui
"""

__all__: list[str] = []
