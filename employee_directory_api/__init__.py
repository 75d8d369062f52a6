"""
Top-level package for the Employee Directory API.

Makes ``employee_directory_api`` a package so that modules within
``app`` can be imported using fully qualified names like
``employee_directory_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
