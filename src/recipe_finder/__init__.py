"""
Recipe Finder web application package.

The package exposes a small FastAPI proxy in front of a third-party recipe API, the
browser search page, and a headless controller that mirrors the page's search flow.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
