"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (users, posts) has its own schema module,
store and router; routers are defined in ``api/endpoints`` and
aggregated in ``api/router.py``.
"""

from .main import app  # noqa: F401
