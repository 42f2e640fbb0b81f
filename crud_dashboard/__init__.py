"""
Top‑level package for the CRUD Dashboard API.

The HTTP application lives in ``crud_dashboard.app``; import it as
``crud_dashboard.app.main:app``.  The package itself provides no
public exports.
"""

__all__ = []
