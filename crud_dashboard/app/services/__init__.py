"""
Service layer: the in‑memory stores and their FastAPI providers.

The stores are owned by the application (see ``main.lifespan``) and
live on ``app.state``.  Handlers receive them through the ``get_*``
dependencies below, so tests can build an app with whatever stores
they need.
"""

from fastapi import Request

from .post_store import PostStore, UserLookup
from .user_store import UserStore

__all__ = ["PostStore", "UserLookup", "UserStore", "get_post_store", "get_user_store"]


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_post_store(request: Request) -> PostStore:
    return request.app.state.post_store
