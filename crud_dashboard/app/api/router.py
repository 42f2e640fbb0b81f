"""
Top‑level API router.

This router aggregates the domain routers (users, posts, health)
under a unified prefix supplied by ``main.create_app``.  When a new
domain is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import health, posts, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(posts.router, prefix="/posts", tags=["posts"])
router.include_router(health.router, prefix="/health", tags=["health"])
