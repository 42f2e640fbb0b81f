"""
Post endpoints.

CRUD over the post store.  Creating a post, or moving one to another
owner, requires the owner to exist; an unknown ``userId`` is a 400,
not a 404.  ``GET /posts?userId=<id>`` lists a single user's posts.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from crud_dashboard.app.schemas.envelope import Envelope, Message
from crud_dashboard.app.schemas.post import PostCreate, PostRead, PostUpdate
from crud_dashboard.app.services import PostStore, get_post_store

router = APIRouter()


@router.get("", response_model=Envelope[List[PostRead]])
async def list_posts(
    user_id: Optional[int] = Query(None, alias="userId"),
    store: PostStore = Depends(get_post_store),
) -> dict:
    """Return all posts, or only those of ``userId`` when given.

    Filtering by a user that does not exist yields an empty list.
    """
    if user_id is not None:
        return {"data": store.list_by_user(user_id)}
    return {"data": store.list()}


@router.get("/{post_id}", response_model=Envelope[PostRead])
async def get_post(post_id: int, store: PostStore = Depends(get_post_store)) -> dict:
    return {"data": store.get_by_id(post_id)}


@router.post("", response_model=Envelope[PostRead], status_code=status.HTTP_201_CREATED)
async def create_post(post_in: PostCreate, store: PostStore = Depends(get_post_store)) -> dict:
    return {"data": store.create(post_in)}


@router.patch("/{post_id}", response_model=Envelope[PostRead])
@router.put("/{post_id}", response_model=Envelope[PostRead])
async def update_post(
    post_id: int,
    post_in: PostUpdate,
    store: PostStore = Depends(get_post_store),
) -> dict:
    return {"data": store.update(post_id, post_in)}


@router.delete("/{post_id}", response_model=Envelope[Message])
async def delete_post(post_id: int, store: PostStore = Depends(get_post_store)) -> dict:
    store.delete(post_id)
    return {"data": {"message": f"Post with ID {post_id} has been deleted"}}
