"""
User endpoints.

CRUD over the user store.  PATCH and PUT both merge the supplied
fields into the stored record; neither replaces the whole user.
Missing ids surface as ``NotFoundError`` and are turned into 404
responses by the application's exception handlers.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from crud_dashboard.app.schemas.envelope import Envelope, Message
from crud_dashboard.app.schemas.user import UserCreate, UserRead, UserUpdate
from crud_dashboard.app.services import UserStore, get_user_store

router = APIRouter()


@router.get("", response_model=Envelope[List[UserRead]])
async def list_users(store: UserStore = Depends(get_user_store)) -> dict:
    """Return all users in the order they were created."""
    return {"data": store.list()}


@router.get("/{user_id}", response_model=Envelope[UserRead])
async def get_user(user_id: int, store: UserStore = Depends(get_user_store)) -> dict:
    return {"data": store.get_by_id(user_id)}


@router.post("", response_model=Envelope[UserRead], status_code=status.HTTP_201_CREATED)
async def create_user(user_in: UserCreate, store: UserStore = Depends(get_user_store)) -> dict:
    return {"data": store.create(user_in)}


@router.patch("/{user_id}", response_model=Envelope[UserRead])
@router.put("/{user_id}", response_model=Envelope[UserRead])
async def update_user(
    user_id: int,
    user_in: UserUpdate,
    store: UserStore = Depends(get_user_store),
) -> dict:
    """Merge the provided fields into an existing user."""
    return {"data": store.update(user_id, user_in)}


@router.delete("/{user_id}", response_model=Envelope[Message])
async def delete_user(user_id: int, store: UserStore = Depends(get_user_store)) -> dict:
    """Delete a user by ID.

    Posts written by the user are kept.
    """
    store.delete(user_id)
    return {"data": {"message": f"User with ID {user_id} has been deleted"}}
