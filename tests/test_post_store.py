"""Tests for the in-memory post store and its owner check."""

import pytest
from pydantic import ValidationError

from crud_dashboard.app.core.errors import InvalidInputError, NotFoundError
from crud_dashboard.app.schemas.post import PostCreate, PostUpdate
from crud_dashboard.app.services import PostStore


class FakeUsers:
    """Stands in for the user store; only answers ``exists``."""

    def __init__(self, *ids: int) -> None:
        self.ids = set(ids)
        self.calls = []

    def exists(self, user_id: int) -> bool:
        self.calls.append(user_id)
        return user_id in self.ids


def make_post(user_id: int = 1, **overrides) -> PostCreate:
    fields = {"userId": user_id, "title": "A fine title", "body": "A body that is long enough"}
    fields.update(overrides)
    return PostCreate(**fields)


def test_create_checks_owner_through_lookup() -> None:
    users = FakeUsers(7)
    store = PostStore(users)

    post = store.create(make_post(7))

    assert post.id == 1
    assert post.user_id == 7
    assert users.calls == [7]


def test_create_with_unknown_user_is_invalid_input_not_not_found() -> None:
    store = PostStore(FakeUsers(1))

    with pytest.raises(InvalidInputError) as excinfo:
        store.create(make_post(99))

    assert not isinstance(excinfo.value, NotFoundError)
    assert excinfo.value.status_code == 400
    assert store.list() == []


def test_update_to_unknown_user_is_invalid_input(post_store: PostStore) -> None:
    with pytest.raises(InvalidInputError, match="User with ID 99 not found"):
        post_store.update(1, PostUpdate(userId=99))

    assert post_store.get_by_id(1).user_id == 1


def test_update_to_existing_user_moves_post(post_store: PostStore) -> None:
    moved = post_store.update(1, PostUpdate(userId=3))

    assert moved.user_id == 3
    assert [post.id for post in post_store.list_by_user(3)] == [1, 9, 10]


def test_update_without_user_id_skips_owner_check() -> None:
    users = FakeUsers(1)
    store = PostStore(users)
    store.create(make_post(1))
    users.calls.clear()

    store.update(1, PostUpdate(body="A different body text"))

    assert users.calls == []


def test_title_of_four_characters_fails_validation() -> None:
    with pytest.raises(ValidationError):
        PostUpdate(title="abcd")


def test_title_of_five_characters_updates(post_store: PostStore) -> None:
    updated = post_store.update(2, PostUpdate(title="abcde"))

    assert updated.title == "abcde"
    assert updated.body == post_store.get_by_id(2).body


def test_body_shorter_than_ten_characters_fails_validation() -> None:
    with pytest.raises(ValidationError):
        make_post(body="too short")


def test_update_ignores_id_in_payload(post_store: PostStore) -> None:
    updated = post_store.update(3, PostUpdate(id=500, title="Renamed post"))

    assert updated.id == 3
    assert post_store.exists(3)
    assert not post_store.exists(500)


def test_list_by_user_preserves_insertion_order(post_store: PostStore) -> None:
    new_for_two = post_store.create(make_post(2))
    post_store.create(make_post(1))
    newer_for_two = post_store.create(make_post(2))

    posts = post_store.list_by_user(2)

    assert [post.id for post in posts] == [6, 7, 8, new_for_two.id, newer_for_two.id]
    assert all(post.user_id == 2 for post in posts)


def test_list_by_unknown_user_is_empty(post_store: PostStore) -> None:
    assert post_store.list_by_user(999) == []


def test_get_update_delete_missing_post_raise_not_found(post_store: PostStore) -> None:
    with pytest.raises(NotFoundError):
        post_store.get_by_id(999)
    with pytest.raises(NotFoundError):
        post_store.update(999, PostUpdate(title="Whatever title"))
    with pytest.raises(NotFoundError):
        post_store.delete(999)


def test_delete_removes_post(post_store: PostStore) -> None:
    post_store.delete(5)

    assert 5 not in [post.id for post in post_store.list()]
    assert post_store.create(make_post(1)).id == 11
