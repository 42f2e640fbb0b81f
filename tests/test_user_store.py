"""Tests for the in-memory user store."""

import pytest

from crud_dashboard.app.core.errors import NotFoundError
from crud_dashboard.app.schemas.user import UserCreate, UserUpdate
from crud_dashboard.app.services import UserStore


def make_user(**overrides) -> UserCreate:
    fields = {"name": "John Doe", "username": "johndoe", "email": "john@example.com"}
    fields.update(overrides)
    return UserCreate(**fields)


def test_list_returns_seed_users_in_order(user_store: UserStore) -> None:
    assert [user.id for user in user_store.list()] == [1, 2, 3]


def test_create_assigns_next_sequential_id(user_store: UserStore) -> None:
    first = user_store.create(make_user())
    second = user_store.create(make_user(username="jane"))

    assert (first.id, second.id) == (4, 5)
    assert user_store.list()[-1] == second


def test_ids_are_never_reused_after_delete(user_store: UserStore) -> None:
    created = user_store.create(make_user())
    user_store.delete(created.id)

    again = user_store.create(make_user())

    assert again.id == created.id + 1
    seen = [user.id for user in user_store.list()]
    assert len(seen) == len(set(seen))


def test_create_then_get_returns_equal_record(user_store: UserStore) -> None:
    payload = make_user(
        phone="555-0100",
        address={
            "street": "Main St",
            "suite": "Apt. 1",
            "city": "Springfield",
            "zipcode": "12345",
            "geo": {"lat": "1.0", "lng": "2.0"},
        },
        company={"name": "Acme", "catchPhrase": "We make things", "bs": "things"},
    )

    created = user_store.create(payload)
    fetched = user_store.get_by_id(created.id)

    assert fetched == created
    assert fetched.model_dump(exclude={"id"}) == payload.model_dump()


def test_get_missing_user_raises_not_found(user_store: UserStore) -> None:
    with pytest.raises(NotFoundError, match="User with ID 999 not found"):
        user_store.get_by_id(999)


def test_update_merges_only_provided_fields(user_store: UserStore) -> None:
    before = user_store.get_by_id(1)

    updated = user_store.update(1, UserUpdate(name="Updated Name"))

    assert updated.name == "Updated Name"
    assert updated.email == before.email
    assert updated.company == before.company
    assert user_store.get_by_id(1) == updated


def test_update_can_clear_optional_fields(user_store: UserStore) -> None:
    updated = user_store.update(2, UserUpdate(phone=None, company=None))

    assert updated.phone is None
    assert updated.company is None
    assert updated.website == "anastasia.net"


def test_update_ignores_id_in_payload(user_store: UserStore) -> None:
    updated = user_store.update(3, UserUpdate(id=500, name="Renamed"))

    assert updated.id == 3
    assert updated.name == "Renamed"
    assert not user_store.exists(500)


def test_update_missing_user_raises_not_found(user_store: UserStore) -> None:
    with pytest.raises(NotFoundError):
        user_store.update(42, UserUpdate(name="Nobody"))


def test_delete_removes_user_from_list(user_store: UserStore) -> None:
    user_store.delete(2)

    assert [user.id for user in user_store.list()] == [1, 3]
    assert not user_store.exists(2)


def test_delete_missing_user_raises_not_found(user_store: UserStore) -> None:
    with pytest.raises(NotFoundError):
        user_store.delete(999)


def test_exists(user_store: UserStore) -> None:
    assert user_store.exists(1)
    assert not user_store.exists(999)


def test_empty_store_starts_at_one() -> None:
    store = UserStore()

    assert store.list() == []
    assert store.create(make_user()).id == 1
