"""
Business logic for users.

``UserStore`` keeps users in an insertion‑ordered list owned by the
running application.  Identifiers come from a counter that only ever
increases, so an id freed by a delete is never handed out again.
Every method completes in a single synchronous step; handlers never
see a half‑applied change.
"""

import logging
from typing import Iterable, List

from ..core.errors import NotFoundError
from ..schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)


class UserStore:
    """In‑memory collection of users."""

    def __init__(self, users: Iterable[UserRead] = ()) -> None:
        self._users: List[UserRead] = list(users)
        self._next_id = max((user.id for user in self._users), default=0) + 1

    def list(self) -> List[UserRead]:
        """Return all users in insertion order."""
        return list(self._users)

    def get_by_id(self, user_id: int) -> UserRead:
        return self._users[self._index_of(user_id)]

    def exists(self, user_id: int) -> bool:
        return any(user.id == user_id for user in self._users)

    def create(self, data: UserCreate) -> UserRead:
        """Assign the next id to ``data`` and append it to the store."""
        user = UserRead(id=self._next_id, **data.model_dump())
        self._next_id += 1
        self._users.append(user)
        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    def update(self, user_id: int, data: UserUpdate) -> UserRead:
        """Merge the fields set on ``data`` into an existing user.

        Fields the client did not send keep their stored values.
        Nested ``address`` and ``company`` blocks are replaced as a
        whole, not merged key by key.  An ``id`` in ``data`` is ignored.
        """
        index = self._index_of(user_id)
        changes = data.model_dump(exclude_unset=True, exclude={"id"})
        merged = UserRead(**{**self._users[index].model_dump(), **changes})
        self._users[index] = merged
        logger.info("Updated user %s: %s", user_id, sorted(changes))
        return merged

    def delete(self, user_id: int) -> None:
        index = self._index_of(user_id)
        del self._users[index]
        logger.info("Deleted user %s", user_id)

    def _index_of(self, user_id: int) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        raise NotFoundError(f"User with ID {user_id} not found")
