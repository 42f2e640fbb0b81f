"""
Business logic for posts.

``PostStore`` mirrors ``UserStore`` and adds the one rule that ties
the two together: a post must belong to a user that exists.  The
store does not hold a user store; it is given anything that can
answer ``exists(user_id)``, which keeps it testable with a fake.
A missing owner is invalid input (400), never not‑found (404).
"""

import logging
from typing import Iterable, List, Protocol

from ..core.errors import InvalidInputError, NotFoundError
from ..schemas.post import PostCreate, PostRead, PostUpdate

logger = logging.getLogger(__name__)


class UserLookup(Protocol):
    def exists(self, user_id: int) -> bool:
        ...


class PostStore:
    """In‑memory collection of posts with an owner check."""

    def __init__(self, users: UserLookup, posts: Iterable[PostRead] = ()) -> None:
        self._users = users
        self._posts: List[PostRead] = list(posts)
        self._next_id = max((post.id for post in self._posts), default=0) + 1

    def list(self) -> List[PostRead]:
        return list(self._posts)

    def list_by_user(self, user_id: int) -> List[PostRead]:
        """Return the posts owned by ``user_id``, oldest first."""
        return [post for post in self._posts if post.user_id == user_id]

    def get_by_id(self, post_id: int) -> PostRead:
        return self._posts[self._index_of(post_id)]

    def exists(self, post_id: int) -> bool:
        return any(post.id == post_id for post in self._posts)

    def create(self, data: PostCreate) -> PostRead:
        self._require_user(data.user_id)
        post = PostRead(id=self._next_id, **data.model_dump())
        self._next_id += 1
        self._posts.append(post)
        logger.info("Created post %s for user %s", post.id, post.user_id)
        return post

    def update(self, post_id: int, data: PostUpdate) -> PostRead:
        """Merge the fields set on ``data`` into an existing post.

        A changed owner is checked the same way as on create.  An
        ``id`` in the payload is ignored.
        """
        index = self._index_of(post_id)
        changes = data.model_dump(exclude_unset=True, exclude={"id"})
        if "user_id" in changes:
            self._require_user(changes["user_id"])
        merged = PostRead(**{**self._posts[index].model_dump(), **changes})
        self._posts[index] = merged
        logger.info("Updated post %s: %s", post_id, sorted(changes))
        return merged

    def delete(self, post_id: int) -> None:
        index = self._index_of(post_id)
        del self._posts[index]
        logger.info("Deleted post %s", post_id)

    def _require_user(self, user_id: int) -> None:
        if not self._users.exists(user_id):
            raise InvalidInputError(f"User with ID {user_id} not found")

    def _index_of(self, post_id: int) -> int:
        for index, post in enumerate(self._posts):
            if post.id == post_id:
                return index
        raise NotFoundError(f"Post with ID {post_id} not found")
