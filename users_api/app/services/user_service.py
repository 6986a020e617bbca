"""
Business logic for users.

``UserStore`` keeps user records in memory, keyed by their ``id``.
Every stored record satisfies ``store[k].id == k``.  A single lock
guards all access so that handlers running on the event loop and in
worker threads never interleave their writes.

``UserService`` decodes request bodies and maps the five operations of
the API (list, get, upsert, create, delete) onto the store.  Decoding
happens before the store is touched, so a malformed body never
mutates it.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Container, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from ..schemas.user import UserPayload, UserRead


logger = logging.getLogger(__name__)

SEED_USERS = (
    UserRead(id="1", name="Mario", age=35),
    UserRead(id="2", name="Luigi", age=32),
    UserRead(id="3", name="Toad", age=481),
    UserRead(id="4", name="Peach", age=27),
)


class UserServiceError(Exception):
    """Base class for errors raised by :class:`UserService`."""


class UserDecodeError(UserServiceError):
    """The request body could not be decoded into a user record."""


class UserNotFoundError(UserServiceError):
    """No user is stored under the requested id."""

    def __init__(self, user_id: str) -> None:
        super().__init__("User could not be found.")
        self.user_id = user_id


class TimestampIdGenerator:
    """Issue ids from the current Unix time in whole seconds.

    Two calls within the same second return the same id, so a second
    create overwrites the first.  Kept for clients that depend on that
    behaviour.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock

    def next_id(self, taken: Container[str]) -> str:
        return str(int(self._clock()))


class MonotonicIdGenerator(TimestampIdGenerator):
    """Issue timestamp‑derived ids that never repeat.

    The id is the current Unix second, bumped past the last issued id
    and past any key already present in the store.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        super().__init__(clock)
        self._last = 0

    def next_id(self, taken: Container[str]) -> str:
        candidate = max(int(self._clock()), self._last + 1)
        while str(candidate) in taken:
            candidate += 1
        self._last = candidate
        return str(candidate)


ID_GENERATORS = {
    "monotonic": MonotonicIdGenerator,
    "timestamp": TimestampIdGenerator,
}


def make_id_generator(strategy: str) -> TimestampIdGenerator:
    """Return the id generator registered under ``strategy``."""
    try:
        return ID_GENERATORS[strategy.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown id strategy {strategy!r}; expected one of {sorted(ID_GENERATORS)}"
        ) from None


class UserStore:
    """In‑memory mapping from user id to :class:`UserRead`."""

    def __init__(self, users: Iterable[UserRead] = ()) -> None:
        self._lock = threading.Lock()
        self._users: Dict[str, UserRead] = {user.id: user for user in users}

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._users

    def all(self) -> List[UserRead]:
        with self._lock:
            return list(self._users.values())

    def get(self, user_id: str) -> Optional[UserRead]:
        with self._lock:
            return self._users.get(user_id)

    def put(self, user_id: str, payload: UserPayload) -> UserRead:
        user = payload.to_user(user_id)
        with self._lock:
            self._users[user_id] = user
        return user

    def add(self, payload: UserPayload, ids: TimestampIdGenerator) -> UserRead:
        # The id must be picked under the same lock as the write.
        with self._lock:
            user = payload.to_user(ids.next_id(self._users))
            self._users[user.id] = user
        return user

    def remove(self, user_id: str) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None


class UserService:
    """Service for the user resource.

    The service owns no global state: the store and the id generator
    are handed in by the application factory.
    """

    def __init__(self, store: UserStore, id_generator: Optional[TimestampIdGenerator] = None) -> None:
        self.store = store
        self.id_generator = id_generator or MonotonicIdGenerator()

    @staticmethod
    def decode(payload: Union[bytes, str]) -> UserPayload:
        """Decode a JSON request body into a :class:`UserPayload`.

        Raises
        ------
        UserDecodeError
            If the body is not valid JSON or does not have the shape of
            a user record.  The message is pydantic's error text.
        """
        try:
            return UserPayload.model_validate_json(payload)
        except ValidationError as exc:
            raise UserDecodeError(str(exc)) from exc

    async def list_users(self) -> List[UserRead]:
        """Return every stored user, in no particular order."""
        logger.info("Listing users")
        return self.store.all()

    async def get_user(self, user_id: str) -> UserRead:
        """Return the user stored under ``user_id``.

        Raises :class:`UserNotFoundError` when there is none.
        """
        logger.info("Fetching user %s", user_id)
        user = self.store.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def upsert_user(self, user_id: str, payload: Union[bytes, str]) -> UserRead:
        """Insert or replace the user stored under ``user_id``.

        Any id carried by the payload is ignored in favour of
        ``user_id``.
        """
        logger.info("Upserting user %s", user_id)
        data = self.decode(payload)
        return self.store.put(user_id, data)

    async def create_user(self, payload: Union[bytes, str]) -> UserRead:
        """Store a new user under a freshly generated id."""
        data = self.decode(payload)
        user = self.store.add(data, self.id_generator)
        logger.info("Created user %s", user.id)
        return user

    async def delete_user(self, user_id: str) -> bool:
        """Remove ``user_id`` from the store.

        Deleting an unknown id is not an error.  Returns whether a
        record was actually removed.
        """
        removed = self.store.remove(user_id)
        logger.info("Deleted user %s (existed: %s)", user_id, removed)
        return removed
