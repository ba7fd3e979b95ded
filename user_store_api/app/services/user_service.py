"""
Business logic for users.

``UserService`` owns the whole state of the application: an ordered
list of user records kept in process memory.  An instance is created
and seeded by ``create_app`` and handed to the routes through a FastAPI
dependency, so every application (and every test) gets its own store.

Each operation is a single read‑modify‑write performed while holding
the store's lock, which keeps requests atomic with respect to each
other even when handlers run in a thread pool.
"""

import logging
import re
import threading
from dataclasses import dataclass
from typing import Any, List, Optional

from ..schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)

ID_STRATEGIES = ("length", "counter")

# Whitespace skipped before an id: ASCII blanks, line terminators, the
# Unicode space separators and the byte order mark.
_ID_WHITESPACE = (
    " \t\n\v\f\r\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_DECIMAL_DIGITS = re.compile(r"[0-9]+")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def parse_user_id(raw: str) -> Optional[int]:
    """Parse a path parameter into a user id.

    Leading whitespace and a sign are skipped, a ``0x`` prefix selects
    hexadecimal, and anything after the digits is ignored, so ``"12abc"``
    is 12 and ``"0x1f"`` is 31.  Returns ``None`` when no digits follow;
    such a value never matches a stored user.
    """
    text = raw.lstrip(_ID_WHITESPACE)
    sign = -1 if text.startswith("-") else 1
    if text.startswith(("+", "-")):
        text = text[1:]

    digits, base = _DECIMAL_DIGITS, 10
    if text[:2] in ("0x", "0X"):
        text = text[2:]
        digits, base = _HEX_DIGITS, 16

    match = digits.match(text)
    if match is None:
        return None
    return sign * int(match.group(), base)


class UserNotFoundError(Exception):
    """Raised when an operation targets an id that is not in the store."""

    def __init__(self, user_id: Optional[int]) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


@dataclass
class User:
    """A stored user record."""

    id: int
    name: Any = None


class UserService:
    """In‑memory user store.

    Parameters
    ----------
    seed_name : Any
        Name of the user created with id 1 when the store is built.
    id_strategy : str
        ``"length"`` assigns ``len(users) + 1`` to new users, which can
        reuse the id of a deleted user.  ``"counter"`` assigns one more
        than the highest id ever issued.
    """

    def __init__(self, seed_name: Any = "Firat", id_strategy: str = "length") -> None:
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id strategy {id_strategy!r}; expected one of {', '.join(ID_STRATEGIES)}"
            )
        self.id_strategy = id_strategy
        self._lock = threading.Lock()
        self._users: List[User] = [User(id=1, name=seed_name)]
        self._last_id = 1

    def _next_id(self) -> int:
        if self.id_strategy == "counter":
            return self._last_id + 1
        return len(self._users) + 1

    def _find(self, user_id: Optional[int]) -> Optional[User]:
        if user_id is None:
            return None
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    @staticmethod
    def _to_read(user: User) -> UserRead:
        return UserRead.model_validate(user)

    async def list_users(self) -> List[UserRead]:
        """Return every user in insertion order."""
        with self._lock:
            return [self._to_read(user) for user in self._users]

    async def create_user(self, data: UserCreate) -> UserRead:
        """Append a new user and return it."""
        with self._lock:
            user = User(id=self._next_id(), name=data.name)
            self._users.append(user)
            self._last_id = max(self._last_id, user.id)
            logger.info("Created user %s", user.id)
            return self._to_read(user)

    async def update_user(self, user_id: Optional[int], data: UserUpdate) -> UserRead:
        """Overwrite the name of the first user with ``user_id``.

        Raises ``UserNotFoundError`` without touching the store when no
        user matches.
        """
        with self._lock:
            user = self._find(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            user.name = data.name
            logger.info("Updated user %s", user.id)
            return self._to_read(user)

    async def delete_user(self, user_id: Optional[int]) -> bool:
        """Remove users with ``user_id`` from the store.

        The collection is replaced by a filtered copy, so the order of
        the remaining users is preserved.  Returns ``True`` if anything
        was removed; a miss is not an error.
        """
        with self._lock:
            remaining = [user for user in self._users if user.id != user_id]
            deleted = len(remaining) != len(self._users)
            self._users = remaining
        if deleted:
            logger.info("Deleted user %s", user_id)
        else:
            logger.debug("Delete of unknown user %s ignored", user_id)
        return deleted
