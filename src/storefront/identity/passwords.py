"""Password hashing port and its bcrypt adapter.

Passwords are hashed one way at registration and on update; nothing in the
storefront ever needs the plain text back. ``get_hasher()`` / ``set_hasher()``
let tests swap in a cheaper implementation.
"""

from abc import ABC, abstractmethod

import bcrypt


class PasswordHasher(ABC):
    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a one-way hash of ``password``."""
        ...

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Check ``password`` against a hash produced by :meth:`hash`."""
        ...


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


_current_hasher: PasswordHasher | None = None


def get_hasher() -> PasswordHasher:
    """Return the active hasher. Defaults to bcrypt."""
    global _current_hasher
    if _current_hasher is None:
        _current_hasher = BcryptPasswordHasher()
    return _current_hasher


def set_hasher(hasher: PasswordHasher) -> None:
    global _current_hasher
    _current_hasher = hasher


def reset_hasher() -> None:
    global _current_hasher
    _current_hasher = None
