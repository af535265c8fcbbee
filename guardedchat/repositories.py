"""Storage of users, their chat state and the list of forbidden words."""

from __future__ import annotations

import abc
import threading
from os import PathLike
from typing import Union

from guardedchat.errors import NotFoundError
from guardedchat.models import AuthUser, ChatUser

_PENALTY_LIMIT = 3

StrPath = Union[str, "PathLike[str]"]


class AuthRepository(abc.ABC):
    """Lookup of users allowed to authenticate."""

    @abc.abstractmethod
    def get_user(self, login: str) -> AuthUser:
        """Return the user with this login or raise NotFoundError."""


class AuthRepositoryInMemory(AuthRepository):
    """Users loaded from a file of ``login:password_hash:role`` lines."""

    def __init__(self, auth_storage: StrPath) -> None:
        self._users: dict[str, AuthUser] = {}
        self._lock = threading.Lock()
        self._load(auth_storage)

    def _load(self, path: StrPath) -> None:
        with open(path, encoding="utf-8") as handle:
            for raw in handle:
                line = raw.removesuffix("\n").removesuffix("\r")
                parts = line.split(":")
                if len(parts) != 3:
                    continue
                login, password_hash, role = parts
                with self._lock:
                    self._users[login] = AuthUser(
                        login=login, role=role, password_hash=password_hash
                    )

    def get_user(self, login: str) -> AuthUser:
        with self._lock:
            try:
                return self._users[login]
            except KeyError:
                raise NotFoundError("not found") from None


class ChatRepository(abc.ABC):
    """Moderation state of chat participants."""

    @abc.abstractmethod
    def add_user(self, login: str) -> None:
        """Add the user unless it is already known."""

    @abc.abstractmethod
    def punish_user(self, login: str) -> None:
        """Add a penalty to the user, banning it once the limit is reached."""

    @abc.abstractmethod
    def ban_user(self, login: str) -> None:
        """Ban the user."""

    @abc.abstractmethod
    def is_banned(self, login: str) -> bool:
        """Tell whether the user is banned."""


class ChatRepositoryInMemory(ChatRepository):
    """Chat participants kept in memory."""

    def __init__(self) -> None:
        self._users: dict[str, ChatUser] = {}
        self._lock = threading.Lock()

    def _require(self, login: str) -> ChatUser:
        try:
            return self._users[login]
        except KeyError:
            raise NotFoundError("not found") from None

    def add_user(self, login: str) -> None:
        with self._lock:
            self._users.setdefault(login, ChatUser(login))

    def punish_user(self, login: str) -> None:
        with self._lock:
            user = self._require(login)
            user.penalty += 1
            if user.penalty >= _PENALTY_LIMIT:
                user.banned = True

    def ban_user(self, login: str) -> None:
        with self._lock:
            self._require(login).banned = True

    def is_banned(self, login: str) -> bool:
        with self._lock:
            return self._require(login).banned


class ProfanityRepository(abc.ABC):
    """Detection of forbidden words in text."""

    @abc.abstractmethod
    def contains_profanity(self, text: str) -> bool:
        """Tell whether the text holds a forbidden word."""


class ProfanityRepositoryInMemory(ProfanityRepository):
    """Forbidden words read from a file, one per line."""

    def __init__(self, path: StrPath) -> None:
        self._lock = threading.Lock()
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
        words = {line.strip().lower() for line in content.split("\n")}
        words.discard("")
        with self._lock:
            self._profanities: frozenset[str] = frozenset(words)

    def contains_profanity(self, text: str) -> bool:
        normalized = " ".join(text.split()).lower()
        with self._lock:
            return any(word in normalized for word in self._profanities)