"""Domain errors of the chat and the RPC status codes reported to clients."""

from __future__ import annotations

import enum


class ChatError(Exception):
    """Base class of every domain error raised by the chat."""


class NotAuthorizedError(ChatError):
    """The supplied credentials do not match the stored ones."""


class NotFoundError(ChatError):
    """The requested user or client is unknown."""


class AlreadyExistsError(ChatError):
    """A client with the same identifier is already registered."""


class BannedError(ChatError):
    """The user is banned and may not write to the chat."""


class StatusCode(enum.IntEnum):
    """Status codes carried by RPC errors."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


class RpcStatusError(Exception):
    """An error reported to a remote caller together with a status code."""

    def __init__(self, code: StatusCode, message: str) -> None:
        super().__init__(message)
        self.code = StatusCode(code)
        self.message = message

    def __repr__(self) -> str:
        return f"RpcStatusError(code={self.code.name}, message={self.message!r})"