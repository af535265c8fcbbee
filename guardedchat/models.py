"""Records describing users and chat messages."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthUser:
    """A user known to the authentication storage."""

    login: str
    role: str
    password_hash: str


@dataclass
class ChatUser:
    """A participant of the chat with its moderation state."""

    login: str
    penalty: int = 0
    banned: bool = False


@dataclass(frozen=True)
class ChatMessage:
    """A message sent over a chat stream."""

    login: str = ""
    text: str = ""
    is_error: bool = False