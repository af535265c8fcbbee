"""Registration of chat clients, moderation and broadcasting of messages."""

from __future__ import annotations

import abc
import logging
import threading

from guardedchat.errors import AlreadyExistsError, BannedError, NotFoundError
from guardedchat.models import ChatMessage
from guardedchat.repositories import ChatRepository, ProfanityRepository

logger = logging.getLogger(__name__)


class ChatStream(abc.ABC):
    """A destination that chat messages can be sent to."""

    @abc.abstractmethod
    def send(self, message: ChatMessage) -> None:
        """Deliver a message, raising if delivery fails."""


class ChatService(abc.ABC):
    """Operations of the chat server."""

    @abc.abstractmethod
    def register_client(self, client_id: str, stream: ChatStream) -> None:
        """Attach a connected client."""

    @abc.abstractmethod
    def unregister_client(self, client_id: str) -> None:
        """Detach a connected client."""

    @abc.abstractmethod
    def broadcast_message(self, client_id: str, message: str) -> None:
        """Send a client's message to every connected client."""

    @abc.abstractmethod
    def ban_client(self, client_id: str) -> None:
        """Ban a user."""

    @abc.abstractmethod
    def moderate_message(self, client_id: str, message: str) -> bool:
        """Return True if the message was censored."""


class ChatServiceDefault(ChatService):
    """Chat service backed by a profanity list and a chat repository."""

    def __init__(
        self,
        profanity_repository: ProfanityRepository,
        chat_repository: ChatRepository,
    ) -> None:
        self._clients: dict[str, ChatStream] = {}
        self._lock = threading.RLock()
        self._profanity_repository = profanity_repository
        self._chat_repository = chat_repository

    def register_client(self, client_id: str, stream: ChatStream) -> None:
        with self._lock:
            if client_id in self._clients:
                raise AlreadyExistsError("already exists")
            self._clients[client_id] = stream
            self._chat_repository.add_user(client_id)

    def unregister_client(self, client_id: str) -> None:
        with self._lock:
            if self._clients.pop(client_id, None) is None:
                raise NotFoundError("not found")

    def broadcast_message(self, client_id: str, message: str) -> None:
        with self._lock:
            if client_id not in self._clients:
                raise NotFoundError("not found")
            if self._chat_repository.is_banned(client_id):
                raise BannedError("user is banned")
            outgoing = ChatMessage(login=client_id, text=message)
            for receiver, stream in self._clients.items():
                try:
                    stream.send(outgoing)
                except Exception as error:  # a client may have gone away
                    logger.warning(
                        "failed to send message to client %s: %s", receiver, error
                    )

    def ban_client(self, client_id: str) -> None:
        self._chat_repository.ban_user(client_id)

    def moderate_message(self, client_id: str, message: str) -> bool:
        if self._chat_repository.is_banned(client_id):
            raise BannedError("user is banned")
        if self._profanity_repository.contains_profanity(message):
            self._chat_repository.punish_user(client_id)
            return True
        return False