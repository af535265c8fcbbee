"""Handlers of the chat RPC methods on top of a chat service."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from guardedchat.chat_service import ChatService, ChatServiceDefault, ChatStream
from guardedchat.errors import (
    AlreadyExistsError,
    BannedError,
    NotFoundError,
    RpcStatusError,
    StatusCode,
)
from guardedchat.models import ChatMessage
from guardedchat.repositories import ChatRepositoryInMemory, ProfanityRepositoryInMemory

logger = logging.getLogger(__name__)


class ChatServer:
    """Serves chat streams and ban requests, reporting failures as RPC statuses."""

    def __init__(self, chat_service: ChatService) -> None:
        self._chat_service = chat_service

    def start_chat(
        self,
        client_id: str,
        incoming: Iterable[ChatMessage | None],
        stream: ChatStream,
    ) -> None:
        """Handle a client's stream until the incoming messages run out."""
        if not client_id:
            raise RpcStatusError(
                StatusCode.UNAUTHENTICATED, "client ID not found in context"
            )
        try:
            self._chat_service.register_client(client_id, stream)
        except AlreadyExistsError:
            raise RpcStatusError(
                StatusCode.ALREADY_EXISTS, "client already exists"
            ) from None
        except Exception as error:
            raise RpcStatusError(
                StatusCode.INTERNAL, "failed to register client"
            ) from error

        try:
            self._serve(client_id, iter(incoming), stream)
        finally:
            try:
                self._chat_service.unregister_client(client_id)
            except Exception as error:
                logger.warning("failed to unregister client %s: %s", client_id, error)

    def _serve(self, client_id: str, incoming, stream: ChatStream) -> None:
        while True:
            try:
                message = next(incoming)
            except StopIteration:
                return
            except Exception as error:
                raise RpcStatusError(
                    StatusCode.INTERNAL, f"error in the stream: {error}"
                ) from error

            if message is None:
                raise RpcStatusError(StatusCode.INVALID_ARGUMENT, "received nil message")

            try:
                censored = self._chat_service.moderate_message(client_id, message.text)
            except BannedError:
                self._notify(stream, "banned")
                continue
            except Exception as error:
                logger.warning("failed to moderate message: %s", error)
                raise RpcStatusError(
                    StatusCode.INTERNAL, "failed to moderate message"
                ) from error
            if censored:
                self._notify(stream, "censored")
                continue

            try:
                self._chat_service.broadcast_message(client_id, message.text)
            except NotFoundError:
                raise RpcStatusError(StatusCode.NOT_FOUND, "client not found") from None
            except BannedError:
                raise RpcStatusError(
                    StatusCode.PERMISSION_DENIED, "client is banned"
                ) from None
            except Exception as error:
                raise RpcStatusError(
                    StatusCode.INTERNAL, "failed to broadcast message"
                ) from error

    @staticmethod
    def _notify(stream: ChatStream, text: str) -> None:
        try:
            stream.send(ChatMessage(text=text, is_error=True))
        except Exception as error:
            logger.warning("failed to send %s message: %s", text, error)
            raise RpcStatusError(
                StatusCode.INTERNAL, f"failed to send {text} message"
            ) from error

    def ban_user(self, client_id: str, target_login: str) -> None:
        """Ban the target user on behalf of an authenticated client."""
        if not client_id:
            raise RpcStatusError(
                StatusCode.UNAUTHENTICATED, "client ID not found in context"
            )
        try:
            self._chat_service.ban_client(target_login)
        except NotFoundError:
            raise RpcStatusError(StatusCode.NOT_FOUND, "user not found") from None
        except Exception as error:
            raise RpcStatusError(StatusCode.INTERNAL, "failed to ban user") from error


def build_chat_service(bad_words_path: str | os.PathLike[str]) -> ChatServiceDefault:
    """Create a chat service using the forbidden words in the given file."""
    return ChatServiceDefault(
        ProfanityRepositoryInMemory(bad_words_path), ChatRepositoryInMemory()
    )