"""Line-oriented terminal interface of the chat client."""

from __future__ import annotations

import sys
import threading
from typing import Any, TextIO

from guardedchat.errors import RpcStatusError, StatusCode
from guardedchat.models import ChatMessage

_PREFIX = "ОШИБКА"
_KNOWN_ERRORS = {
    "banned": f"{_PREFIX}: Ты больше не можешь писать в этот чат",
    "censored": f"{_PREFIX}: Нельзя ругаться",
}


def format_message(message: ChatMessage) -> str:
    """Return the line shown to the user for a received message."""
    if message.is_error:
        return _KNOWN_ERRORS.get(message.text, f"{_PREFIX}: {message.text}")
    return f"[{message.login}]: {message.text}"


def start_ui(
    service: Any,
    username: str,
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
) -> None:
    """Show incoming messages and send what the user types until input ends or /exit."""
    source = sys.stdin if input_stream is None else input_stream
    sink = sys.stdout if output_stream is None else output_stream
    lock = threading.Lock()

    def emit(line: str) -> None:
        with lock:
            sink.write(line + "\n")
            sink.flush()

    try:
        service.start_receiving()
    except Exception as error:
        raise ConnectionError(f"failed to connect to the chat: {error}") from error

    def receive() -> None:
        for message in service.messages():
            emit(format_message(message))

    threading.Thread(target=receive, name="chat-receiver", daemon=True).start()

    for raw in source:
        text = raw.strip()
        if not text:
            continue
        if text.startswith("/"):
            if text == "/exit":
                emit("Выход из чата...")
                return
            if text.startswith("/ban "):
                target = text.removeprefix("/ban").strip()
                try:
                    service.ban_user(target)
                except Exception as error:
                    if (
                        isinstance(error, RpcStatusError)
                        and error.code is StatusCode.PERMISSION_DENIED
                    ):
                        emit(f"{_PREFIX}: Ты не администратор")
                    else:
                        emit(f"{_PREFIX}: Не удалось забанить {target}: {error}")
            else:
                emit(f"{_PREFIX}: Неизвестная команда")
            continue
        try:
            service.send(text)
        except Exception as error:
            emit(f"{_PREFIX}: Не удалось отправить сообщение: {error}")