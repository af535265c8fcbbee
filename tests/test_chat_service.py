import logging

import pytest

from guardedchat.chat_service import ChatService, ChatServiceDefault, ChatStream
from guardedchat.errors import AlreadyExistsError, BannedError, NotFoundError
from guardedchat.models import ChatMessage
from guardedchat.repositories import ChatRepositoryInMemory, ProfanityRepositoryInMemory


class RecordingStream(ChatStream):
    def __init__(self):
        self.received = []

    def send(self, message):
        self.received.append(message)


class BrokenStream(ChatStream):
    def send(self, message):
        raise ConnectionError("gone")


@pytest.fixture
def chat_repo():
    return ChatRepositoryInMemory()


@pytest.fixture
def service(tmp_path, chat_repo):
    path = tmp_path / "bad.txt"
    path.write_text("darn\n", encoding="utf-8")
    return ChatServiceDefault(ProfanityRepositoryInMemory(path), chat_repo)


def test_register_adds_user_to_repository(service, chat_repo):
    service.register_client("alice", RecordingStream())
    assert chat_repo.is_banned("alice") is False


def test_register_twice_fails(service):
    service.register_client("alice", RecordingStream())
    with pytest.raises(AlreadyExistsError):
        service.register_client("alice", RecordingStream())


def test_unregister_unknown_fails(service):
    with pytest.raises(NotFoundError):
        service.unregister_client("ghost")


def test_unregister_then_register_again(service):
    service.register_client("alice", RecordingStream())
    service.unregister_client("alice")
    stream = RecordingStream()
    service.register_client("alice", stream)
    service.broadcast_message("alice", "back")
    assert stream.received == [ChatMessage(login="alice", text="back")]


def test_broadcast_reaches_everyone(service):
    alice, bob = RecordingStream(), RecordingStream()
    service.register_client("alice", alice)
    service.register_client("bob", bob)
    service.broadcast_message("alice", "hi")
    expected = [ChatMessage(login="alice", text="hi")]
    assert alice.received == expected
    assert bob.received == expected


def test_broadcast_from_unknown_client(service):
    with pytest.raises(NotFoundError):
        service.broadcast_message("ghost", "hi")


def test_broadcast_from_banned_client(service):
    bob = RecordingStream()
    service.register_client("alice", RecordingStream())
    service.register_client("bob", bob)
    service.ban_client("alice")
    with pytest.raises(BannedError):
        service.broadcast_message("alice", "hi")
    assert bob.received == []


def test_broadcast_ignores_failing_stream(service, caplog):
    bob = RecordingStream()
    service.register_client("alice", BrokenStream())
    service.register_client("bob", bob)
    with caplog.at_level(logging.WARNING):
        service.broadcast_message("bob", "still here")
    assert bob.received == [ChatMessage(login="bob", text="still here")]
    assert "failed to send message to client alice" in caplog.text


def test_ban_unknown_client(service):
    with pytest.raises(NotFoundError):
        service.ban_client("ghost")


def test_moderate_clean_message(service):
    service.register_client("alice", RecordingStream())
    assert service.moderate_message("alice", "hello") is False


def test_moderate_bans_after_repeated_profanity(service, chat_repo):
    service.register_client("alice", RecordingStream())
    results = [service.moderate_message("alice", "oh DARN") for _ in range(3)]
    assert results == [True, True, True]
    assert chat_repo.is_banned("alice") is True
    with pytest.raises(BannedError):
        service.moderate_message("alice", "hello")


def test_moderate_unknown_client(service):
    with pytest.raises(NotFoundError):
        service.moderate_message("ghost", "hello")


def test_chat_service_is_abstract():
    with pytest.raises(TypeError):
        ChatService()