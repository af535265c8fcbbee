# guardedchat

The core of a moderated group chat:

- `guardedchat.repositories` – a user store (login, role, bcrypt password hash) read from a text file, an in-memory store of chat participants with their penalties and bans, and a profanity filter that reads its word list from a file;
- `guardedchat.chat_service` – `ChatServiceDefault`, which registers clients, moderates their messages and broadcasts what passes;
- `guardedchat.chat_server` – `ChatServer`, which serves one client's message stream and ban requests on top of a chat service and reports failures as `RpcStatusError`;
- `guardedchat.audit` – `log_unary_call` and `audit_stream`, which wrap a handler call with log records of its start, outcome and duration;
- `guardedchat.ui` – `format_message` and `start_ui`, a line-based console loop for a chat client;
- `guardedchat.adduser` – the command that appends user records to a storage file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Adding users

User records are kept one per line in the form `login:bcrypt_hash:role`. Add a record with the bundled command:

```
guardedchat-adduser users.txt alice admin password
```

The arguments are the storage file, the login, the role and the password. The command creates the file if it is missing, appends the record and prints the user it added; with fewer than four arguments it prints a usage line and exits with status 1. From Python, use `guardedchat.adduser.add_user(auth_storage, login, role, password)` or `guardedchat.adduser.hash_password(password)` (bcrypt, cost 10).

`AuthRepositoryInMemory(path)` loads such a file, skipping lines that do not have exactly three `:`-separated fields; `get_user(login)` returns an `AuthUser` or raises `NotFoundError`.

## Moderation rules

- Every word in the bad-words file (one per line, surrounding whitespace trimmed, blank lines ignored) is matched case-insensitively, as a substring, against the message after its whitespace has been collapsed to single spaces.
- `moderate_message` returns `True` for a message that contains a bad word and adds a penalty to its sender; such a message should not be broadcast.
- A user with three penalties is banned; `ban_client` bans a user at once.
- For a banned user `moderate_message` and `broadcast_message` raise `BannedError`.
- `broadcast_message` sends the message to every registered client, including the sender; a client whose `send` fails is logged and skipped.

## Using the chat service

```python
from guardedchat.chat_service import ChatServiceDefault
from guardedchat.repositories import ChatRepositoryInMemory, ProfanityRepositoryInMemory
from guardedchat.ui import format_message


class PrintingStream:
    def send(self, message):
        print(format_message(message))


service = ChatServiceDefault(
    ProfanityRepositoryInMemory("bad_words.txt"),
    ChatRepositoryInMemory(),
)
service.register_client("alice", PrintingStream())

if not service.moderate_message("alice", "hello everyone"):
    service.broadcast_message("alice", "hello everyone")
```

`guardedchat.chat_server.build_chat_service(path)` builds the same service from the path of a bad-words file.

`ChatServer(service).start_chat(client_id, incoming, stream)` registers the client, then reads `ChatMessage` objects from `incoming` until it is exhausted, unregistering the client at the end. A censored message earns the sender an error message with text `censored` on its stream; a message from a banned user earns one with text `banned`; other messages are broadcast. `ChatServer.ban_user(client_id, target_login)` bans a user.

## Console client loop

`start_ui(service, username, input_stream=None, output_stream=None)` reads lines (standard input by default), sends each non-empty line with `service.send`, and prints received messages as `[login]: text` through `format_message`. `/ban <login>` calls `service.ban_user`, `/exit` leaves the loop, and any other line starting with `/` is reported as an unknown command. The service object is supplied by the caller and must provide `start_receiving()`, `messages()`, `send(text)` and `ban_user(login)`.

## Errors

`guardedchat.errors` defines `ChatError` and its subclasses `NotAuthorizedError`, `NotFoundError`, `AlreadyExistsError` and `BannedError`. The server layer reports failures as `RpcStatusError`, which carries a `StatusCode` (`code`) and a `message`.

## What this package does not do

It contains no network layer: there is no server that listens on an address, no remote client that connects to one, and no service object for `start_ui` that talks to a server. It does not check passwords against the user store or issue access tokens, so nothing here decides who is an admin; callers of `ChatServer` pass the client identifier themselves. Only the `guardedchat-adduser` command is installed.