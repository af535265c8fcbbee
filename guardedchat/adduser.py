"""Command that appends a user with a hashed password to an auth storage file."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

import bcrypt

_DEFAULT_COST = 10
_USAGE = (
    "Usage: adduser (required <authStorage>) (required <login>) "
    "(required <role>) (required <password>)"
)


def hash_password(password: str) -> str:
    """Return the bcrypt hash of a password at the default cost."""
    salt = bcrypt.gensalt(rounds=_DEFAULT_COST)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("ascii")


def add_user(
    auth_storage: str | os.PathLike[str], login: str, role: str, password: str
) -> None:
    """Append ``login:hash:role`` for the user to the storage file."""
    line = f"{login}:{hash_password(password)}:{role}\n"
    with open(auth_storage, "a", encoding="utf-8") as handle:
        handle.write(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        print(_USAGE)
        return 1
    auth_storage, login, role, password = args[:4]

    try:
        hashed = hash_password(password)
    except ValueError as error:
        print(f"Error hashing password: {error}")
        return 1
    try:
        handle = open(auth_storage, "a", encoding="utf-8")
    except OSError as error:
        print(f"Error opening file: {error}")
        return 1
    with handle:
        try:
            handle.write(f"{login}:{hashed}:{role}\n")
        except OSError as error:
            print(f"Error writing to file: {error}")
            return 1
    print(f"User {login} with role {role} added successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())