"""Moderated group chat core: user records, profanity filtering, penalties, bans and a console loop."""

__version__ = "0.1.0"