# chat_server/core/entities.py

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    username: str
    password: str


@dataclass(frozen=True)
class Message:
    """
    A single chat message. `recipient` is empty for public messages.
    """
    sender: str
    recipient: str
    content: str


@dataclass(frozen=True)
class ChatKey:
    """
    Unordered pair of usernames identifying one private chat.

    The constructor sorts its arguments, so ChatKey("bob", "alice") and
    ChatKey("alice", "bob") are the same key and both directions of a
    conversation share one message sequence.
    """
    first: str
    second: str

    def __post_init__(self):
        if self.second < self.first:
            first, second = self.second, self.first
            object.__setattr__(self, "first", first)
            object.__setattr__(self, "second", second)

    def __contains__(self, username: str) -> bool:
        return username == self.first or username == self.second

    def other(self, username: str) -> str:
        if username == self.first:
            return self.second
        if username == self.second:
            return self.first
        raise ValueError(f"{username!r} is not a member of {self}")
