# chat_server/core/state.py

import copy
from enum import Enum
from threading import Lock
from typing import Callable, Generic, TypeVar

from chat_server.core.entities import ChatKey, Message, User
from chat_server.core.errors import InternalInvariantViolation


T = TypeVar("T")
R = TypeVar("R")


class TableName(str, Enum):
    USERS = "users"
    PUBLIC_CHAT = "public_chat"
    PRIVATE_CHATS = "private_chats"


class Table(Generic[T]):
    """
    One named table of the in-memory store, guarded by its own lock.

    `apply` and `read` run the given function on the live contents while the
    lock is held, so a fetch-mutate-store sequence is a single atomic step.
    """

    def __init__(self, name: TableName, factory: Callable[[], T]):
        self.name = name
        self._kind = type(factory())
        self._value = factory()
        self._lock = Lock()

    def get(self) -> T:
        with self._lock:
            return copy.deepcopy(self._value)

    def insert(self, value: T) -> None:
        if not isinstance(value, self._kind):
            raise InternalInvariantViolation(
                f"table {self.name.value!r} expects {self._kind.__name__}, got {type(value).__name__}"
            )
        with self._lock:
            self._value = value

    def apply(self, mutator: Callable[[T], R]) -> R:
        with self._lock:
            return mutator(self._value)

    def read(self, reader: Callable[[T], R]) -> R:
        with self._lock:
            return reader(self._value)


class DataStore:
    """
    In-memory backing store: exactly three tables, created up front.
    Nothing here survives a restart.
    """

    def __init__(self):
        self.users: Table[dict[str, User]] = Table(TableName.USERS, dict)
        self.public_chat: Table[list[Message]] = Table(TableName.PUBLIC_CHAT, list)
        self.private_chats: Table[dict[ChatKey, list[Message]]] = Table(TableName.PRIVATE_CHATS, dict)

    def table(self, name: str) -> Table:
        try:
            name = TableName(name)
        except ValueError:
            raise InternalInvariantViolation(f"unknown table {name!r}") from None

        return {
            TableName.USERS: self.users,
            TableName.PUBLIC_CHAT: self.public_chat,
            TableName.PRIVATE_CHATS: self.private_chats,
        }[name]

    def get(self, name: str):
        return self.table(name).get()

    def insert(self, name: str, value) -> None:
        self.table(name).insert(value)
