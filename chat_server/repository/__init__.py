# chat_server/repository/__init__.py

from typing import Protocol

from chat_server.core.entities import Message, User


class AuthRepository(Protocol):
    def insert_user(self, username: str, password: str) -> None: ...

    def get_user(self, username: str) -> User: ...


class PublicRepository(Protocol):
    def insert_message(self, message: Message) -> None: ...

    def get_messages(self, limit: int, offset: int) -> list[Message]: ...


class PrivateRepository(Protocol):
    def insert_message(self, message: Message) -> None: ...

    def get_messages(self, sender: str, recipient: str, limit: int, offset: int) -> list[Message]: ...

    def get_users(self, username: str) -> list[str]: ...
