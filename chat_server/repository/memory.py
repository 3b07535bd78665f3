# chat_server/repository/memory.py

from chat_server.core.entities import ChatKey, Message, User
from chat_server.core.errors import (
    AlreadyExistsError,
    ChatNotFoundError,
    NoCorrespondentsError,
    NotFoundError,
    RecipientNotFoundError,
)
from chat_server.core.pagination import paginate
from chat_server.core.state import DataStore


# -------------------------------
# Users
# -------------------------------

class MemoryAuthRepository:
    def __init__(self, store: DataStore):
        self._users = store.users

    def insert_user(self, username: str, password: str) -> None:
        def _insert(users: dict[str, User]):
            if username in users:
                raise AlreadyExistsError(username)
            users[username] = User(username=username, password=password)

        self._users.apply(_insert)

    def get_user(self, username: str) -> User:
        user = self._users.read(lambda users: users.get(username))
        if user is None:
            raise NotFoundError(username)
        return user


# -------------------------------
# Public chat
# -------------------------------

class MemoryPublicRepository:
    def __init__(self, store: DataStore):
        self._messages = store.public_chat

    def insert_message(self, message: Message) -> None:
        self._messages.apply(lambda messages: messages.append(message))

    def get_messages(self, limit: int, offset: int) -> list[Message]:
        return self._messages.read(lambda messages: paginate(messages, limit, offset))


# -------------------------------
# Private chats
# -------------------------------

class MemoryPrivateRepository:
    def __init__(self, store: DataStore):
        self._users = store.users
        self._chats = store.private_chats

    def insert_message(self, message: Message) -> None:
        # Users are never removed, so the check stays valid after the lock is released.
        if not self._users.read(lambda users: message.recipient in users):
            raise RecipientNotFoundError(message.recipient)

        key = ChatKey(message.sender, message.recipient)
        self._chats.apply(lambda chats: chats.setdefault(key, []).append(message))

    def get_messages(self, sender: str, recipient: str, limit: int, offset: int) -> list[Message]:
        key = ChatKey(sender, recipient)

        def _page(chats: dict[ChatKey, list[Message]]) -> list[Message]:
            if key not in chats:
                raise ChatNotFoundError(sender, recipient)
            return paginate(chats[key], limit, offset)

        return self._chats.read(_page)

    def get_users(self, username: str) -> list[str]:
        correspondents = self._chats.read(
            lambda chats: [key.other(username) for key in chats if username in key]
        )
        if not correspondents:
            raise NoCorrespondentsError(username)
        return sorted(correspondents)
