# chat_server/services/private.py

import logging

from chat_server.core.entities import Message
from chat_server.core.errors import OutOfRangeError
from chat_server.repository import PrivateRepository


logger = logging.getLogger(__name__)


class PrivateService:
    def __init__(self, repository: PrivateRepository):
        self._repository = repository

    def send_private_message(self, message: Message) -> None:
        self._repository.insert_message(message)

    def get_private_messages(self, sender: str, recipient: str, limit: int, offset: int) -> list[Message]:
        # ChatNotFoundError is not translated: an unknown pair stays an error,
        # unlike a page past the end of an existing chat.
        try:
            return self._repository.get_messages(sender, recipient, limit, offset)
        except OutOfRangeError as e:
            logger.debug("Private page past the end (offset=%d, length=%d)", e.offset, e.length)
            return []

    def view_users(self, username: str) -> list[str]:
        return self._repository.get_users(username)
