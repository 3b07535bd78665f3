# chat_server/services/public.py

import logging

from chat_server.core.entities import Message
from chat_server.core.errors import OutOfRangeError
from chat_server.repository import PublicRepository


logger = logging.getLogger(__name__)


class PublicService:
    def __init__(self, repository: PublicRepository):
        self._repository = repository

    def send_public_message(self, message: Message) -> None:
        self._repository.insert_message(message)

    def get_public_messages(self, limit: int, offset: int) -> list[Message]:
        try:
            return self._repository.get_messages(limit, offset)
        except OutOfRangeError as e:
            logger.debug("Public page past the end (offset=%d, length=%d)", e.offset, e.length)
            return []
