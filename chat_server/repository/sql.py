# chat_server/repository/sql.py

"""
Relational implementation of the three repository contracts.

Same error taxonomy as repository.memory: callers cannot tell the two apart.
Sequence order is insertion order, i.e. primary key ascending.
"""

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from chat_server.core.entities import ChatKey, Message, User
from chat_server.core.errors import (
    AlreadyExistsError,
    ChatNotFoundError,
    NoCorrespondentsError,
    NotFoundError,
    OutOfRangeError,
    RecipientNotFoundError,
)
from chat_server.models.chat import PrivateMessageModel, PublicMessageModel
from chat_server.models.user import UserModel


class SqlAuthRepository:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def insert_user(self, username: str, password: str) -> None:
        with self._session_factory() as db:
            db.add(UserModel(username=username, password=password))
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise AlreadyExistsError(username) from e

    def get_user(self, username: str) -> User:
        with self._session_factory() as db:
            user = db.query(UserModel).filter(UserModel.username == username).first()
            if not user:
                raise NotFoundError(username)
            return User(username=user.username, password=user.password)


class SqlPublicRepository:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def insert_message(self, message: Message) -> None:
        with self._session_factory() as db:
            db.add(PublicMessageModel(sender=message.sender, content=message.content))
            db.commit()

    def get_messages(self, limit: int, offset: int) -> list[Message]:
        with self._session_factory() as db:
            total = db.query(func.count(PublicMessageModel.id)).scalar()
            if offset >= total:
                raise OutOfRangeError(offset, total)

            rows = (
                db.query(PublicMessageModel)
                .order_by(PublicMessageModel.id.asc())
                .offset(offset)
                .limit(limit)
                .all()
            )
            return [Message(sender=r.sender, recipient="", content=r.content) for r in rows]


class SqlPrivateRepository:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def insert_message(self, message: Message) -> None:
        key = ChatKey(message.sender, message.recipient)

        with self._session_factory() as db:
            recipient = db.query(UserModel.id).filter(UserModel.username == message.recipient).first()
            if not recipient:
                raise RecipientNotFoundError(message.recipient)

            db.add(PrivateMessageModel(
                first_user=key.first,
                second_user=key.second,
                sender=message.sender,
                recipient=message.recipient,
                content=message.content,
            ))
            db.commit()

    def get_messages(self, sender: str, recipient: str, limit: int, offset: int) -> list[Message]:
        key = ChatKey(sender, recipient)

        with self._session_factory() as db:
            chat = db.query(PrivateMessageModel).filter_by(first_user=key.first, second_user=key.second)

            total = chat.count()
            if total == 0:
                raise ChatNotFoundError(sender, recipient)
            if offset >= total:
                raise OutOfRangeError(offset, total)

            rows = chat.order_by(PrivateMessageModel.id.asc()).offset(offset).limit(limit).all()
            return [Message(sender=r.sender, recipient=r.recipient, content=r.content) for r in rows]

    def get_users(self, username: str) -> list[str]:
        with self._session_factory() as db:
            pairs = (
                db.query(PrivateMessageModel.first_user, PrivateMessageModel.second_user)
                .filter(or_(
                    PrivateMessageModel.first_user == username,
                    PrivateMessageModel.second_user == username,
                ))
                .distinct()
                .all()
            )

        correspondents = {ChatKey(first, second).other(username) for first, second in pairs}
        if not correspondents:
            raise NoCorrespondentsError(username)
        return sorted(correspondents)
