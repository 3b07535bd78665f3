# chat_server/models/chat.py

from sqlalchemy import Column, Integer, String, Text, DateTime, Index
from datetime import datetime
from . import Base


class PublicMessageModel(Base):
    __tablename__ = "public_messages"

    id = Column(Integer, primary_key=True, index=True)
    sender = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.now)


class PrivateMessageModel(Base):
    __tablename__ = "private_messages"
    __table_args__ = (Index("ix_private_messages_pair", "first_user", "second_user"),)

    id = Column(Integer, primary_key=True, index=True)
    # (first_user, second_user) is the sorted pair, see core.entities.ChatKey
    first_user = Column(String, nullable=False)
    second_user = Column(String, nullable=False)
    sender = Column(String, nullable=False)
    recipient = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.now)
