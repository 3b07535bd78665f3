# chat_server/models/user.py

from sqlalchemy import Column, Integer, String
from . import Base


# -------------------------------
# User Model
# -------------------------------

class UserModel(Base):
    """
    Registered chat user.
    `password` holds whatever the configured password context produced;
    with the default plaintext scheme that is the password itself.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
