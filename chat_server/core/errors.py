# chat_server/core/errors.py

"""
Error taxonomy shared by repositories, services and the HTTP layer.

Every ChatError carries the HTTP status the API answers with.
InternalInvariantViolation is deliberately outside that hierarchy: it means the
store holds data none of our writers could have put there, so nothing handles it
as a normal outcome.
"""


class ChatError(Exception):
    http_status = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ChatError):
    def __init__(self, username: str) -> None:
        super().__init__("unregistered user")
        self.username = username


class AlreadyExistsError(ChatError):
    http_status = 409

    def __init__(self, username: str) -> None:
        super().__init__("user already exists")
        self.username = username


class RecipientNotFoundError(ChatError):
    def __init__(self, recipient: str) -> None:
        super().__init__("this user does not exist")
        self.recipient = recipient


class ChatNotFoundError(ChatError):
    def __init__(self, sender: str, recipient: str) -> None:
        super().__init__("no chat with this user")
        self.sender = sender
        self.recipient = recipient


class NoCorrespondentsError(ChatError):
    def __init__(self, username: str) -> None:
        super().__init__("no users who have written to you")
        self.username = username


class OutOfRangeError(ChatError):
    http_status = 416

    def __init__(self, offset: int, length: int) -> None:
        super().__init__("offset is out of range")
        self.offset = offset
        self.length = length


class UnauthorizedError(ChatError):
    http_status = 401


class InternalInvariantViolation(RuntimeError):
    pass
