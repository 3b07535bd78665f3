# tests/test_services.py

import pytest

from chat_server.core.entities import Message
from chat_server.core.errors import ChatNotFoundError, NoCorrespondentsError, RecipientNotFoundError
from chat_server.services.private import PrivateService
from chat_server.services.public import PublicService


@pytest.fixture
def public_service(repos):
    _, public, _ = repos
    return PublicService(public)


@pytest.fixture
def private_service(repos):
    auth, _, private = repos
    auth.insert_user("alice", "a")
    auth.insert_user("bob", "b")
    return PrivateService(private)


def test_public_scenario(public_service):
    messages = [Message(sender="alice", recipient="", content=c) for c in ("one", "two", "three")]
    for m in messages:
        public_service.send_public_message(m)

    assert public_service.get_public_messages(2, 0) == messages[:2]
    assert public_service.get_public_messages(2, 2) == [messages[2]]
    assert public_service.get_public_messages(2, 5) == []


def test_public_empty_log_reads_as_empty(public_service):
    assert public_service.get_public_messages(10, 0) == []


def test_private_page_past_end_reads_as_empty(private_service):
    private_service.send_private_message(Message(sender="alice", recipient="bob", content="hi"))
    assert private_service.get_private_messages("bob", "alice", 10, 3) == []


def test_private_missing_chat_is_still_an_error(private_service):
    with pytest.raises(ChatNotFoundError):
        private_service.get_private_messages("alice", "bob", 10, 0)


def test_private_unknown_recipient(private_service):
    with pytest.raises(RecipientNotFoundError):
        private_service.send_private_message(Message(sender="alice", recipient="carol", content="hi"))


def test_view_users(private_service):
    with pytest.raises(NoCorrespondentsError):
        private_service.view_users("alice")

    private_service.send_private_message(Message(sender="bob", recipient="alice", content="hey"))
    assert private_service.view_users("alice") == ["bob"]
    assert private_service.view_users("bob") == ["alice"]
