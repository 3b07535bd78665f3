# tests/test_repository.py

import threading
import pytest

from chat_server.core.entities import Message, User
from chat_server.core.errors import (
    AlreadyExistsError,
    ChatNotFoundError,
    NoCorrespondentsError,
    NotFoundError,
    OutOfRangeError,
    RecipientNotFoundError,
)
from chat_server.repository.memory import MemoryAuthRepository


# -------------------------------
# Auth
# -------------------------------

def test_insert_and_get_user(repos):
    auth, _, _ = repos
    auth.insert_user("tester", "123")
    assert auth.get_user("tester") == User(username="tester", password="123")


def test_duplicate_user(repos):
    auth, _, _ = repos
    auth.insert_user("tester", "123")
    with pytest.raises(AlreadyExistsError):
        auth.insert_user("tester", "456")
    assert auth.get_user("tester").password == "123"


def test_missing_user(repos):
    auth, _, _ = repos
    with pytest.raises(NotFoundError) as exc_info:
        auth.get_user("ghost")
    assert exc_info.value.http_status == 400


def test_concurrent_registration_keeps_every_user(store):
    auth = MemoryAuthRepository(store)
    names = [f"user{i}" for i in range(200)]

    threads = [threading.Thread(target=auth.insert_user, args=(name, "pw")) for name in names]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(store.get("users")) == sorted(names)


def test_concurrent_duplicate_registration_has_one_winner(store):
    auth = MemoryAuthRepository(store)
    results = []
    lock = threading.Lock()

    def register():
        try:
            auth.insert_user("alice", "pw")
            outcome = "ok"
        except AlreadyExistsError:
            outcome = "exists"
        with lock:
            results.append(outcome)

    threads = [threading.Thread(target=register) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count("ok") == 1
    assert results.count("exists") == 19


# -------------------------------
# Public
# -------------------------------

def test_public_paging(repos):
    _, public, _ = repos
    messages = [Message(sender="tester", recipient="", content=f"m{i}") for i in range(3)]
    for m in messages:
        public.insert_message(m)

    assert public.get_messages(10, 0) == messages
    assert public.get_messages(2, 2) == [messages[2]]
    with pytest.raises(OutOfRangeError):
        public.get_messages(2, 5)


def test_public_empty_log_is_out_of_range(repos):
    _, public, _ = repos
    with pytest.raises(OutOfRangeError):
        public.get_messages(1, 0)


# -------------------------------
# Private
# -------------------------------

def test_scenario_alice_and_bob(repos):
    auth, _, private = repos
    auth.insert_user("alice", "a")
    auth.insert_user("bob", "b")

    private.insert_message(Message(sender="alice", recipient="bob", content="hi"))

    expected = [Message(sender="alice", recipient="bob", content="hi")]
    assert private.get_messages("alice", "bob", 10, 0) == expected
    assert private.get_messages("bob", "alice", 10, 0) == expected
    assert private.get_users("alice") == ["bob"]
    assert private.get_users("bob") == ["alice"]


def test_both_directions_share_one_sequence(repos):
    auth, _, private = repos
    auth.insert_user("alice", "a")
    auth.insert_user("bob", "b")

    sent = [
        Message(sender="alice", recipient="bob", content="hello, bro!"),
        Message(sender="bob", recipient="alice", content="how are you?"),
        Message(sender="alice", recipient="bob", content="fine"),
    ]
    for m in sent:
        private.insert_message(m)

    assert private.get_messages("alice", "bob", 10, 0) == sent
    assert private.get_messages("bob", "alice", 10, 0) == sent
    assert private.get_messages("bob", "alice", 1, 1) == [sent[1]]


def test_unregistered_recipient(repos):
    auth, _, private = repos
    auth.insert_user("alice", "a")
    with pytest.raises(RecipientNotFoundError):
        private.insert_message(Message(sender="alice", recipient="nobody", content="hi"))
    with pytest.raises(ChatNotFoundError):
        private.get_messages("alice", "nobody", 10, 0)


def test_missing_chat(repos):
    auth, _, private = repos
    auth.insert_user("alice", "a")
    auth.insert_user("bob", "b")
    with pytest.raises(ChatNotFoundError):
        private.get_messages("alice", "bob", 10, 0)


def test_private_offset_past_end(repos):
    auth, _, private = repos
    auth.insert_user("bob", "b")
    private.insert_message(Message(sender="alice", recipient="bob", content="hi"))
    with pytest.raises(OutOfRangeError):
        private.get_messages("alice", "bob", 10, 1)


def test_correspondents_are_sorted_and_unique(repos):
    auth, _, private = repos
    for name in ("tester", "tester_2", "tester_1", "zed"):
        auth.insert_user(name, "pw")

    private.insert_message(Message(sender="tester_2", recipient="tester", content="1"))
    private.insert_message(Message(sender="tester", recipient="tester_1", content="2"))
    private.insert_message(Message(sender="tester_1", recipient="tester", content="3"))
    private.insert_message(Message(sender="tester", recipient="tester_2", content="4"))
    private.insert_message(Message(sender="tester_1", recipient="zed", content="5"))

    assert private.get_users("tester") == ["tester_1", "tester_2"]
    assert private.get_users("tester_1") == ["tester", "zed"]
    assert private.get_users("zed") == ["tester_1"]


def test_no_correspondents(repos):
    auth, _, private = repos
    auth.insert_user("alice", "a")
    with pytest.raises(NoCorrespondentsError):
        private.get_users("alice")
