import logging

import pytest

from src.domain.chat_room import ChatRoom
from src.domain.user import AdminUser, FreeUser, PremiumUser


@pytest.fixture(autouse=True)
def capture_all_logs(caplog):
    """모든 레벨의 로그 캡처 - 자동 적용"""
    caplog.set_level(logging.DEBUG)
    yield caplog


@pytest.fixture
def room():
    return ChatRoom("CtrlCat", "Cat lovers")


@pytest.fixture
def other_room():
    return ChatRoom("Dogorithm", "Dog enthusiasts")


@pytest.fixture
def alice():
    return FreeUser("Alice")


@pytest.fixture
def bob():
    return PremiumUser("Bob")


@pytest.fixture
def charlie():
    return AdminUser("Charlie")


@pytest.fixture
def populated_room(room, alice, bob, charlie):
    """Alice, Bob, Charlie 가 모두 입장한 방"""
    room.register_member(alice)
    room.register_member(bob)
    room.register_member(charlie)
    return room
