from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.domain.history_cursor import HistoryCursor
from src.domain.user_tier import UserTier

if TYPE_CHECKING:
    from src.domain.user import User

logger = logging.getLogger(__name__)


class ChatRoom:
    """
    채팅방 (Mediator)

    사용자끼리 직접 참조하지 않고 방을 통해서만 메시지를 주고받는다.
    멤버 목록과 채팅 기록은 이 클래스의 메서드로만 변경된다.
    """

    def __init__(self, name: str, topic: str = ""):
        self.name = name
        self.topic = topic

        self._members: list[User] = []
        self._history: list[str] = []  # 추가만 가능

    @property
    def members(self) -> tuple[User, ...]:
        return tuple(self._members)

    @property
    def message_count(self) -> int:
        return len(self._history)

    def member_names(self) -> list[str]:
        return [member.name for member in self._members]

    def is_member(self, user: User | None) -> bool:
        return user is not None and user in self._members

    def register_member(self, user: User | None) -> bool:
        """멤버 추가 (방 목록 추가 후 사용자 쪽 기록)"""
        if user is None:
            logger.info(f"[{self.name}] Registration ignored: no user")
            return False

        if self.is_member(user):
            logger.info(f"[{self.name}] User {user.name} already registered")
            return False

        self._members.append(user)
        user.add_to_room(self)

        logger.info(f"[{self.name}] User {user.name} joined the room")
        return True

    def remove_member(self, user: User | None) -> bool:
        """멤버 제거 (양쪽 모두 정리)"""
        if user is None:
            logger.info(f"[{self.name}] Removal ignored: no user")
            return False

        if not self.is_member(user):
            logger.info(f"[{self.name}] User {user.name} was not in this room")
            return False

        self._members.remove(user)
        user.remove_from_room(self)

        logger.info(f"[{self.name}] User {user.name} left the room")
        return True

    def deliver(self, message: str, from_user: User | None) -> bool:
        """보낸 사람을 제외한 모든 멤버에게 전달"""
        if from_user is None:
            logger.debug(f"[{self.name}] Delivery aborted - no sender")
            return False

        if not self.is_member(from_user):
            logger.debug(
                f"[{self.name}] Delivery aborted - {from_user.name} is not a member"
            )
            return False

        logger.debug(f"[{self.name}] Broadcasting message from {from_user.name}")

        for member in list(self._members):
            if member is not from_user:
                member.receive(message, from_user, self)

        return True

    def record(self, message: str, from_user: User | None) -> bool:
        """채팅 기록에 "이름: 내용" 형식으로 저장"""
        if from_user is None:
            logger.debug(f"[{self.name}] Record aborted - no sender")
            return False

        if not self.is_member(from_user):
            logger.debug(
                f"[{self.name}] Record aborted - {from_user.name} is not a member"
            )
            return False

        entry = f"{from_user.name}: {message}"
        self._history.append(entry)

        logger.debug(f"[{self.name}] Message saved to history: {entry}")
        return True

    def get_history(self, requesting_user: User | None) -> list[str] | None:
        """관리자에게만 기록 원본 반환 (그 외 None)"""
        if not self._is_admin(requesting_user):
            return None
        return self._history

    def create_history_iterator(
        self, requesting_user: User | None
    ) -> HistoryCursor | None:
        """관리자에게만 기록 커서 반환 (그 외 None)"""
        if not self._is_admin(requesting_user):
            return None

        logger.debug(
            f"[{self.name}] Creating history iterator for admin {requesting_user.name}"
        )
        return HistoryCursor(self._history)

    def _is_admin(self, requesting_user: User | None) -> bool:
        if requesting_user is None:
            logger.info(f"[{self.name}] Access denied: no requesting user")
            return False

        if requesting_user.tier is not UserTier.ADMIN:
            logger.info(
                f"[{self.name}] Access denied: {requesting_user.name} is not an admin"
            )
            return False

        return True

    def describe(self) -> str:
        lines = [
            f"ChatRoom {self.name}" + (f" ({self.topic})" if self.topic else ""),
            f"  members: {', '.join(self.member_names()) or '-'}",
            f"  messages: {self.message_count}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"ChatRoom(name={self.name!r}, members={len(self._members)})"
