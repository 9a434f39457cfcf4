from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, NamedTuple

from src.domain.message_action import MessageAction, message_actions
from src.domain.user_profile import UserProfile
from src.domain.user_tier import UserTier
from src.domain.validation_strategy import ValidationStrategy, strategy_for_tier

if TYPE_CHECKING:
    from src.domain.chat_room import ChatRoom
    from src.domain.history_cursor import HistoryCursor

logger = logging.getLogger(__name__)

DEFAULT_DAILY_MESSAGE_LIMIT = 10


class ReceivedMessage(NamedTuple):
    room_name: str
    sender_name: str
    message: str


class User:
    """
    채팅 사용자 (Mediator의 Colleague, Command의 Invoker)

    메시지는 방(Mediator)을 통해서만 전달하고, 전달/저장은
    대기열(pending_actions)에 쌓은 뒤 순서대로 실행한다.
    """

    tier: UserTier

    def __init__(self, name: str, policy: ValidationStrategy | None = None):
        self.profile = UserProfile(name=name, tier=self.tier)
        self.policy: ValidationStrategy = policy or strategy_for_tier(self.tier)

        self._rooms: set[ChatRoom] = set()
        self._pending_actions: deque[MessageAction] = deque()
        self.inbox: list[ReceivedMessage] = []
        self.closed = False

        logger.debug(f"[User] {self.name} created ({self.tier.display_name})")

    @property
    def name(self) -> str:
        return self.profile.name

    @property
    def rooms(self) -> frozenset[ChatRoom]:
        return frozenset(self._rooms)

    @property
    def pending_actions(self) -> tuple[MessageAction, ...]:
        return tuple(self._pending_actions)

    # -- membership ----------------------------------------------------------

    def add_to_room(self, room: ChatRoom) -> None:
        self._rooms.add(room)
        logger.debug(f"[{self.name}] Added to chat room {room.name}")

    def remove_from_room(self, room: ChatRoom) -> None:
        self._rooms.discard(room)
        logger.debug(f"[{self.name}] Removed from chat room {room.name}")

    def is_in_room(self, room: ChatRoom) -> bool:
        return room in self._rooms

    # -- strategy ------------------------------------------------------------

    def set_policy(self, policy: ValidationStrategy) -> None:
        """검증 정책 교체 (이전 정책은 버림)"""
        if policy is None:
            raise ValueError("Validation policy cannot be None")

        logger.debug(
            f"[{self.name}] Validation policy changed: {self.policy.name} -> {policy.name}"
        )
        self.policy = policy

    # -- messaging -----------------------------------------------------------

    def send(self, message: str, room: ChatRoom) -> bool:
        """
        메시지 전송

        검사 순서: 등급별 사전 검사 -> 방 멤버 여부 -> 내용 검증.
        모두 통과하면 전달 후 저장을 실행하고 True 반환.
        제거된(closed) 사용자는 보내지 못한다.
        """
        if self.closed:
            logger.warning(f"{self.name}: Account closed, message not sent")
            return False

        if not self._pre_send_check(room):
            return False

        if not self.is_in_room(room):
            logger.warning(f"{self.name}: You are not in room {room.name}")
            return False

        if not self.policy.validate(message, self.name):
            return False

        self._on_message_accepted()

        for action in message_actions(room, message):
            self.queue_action(action)
        self.execute_all()

        # 채팅 내용은 USER_ONLY 수준에서도 보여야 함
        logger.warning(f"{self.name}: {message}")
        return True

    def _pre_send_check(self, room: ChatRoom) -> bool:
        return True

    def _on_message_accepted(self) -> None:
        pass

    def receive(self, message: str, from_user: User, room: ChatRoom) -> None:
        """다른 멤버의 메시지 수신 (검증 없음, 제거된 사용자는 무시)"""
        if self.closed:
            logger.debug(f"[{self.name}] Closed, message from {from_user.name} dropped")
            return

        self.inbox.append(ReceivedMessage(room.name, from_user.name, message))
        logger.debug(
            f"[{self.name}] Received: \"{message}\" from {from_user.name} in {room.name}"
        )

    # -- command queue -------------------------------------------------------

    def queue_action(self, action: MessageAction) -> None:
        self._pending_actions.append(action)
        logger.debug(f"[{self.name}] Command added to queue ({action.kind.value})")

    def execute_all(self) -> int:
        """대기열의 작업을 순서대로 실행하고 비움"""
        executed = 0
        while self._pending_actions:
            action = self._pending_actions.popleft()
            action.execute(self)
            executed += 1

        logger.debug(f"[{self.name}] {executed} commands executed")
        return executed

    def close(self) -> None:
        """사용자 제거 - 실행되지 않은 작업은 실행 없이 버림"""
        discarded = len(self._pending_actions)
        self._pending_actions.clear()
        self.closed = True
        logger.debug(f"[User] {self.name} destroyed ({discarded} pending commands discarded)")

    # -- history access ------------------------------------------------------

    def request_history_iterator(self, room: ChatRoom) -> HistoryCursor | None:
        logger.warning(f"{self.name}: Access denied - chat history is admin only")
        return None

    def browse_history(self, room: ChatRoom) -> list[str]:
        logger.warning(f"{self.name}: Access denied - chat history is admin only")
        return []

    # -- diagnostics ---------------------------------------------------------

    def describe(self) -> str:
        room_names = sorted(room.name for room in self._rooms)
        lines = [
            f"User {self.name} ({self.tier.display_name})",
            f"  policy: {self.policy.name}",
            f"  rooms: {', '.join(room_names) or '-'}",
            f"  pending commands: {len(self._pending_actions)}",
            f"  received messages: {len(self.inbox)}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FreeUser(User):
    """무료 사용자 - 하루 메시지 수 제한"""

    tier = UserTier.FREE

    def __init__(
        self,
        name: str,
        daily_limit: int = DEFAULT_DAILY_MESSAGE_LIMIT,
        policy: ValidationStrategy | None = None,
    ):
        super().__init__(name, policy=policy)
        self.daily_limit = daily_limit
        self.messages_sent_today = 0

    @property
    def messages_remaining(self) -> int:
        return max(0, self.daily_limit - self.messages_sent_today)

    def _pre_send_check(self, room: ChatRoom) -> bool:
        if self.messages_sent_today >= self.daily_limit:
            logger.warning(
                f"{self.name}: Daily message limit reached "
                f"({self.messages_sent_today}/{self.daily_limit}). "
                "Upgrade to Premium for unlimited messaging!"
            )
            return False
        return True

    def _on_message_accepted(self) -> None:
        self.messages_sent_today += 1
        logger.debug(
            f"[{self.name}] Messages today: {self.messages_sent_today}/{self.daily_limit}"
        )

    def reset_daily_count(self) -> None:
        self.messages_sent_today = 0
        logger.info(f"[{self.name}] Daily message count reset")

    def describe(self) -> str:
        return (
            super().describe()
            + f"\n  messages today: {self.messages_sent_today}/{self.daily_limit}"
        )


class PremiumUser(User):
    """프리미엄 사용자 - 메시지 수 제한 없음"""

    tier = UserTier.PREMIUM


class AdminUser(User):
    """관리자 - 채팅 기록 열람 가능"""

    tier = UserTier.ADMIN

    def receive(self, message: str, from_user: User, room: ChatRoom) -> None:
        logger.debug(
            f"[{self.name}] Moderation note: monitoring message from "
            f"{from_user.name} in {room.name}"
        )
        super().receive(message, from_user, room)

    def request_history_iterator(self, room: ChatRoom) -> HistoryCursor | None:
        return room.create_history_iterator(self)

    def browse_history(self, room: ChatRoom) -> list[str]:
        """기록 전체를 처음부터 끝까지 순회"""
        cursor = self.request_history_iterator(room)
        if cursor is None:
            return []

        logger.info(f"=== Chat history of {room.name} ({room.message_count} messages) ===")

        entries = []
        cursor.first()
        while not cursor.is_done():
            entry = cursor.current_item()
            logger.warning(entry)
            entries.append(entry)
            cursor.next()

        logger.info(f"=== End of chat history of {room.name} ===")
        return entries
