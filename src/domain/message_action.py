from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.chat_room import ChatRoom
    from src.domain.user import User

logger = logging.getLogger(__name__)


class ActionKind(str, Enum):
    """대기열 작업 종류 (전달 후 저장 순서로 실행)"""

    DELIVER = "deliver"
    RECORD = "record"


@dataclass(frozen=True)
class MessageAction:
    """사용자 대기열에 쌓이는 지연 실행 작업"""

    kind: ActionKind
    room: ChatRoom
    message: str

    def execute(self, sender: User) -> bool:
        logger.debug(
            f"[MessageAction] Executing {self.kind.value} for {sender.name} "
            f"in {self.room.name}"
        )
        if self.kind is ActionKind.DELIVER:
            return self.room.deliver(self.message, sender)
        return self.room.record(self.message, sender)


def message_actions(room: ChatRoom, message: str) -> tuple[MessageAction, MessageAction]:
    """전송 성공 시 실행할 두 단계 (전달, 저장)"""
    return (
        MessageAction(ActionKind.DELIVER, room, message),
        MessageAction(ActionKind.RECORD, room, message),
    )
