import logging

from src.application.exceptions import (
    RoomNotFoundError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from src.domain.chat_room import ChatRoom
from src.domain.user import (
    DEFAULT_DAILY_MESSAGE_LIMIT,
    AdminUser,
    FreeUser,
    PremiumUser,
    User,
)
from src.domain.user_tier import UserTier

logger = logging.getLogger(__name__)


class ChatService:
    """사용자/채팅방 관리 서비스 레이어"""

    def __init__(
        self,
        rooms: dict[str, str] | None = None,
        free_user_daily_limit: int = DEFAULT_DAILY_MESSAGE_LIMIT,
    ):
        self.free_user_daily_limit = free_user_daily_limit

        self._users: dict[str, User] = {}
        self._rooms: dict[str, ChatRoom] = {
            name: ChatRoom(name, topic) for name, topic in (rooms or {}).items()
        }

    @property
    def users(self) -> list[User]:
        return list(self._users.values())

    @property
    def rooms(self) -> list[ChatRoom]:
        return list(self._rooms.values())

    def add_room(self, name: str, topic: str = "") -> ChatRoom:
        if name in self._rooms:
            return self._rooms[name]

        room = ChatRoom(name, topic)
        self._rooms[name] = room
        logger.info(f"Room created: {name}")
        return room

    def get_room(self, name: str) -> ChatRoom:
        try:
            return self._rooms[name]
        except KeyError:
            raise RoomNotFoundError(name) from None

    def get_user(self, name: str) -> User:
        """이름으로 조회 (등록 시와 같이 앞뒤 공백 무시)"""
        try:
            return self._users[name.strip()]
        except KeyError:
            raise UserNotFoundError(name) from None

    def create_user(self, name: str, tier: UserTier) -> User:
        """
        사용자 생성

        Raises:
            UserAlreadyExistsError: 같은 이름이 이미 등록됨
            pydantic.ValidationError: 이름이 비어 있음
        """
        if name.strip() in self._users:
            raise UserAlreadyExistsError(name.strip())

        if tier is UserTier.FREE:
            user: User = FreeUser(name, daily_limit=self.free_user_daily_limit)
        elif tier is UserTier.PREMIUM:
            user = PremiumUser(name)
        else:
            user = AdminUser(name)

        self._users[user.name] = user
        logger.info(f"User created: {user.name} ({tier.display_name})")
        return user

    def delete_user(self, name: str) -> None:
        """모든 방에서 내보낸 뒤 사용자 제거"""
        user = self.get_user(name)

        for room in self._rooms.values():
            if room.is_member(user):
                room.remove_member(user)

        user.close()
        del self._users[user.name]
        logger.info(f"User deleted: {user.name}")

    def join_room(self, user_name: str, room_name: str) -> bool:
        return self.get_room(room_name).register_member(self.get_user(user_name))

    def leave_room(self, user_name: str, room_name: str) -> bool:
        return self.get_room(room_name).remove_member(self.get_user(user_name))

    def send_message(self, user_name: str, room_name: str, message: str) -> bool:
        return self.get_user(user_name).send(message, self.get_room(room_name))

    def browse_history(self, user_name: str, room_name: str) -> list[str]:
        return self.get_user(user_name).browse_history(self.get_room(room_name))

    def reset_daily_counts(self) -> int:
        """무료 사용자 일일 카운트 초기화, 초기화한 사용자 수 반환"""
        reset_count = 0
        for user in self._users.values():
            if isinstance(user, FreeUser):
                user.reset_daily_count()
                reset_count += 1

        logger.info(f"Reset daily counts for {reset_count} free users")
        return reset_count

    def describe(self) -> str:
        sections = [room.describe() for room in self._rooms.values()]
        sections += [user.describe() for user in self._users.values()]
        return "\n".join(sections)
