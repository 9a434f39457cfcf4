from enum import Enum


class UserTier(str, Enum):
    """사용자 등급 (생성 후 변경 불가)"""

    FREE = "FREE"
    PREMIUM = "PREMIUM"
    ADMIN = "ADMIN"

    @property
    def display_name(self) -> str:
        """화면 표시용 이름"""
        return self.value.capitalize()
