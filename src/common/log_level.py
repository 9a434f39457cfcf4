import logging
from enum import IntEnum


class LogLevel(IntEnum):
    """
    채팅 알림 출력 수준

    사용자 알림(WARNING), 시스템 이벤트(INFO), 내부 추적(DEBUG)
    세 종류의 로그를 어디까지 보여줄지 결정한다.
    """

    NONE = 0  # 출력 없음
    USER_ONLY = 1  # 사용자 알림만
    BASIC = 2  # 입장/퇴장 등 시스템 이벤트
    DEBUG = 3  # 전체 추적

    @classmethod
    def get_description(cls, level: int) -> str:
        """레벨 설명 반환"""
        descriptions = {
            cls.NONE: "Complete silence",
            cls.USER_ONLY: "Clean chat experience",
            cls.BASIC: "System operations visible",
            cls.DEBUG: "Full pattern implementation details",
        }
        return descriptions.get(level, f"Unknown level: {level}")

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """설정 문자열을 레벨로 변환 (대소문자 무시)"""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {name}") from None

    def to_logging_level(self) -> int:
        """표준 logging 레벨로 변환"""
        mapping = {
            LogLevel.NONE: logging.CRITICAL + 10,
            LogLevel.USER_ONLY: logging.WARNING,
            LogLevel.BASIC: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
        }
        return mapping[self]
