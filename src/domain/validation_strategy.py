import logging
import re
from abc import ABC, abstractmethod

from src.domain.user_tier import UserTier

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# 금칙어 / 위험 문자열
# ---------------------------------------------------------------------------

MILD_WORDS: tuple[str, ...] = (
    "stupid", "dumb", "hate", "sucks", "crap", "damn", "hell", "shut",
    "idiot", "loser", "weird", "ugly", "fat", "poes", "ass",
)

SEVERE_WORDS: tuple[str, ...] = (
    "fuck", "shit", "bitch", "asshole", "bastard", "whore", "slut",
)

# 단어 경계가 아닌 부분 문자열로 검사
SYSTEM_THREATS: tuple[str, ...] = (
    "DELETE FROM", "DROP TABLE", "rm -rf", "format c:",
    "shutdown", "reboot", "kill -9", "sudo rm", "del /s",
)


def _whole_word_patterns(words: tuple[str, ...]) -> list[tuple[str, re.Pattern[str]]]:
    # 앞뒤 문자가 영숫자가 아닐 때만 매칭
    return [
        (word, re.compile(rf"(?<![a-z0-9]){re.escape(word)}(?![a-z0-9])", re.IGNORECASE))
        for word in words
    ]


def _uppercase_count(message: str) -> int:
    return sum(1 for c in message if c.isupper())


def _longest_run(message: str) -> int:
    longest = 0
    current = 0
    previous = None
    for c in message:
        current = current + 1 if c == previous else 1
        previous = c
        longest = max(longest, current)
    return longest


class ValidationStrategy(ABC):
    """등급별 메시지 검증 정책"""

    name: str = ""
    max_message_length: int | None = None

    @abstractmethod
    def validate(self, message: str, sender_name: str) -> bool:
        """
        메시지 검증

        실패 사유는 로그(WARNING)로만 전달하고 예외는 던지지 않는다.
        """

    def _reject_empty(self, message: str, sender_name: str) -> bool:
        if not message:
            logger.warning(f"{sender_name}: Cannot send empty messages")
            return True
        return False

    def _exceeds_length(self, message: str) -> bool:
        return (
            self.max_message_length is not None
            and len(message) > self.max_message_length
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FreeUserValidationStrategy(ValidationStrategy):
    """무료 사용자: 100자 제한, 금칙어 전체 차단, 대문자 남용 금지"""

    name = "Free User"
    max_message_length = 100
    caps_min_length = 5
    caps_ratio_limit = 0.30

    _blocked_patterns = _whole_word_patterns(MILD_WORDS + SEVERE_WORDS)

    def validate(self, message: str, sender_name: str) -> bool:
        logger.debug(f"[FreeUserValidation] Validating message from {sender_name}")

        if self._reject_empty(message, sender_name):
            return False

        if self._exceeds_length(message):
            logger.warning(
                f"{sender_name}: Message too long! Free users limited to "
                f"{self.max_message_length} characters. "
                "Upgrade to Premium for longer messages!"
            )
            return False

        blocked = self._find_blocked_word(message)
        if blocked:
            logger.debug(f"[FreeUserValidation] Blocked word found: {blocked}")
            logger.warning(
                f"{sender_name}: Language not appropriate! Free users must keep "
                "messages family-friendly. Upgrade to Premium for more flexibility!"
            )
            return False

        if self._has_excessive_caps(message):
            logger.warning(
                f"{sender_name}: Please don't use excessive CAPS! "
                "Free users must follow basic etiquette rules."
            )
            return False

        logger.debug(f"[FreeUserValidation] Message approved for free user {sender_name}")
        return True

    def _find_blocked_word(self, message: str) -> str | None:
        for word, pattern in self._blocked_patterns:
            if pattern.search(message):
                return word
        return None

    def _has_excessive_caps(self, message: str) -> bool:
        if len(message) < self.caps_min_length:
            return False

        caps = _uppercase_count(message)
        excessive = caps > len(message) * self.caps_ratio_limit
        if excessive:
            logger.debug(
                f"[FreeUserValidation] Excessive caps detected: {caps}/{len(message)}"
            )
        return excessive


class PremiumUserValidationStrategy(ValidationStrategy):
    """프리미엄 사용자: 길이 무제한, 심한 욕설과 스팸만 차단"""

    name = "Premium User"
    max_message_length = None
    caps_ratio_limit = 0.80
    max_repeat = 15

    _severe_patterns = _whole_word_patterns(SEVERE_WORDS)

    def validate(self, message: str, sender_name: str) -> bool:
        logger.debug(
            f"[PremiumUserValidation] Validating message from premium user {sender_name}"
        )

        if self._reject_empty(message, sender_name):
            return False

        logger.debug(
            "[PremiumUserValidation] Premium user - no length restrictions "
            f"({len(message)} characters)"
        )

        for word, pattern in self._severe_patterns:
            if pattern.search(message):
                logger.debug(f"[PremiumUserValidation] Severe profanity detected: {word}")
                logger.warning(
                    f"{sender_name}: That language is too severe! "
                    "Even Premium users must avoid extreme profanity."
                )
                return False

        if self._is_spam(message):
            logger.warning(
                f"{sender_name}: Message appears to be spam. "
                "Please send meaningful content!"
            )
            return False

        logger.debug(
            f"[PremiumUserValidation] Message approved for premium user {sender_name}"
        )
        return True

    def _is_spam(self, message: str) -> bool:
        repeat = _longest_run(message)
        if repeat > self.max_repeat:
            logger.debug(
                f"[PremiumUserValidation] Excessive character repetition: {repeat}"
            )
            return True

        if _uppercase_count(message) > len(message) * self.caps_ratio_limit:
            logger.debug("[PremiumUserValidation] All caps spam detected")
            return True

        return False


class AdminUserValidationStrategy(ValidationStrategy):
    """관리자: 2000자 제한, 시스템 위협 문자열만 차단"""

    name = "Admin User"
    max_message_length = 2000

    def validate(self, message: str, sender_name: str) -> bool:
        logger.debug(f"[AdminUserValidation] Validating message from admin {sender_name}")

        if self._reject_empty(message, sender_name):
            return False

        if self._exceeds_length(message):
            logger.warning(
                f"{sender_name}: Even admin messages have limits! Max "
                f"{self.max_message_length} characters for system stability."
            )
            return False

        lowered = message.lower()
        for threat in SYSTEM_THREATS:
            if threat.lower() in lowered:
                logger.debug(f"[AdminUserValidation] System threat detected: {threat}")
                logger.warning(
                    f"{sender_name}: Admin message blocked - "
                    "contains potential system threats!"
                )
                return False

        logger.debug(
            "[AdminUserValidation] Admin message approved - full privileges "
            f"({len(message)} characters)"
        )
        return True


_STRATEGIES: dict[UserTier, type[ValidationStrategy]] = {
    UserTier.FREE: FreeUserValidationStrategy,
    UserTier.PREMIUM: PremiumUserValidationStrategy,
    UserTier.ADMIN: AdminUserValidationStrategy,
}


def strategy_for_tier(tier: UserTier) -> ValidationStrategy:
    """등급에 맞는 새 검증 정책 인스턴스 반환"""
    return _STRATEGIES[tier]()
