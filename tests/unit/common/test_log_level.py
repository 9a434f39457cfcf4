import logging

import pytest

from src.common.log_level import LogLevel


class TestLogLevel:
    """LogLevel 테스트"""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("NONE", LogLevel.NONE),
            ("user_only", LogLevel.USER_ONLY),
            (" Basic ", LogLevel.BASIC),
            ("debug", LogLevel.DEBUG),
        ],
    )
    def test_from_name(self, name, expected):
        assert LogLevel.from_name(name) is expected

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            LogLevel.from_name("VERBOSE")

    @pytest.mark.parametrize(
        "level, logging_level",
        [
            (LogLevel.USER_ONLY, logging.WARNING),
            (LogLevel.BASIC, logging.INFO),
            (LogLevel.DEBUG, logging.DEBUG),
        ],
    )
    def test_to_logging_level(self, level, logging_level):
        assert level.to_logging_level() == logging_level

    def test_none_silences_critical(self):
        assert LogLevel.NONE.to_logging_level() > logging.CRITICAL

    def test_description(self):
        assert LogLevel.get_description(LogLevel.DEBUG) == (
            "Full pattern implementation details"
        )
        assert LogLevel.get_description(9) == "Unknown level: 9"
