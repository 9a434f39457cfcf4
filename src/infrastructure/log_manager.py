import logging
import queue
from logging.handlers import QueueHandler, QueueListener

from src.common.log_level import LogLevel

logger = logging.getLogger(__name__)


class LoggingManager:
    """콘솔 로깅 설정 (큐 핸들러 + 리스너)"""

    def __init__(
        self,
        level: LogLevel = LogLevel.BASIC,
        log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        max_queue_size: int = 10_000,
    ):
        self.level = level
        self.log_format = log_format
        self.max_queue_size = max_queue_size

        self.console_handler: logging.Handler | None = None
        self.queue_listener: QueueListener | None = None

    def start(self) -> None:
        """루트 로거에 큐 핸들러 연결"""
        if self.queue_listener:
            logger.warning("Already running")
            return

        self.console_handler = logging.StreamHandler()
        self.console_handler.setFormatter(logging.Formatter(self.log_format))

        # 큐 핸들러
        self.log_queue = queue.Queue(maxsize=self.max_queue_size)
        queue_handler = QueueHandler(self.log_queue)

        self.queue_listener = QueueListener(
            self.log_queue, self.console_handler, respect_handler_level=True
        )
        self.queue_listener.start()

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(queue_handler)

        self.set_level(self.level)
        logger.debug("Logging initialized")

    def set_level(self, level: LogLevel) -> None:
        """
        출력 수준 변경

        출력 여부만 바뀌고 채팅 동작에는 영향 없음
        """
        self.level = level
        logging_level = level.to_logging_level()

        logging.getLogger().setLevel(logging_level)
        if self.console_handler:
            self.console_handler.setLevel(logging_level)

        logger.info(
            f"Log level set to {level.name} ({LogLevel.get_description(level)})"
        )

    def stop(self) -> None:
        """남은 로그를 비우고 리스너 종료"""
        if self.queue_listener:
            self.queue_listener.stop()
            self.queue_listener = None
