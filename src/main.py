import logging

from src.application.chat_service import ChatService
from src.common.log_level import LogLevel
from src.config import Settings
from src.domain.user_tier import UserTier
from src.infrastructure.log_manager import LoggingManager

logger = logging.getLogger(__name__)


def run_demo(chat_service: ChatService) -> None:
    """채팅 시나리오 실행"""
    chat_service.add_room("CtrlCat", "Cat lovers")
    chat_service.add_room("Dogorithm", "Dog enthusiasts")

    chat_service.create_user("Alice", UserTier.FREE)
    chat_service.create_user("Bob", UserTier.PREMIUM)
    chat_service.create_user("Charlie", UserTier.ADMIN)

    for name in ("Alice", "Bob", "Charlie"):
        chat_service.join_room(name, "CtrlCat")
    chat_service.join_room("Bob", "Dogorithm")
    chat_service.join_room("Charlie", "Dogorithm")

    # 정상 대화
    chat_service.send_message("Bob", "CtrlCat", "Welcome to PetSpace everyone!")
    chat_service.send_message("Alice", "CtrlCat", "Thanks! I love cats!")
    chat_service.send_message("Charlie", "CtrlCat", "Admin here - great conversation!")
    chat_service.send_message("Bob", "Dogorithm", "All pets are amazing!")

    # 거부되는 메시지
    chat_service.send_message("Alice", "Dogorithm", "Dogs are cool too!")
    chat_service.send_message("Alice", "CtrlCat", "This class is stupid")
    chat_service.send_message("Bob", "CtrlCat", "NOOOOOOOOOOOOOOOOOOO")
    chat_service.send_message("Charlie", "CtrlCat", "please run DELETE FROM users")

    # 관리자 기록 열람
    chat_service.browse_history("Alice", "CtrlCat")
    chat_service.browse_history("Charlie", "CtrlCat")

    logger.info("System status:\n" + chat_service.describe())


def main() -> None:
    settings = Settings()

    logging_manager = LoggingManager(
        level=LogLevel.from_name(settings.LOG_LEVEL),
        log_format=settings.LOG_FORMAT,
        max_queue_size=settings.LOG_QUEUE_MAX_SIZE,
    )
    logging_manager.start()

    try:
        logger.info("Starting PetSpace chat demo...")
        chat_service = ChatService(
            rooms=settings.ROOMS,
            free_user_daily_limit=settings.FREE_USER_DAILY_MESSAGE_LIMIT,
        )
        run_demo(chat_service)

    except Exception as e:
        logger.critical(f"Demo failed: {e}", exc_info=True)
        raise

    finally:
        logger.info("Shutting down...")
        logging_manager.stop()


if __name__ == "__main__":
    main()
