from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "BASIC"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    LOG_QUEUE_MAX_SIZE: int = 10_000

    # Free User
    FREE_USER_DAILY_MESSAGE_LIMIT: int = 10

    # Chat Rooms (이름: 주제)
    ROOMS: dict[str, str] = {
        "CtrlCat": "Cat lovers",
        "Dogorithm": "Dog enthusiasts",
    }

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
