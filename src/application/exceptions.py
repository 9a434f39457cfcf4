class ChatServiceError(Exception):
    """ChatService 관련 기본 에러"""

    def __init__(self, message: str, error_code: str):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class UserAlreadyExistsError(ChatServiceError):
    """같은 이름의 사용자가 이미 있을 때"""

    def __init__(self, name: str):
        super().__init__(f"User already exists: {name}", "user_already_exists")


class UserNotFoundError(ChatServiceError):
    """등록되지 않은 사용자"""

    def __init__(self, name: str):
        super().__init__(f"User not found: {name}", "user_not_found")


class RoomNotFoundError(ChatServiceError):
    """존재하지 않는 채팅방"""

    def __init__(self, name: str):
        super().__init__(f"Room not found: {name}", "room_not_found")
