from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.user_tier import UserTier


class UserProfile(BaseModel):
    """사용자 식별 정보 (생성 후 변경 불가)"""

    name: str = Field(..., min_length=1)
    tier: UserTier

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("User name cannot be empty")
        return v.strip()
