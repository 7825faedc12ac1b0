"""Pydantic DTOs accepted by the member service."""

from pydantic import BaseModel, ConfigDict, Field


class MemberIdentifyDTO(BaseModel):
    """Credentials identifying a member."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)


class MemberJoinDTO(MemberIdentifyDTO):
    """Registration and profile update payload."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "email": "hello@local.com",
                "password": "hello",
                "nickname": "hello",
                "thumbnail_image": "https://cdn.example.com/hello.png",
                "personal_status": "whatisthisfor",
            }
        },
    )

    nickname: str = Field(..., min_length=1, max_length=50)
    thumbnail_image: str | None = Field(None, max_length=500)
    personal_status: str | None = Field(None, max_length=255)
