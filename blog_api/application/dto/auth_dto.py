from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator

from .user_dto import UserResponse

# bcrypt only accepts the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class SignupRequest(BaseModel):
    """DTO for user signup request"""
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=MAX_PASSWORD_BYTES)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    """DTO for user login request (username or email plus password)"""
    username_or_email: str = Field(
        min_length=1,
        max_length=320,
        validation_alias=AliasChoices("username_or_email", "email", "username"),
    )
    password: str = Field(min_length=1, max_length=256)


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
