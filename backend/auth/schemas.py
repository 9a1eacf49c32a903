# backend/auth/schemas.py

from pydantic import BaseModel, Field, StrictStr, field_validator

from auth.passwords import MAX_PASSWORD_BYTES


class SignUpSchema(BaseModel):
    name: StrictStr = Field(min_length=1)
    email: StrictStr = Field(min_length=1)
    password: StrictStr = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class SignInSchema(BaseModel):
    email: StrictStr = Field(min_length=1)
    password: StrictStr = Field(min_length=1)
