from pydantic import BaseModel, Field
from typing import Optional


class AuthData(BaseModel):
    username: str = Field(..., min_length=1, json_schema_extra={"example": "acme"})
    password: str = Field(..., min_length=1)


class UpdatePasswordRequest(BaseModel):
    new_password: str = Field(..., min_length=1)


class UserData(BaseModel):
    """What /check_auth_status returns about the signed-in user."""
    username: str
    name: str = ""
    logo: Optional[str] = None
    website: Optional[str] = None


class Message(BaseModel):
    message: str
