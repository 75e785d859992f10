from datetime import datetime
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, StringConstraints

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=200),
]
PhoneStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=5, max_length=20),
]
PasswordStr = Annotated[str, StringConstraints(min_length=6, max_length=128)]
UserType = Literal["player", "manager"]


class SignUpRequest(BaseModel):
    email: EmailStr
    password: PasswordStr
    name: NameStr
    phone: Optional[PhoneStr] = None
    user_type: UserType


class SignInRequest(BaseModel):
    email: EmailStr
    password: PasswordStr


class IdentityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: EmailStr


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: EmailStr
    phone: Optional[str] = None
    user_type: UserType


class SignUpResponse(BaseModel):
    identity: IdentityResponse
    profile: ProfileResponse
    title: str
    description: str


class SessionResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_at: Optional[datetime] = None
    identity: IdentityResponse
    profile: Optional[ProfileResponse] = None


class CurrentSessionResponse(BaseModel):
    authenticated: bool
    identity: Optional[IdentityResponse] = None
    profile: Optional[ProfileResponse] = None
