from typing import Optional
from pydantic import Field

from healthcare_api.schemas.common import CamelModel


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1, examples=["dr.wilson"])
    role: Optional[str] = Field(None, examples=["Doctor"])


class User(CamelModel):
    id: str
    name: str
    email: str
    role: str
    department: str


class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: User
