"""User domain schemas"""

from typing import Optional

from pydantic import BaseModel


class UserRegister(BaseModel):
    """Sign-up form. Field checks are left to the identity provider."""

    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None


class UserCreatedResponse(BaseModel):
    message: str
    uid: str
