from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class Token(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int
