from __future__ import annotations
from pydantic import BaseModel
from typing import Any, Optional


class LoginStart(BaseModel):
    authorization_url: str
    state: str


class RedirectIn(BaseModel):
    redirect_url: str


class LoginErrorOut(BaseModel):
    code: str
    description: Optional[str] = None
    uri: Optional[str] = None


class LoginResult(BaseModel):
    access_token: Optional[str] = None
    profile: Optional[dict[str, Any]] = None
    error: Optional[LoginErrorOut] = None
