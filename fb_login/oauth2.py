# fb_login/oauth2.py

from __future__ import annotations

import secrets
from concurrent.futures import Future
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple
from urllib.parse import urlencode

LoginCallback = Callable[[Optional[str], None, Optional[Dict[str, Any]], Optional[Exception]], None]
LoginOutcome = Tuple[Optional[str], None, Optional[Dict[str, Any]], Optional[Exception]]


class GrantType(str, Enum):
    AUTHORIZATION_CODE = "authorization_code"
    IMPLICIT = "implicit"
    CUSTOM = "custom"


def generate_state(nbytes: int = 32) -> str:
    return secrets.token_urlsafe(nbytes)


@dataclass
class OAuth2Request:
    """
    Generic OAuth2 authorization request:
      - client id + endpoints
      - grant type (decides response_type)
      - scopes
      - one anti-forgery state per instance
    """

    client_id: str
    authorization_endpoint: str
    redirect_endpoint: str
    grant_type: GrantType = GrantType.IMPLICIT
    scopes: List[str] = field(default_factory=list)
    state: str = field(default_factory=generate_state)

    @property
    def response_type(self) -> Optional[str]:
        if self.grant_type == GrantType.IMPLICIT:
            return "token"
        if self.grant_type == GrantType.AUTHORIZATION_CODE:
            return "code"
        return None

    @property
    def authorization_url_parameters(self) -> Dict[str, str]:
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_endpoint,
            "response_type": self.response_type,
            "scope": " ".join(self.scopes) if self.scopes else None,
            "state": self.state,
        }
        return {k: v for k, v in params.items() if v is not None}


def build_url(endpoint: str, params: Dict[str, str]) -> str:
    return f"{endpoint}?{urlencode(params)}" if params else endpoint


class LoginProvider(Protocol):
    """What a login session needs from a provider."""

    @property
    def authorization_url(self) -> str: ...

    @property
    def redirect_endpoint(self) -> str: ...

    def handle_redirect(self, url: str, callback: LoginCallback) -> "Future[LoginOutcome]": ...
