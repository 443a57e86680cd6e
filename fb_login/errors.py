# fb_login/errors.py
from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional


class ConfigurationError(RuntimeError):
    """
    Misconfigured build (no fb URL scheme, unsupported grant type).
    Not a login outcome: raised, never handed to a callback.
    """


class OAuth2ErrorCode(str, Enum):
    INVALID_REQUEST = "invalid_request"
    UNAUTHORIZED_CLIENT = "unauthorized_client"
    ACCESS_DENIED = "access_denied"
    UNSUPPORTED_RESPONSE_TYPE = "unsupported_response_type"
    INVALID_SCOPE = "invalid_scope"
    SERVER_ERROR = "server_error"
    TEMPORARILY_UNAVAILABLE = "temporarily_unavailable"


class OAuth2Error(Exception):
    """
    Error reported by the provider on the redirect URL
    (error / error_description / error_uri).
    """

    def __init__(self, code: str, description: Optional[str] = None, uri: Optional[str] = None) -> None:
        self.code = code
        self.description = description
        self.uri = uri
        super().__init__(f"{code}: {description}" if description else code)

    @property
    def known_code(self) -> Optional[OAuth2ErrorCode]:
        try:
            return OAuth2ErrorCode(self.code)
        except ValueError:
            return None

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> Optional["OAuth2Error"]:
        code = params.get("error")
        if not code:
            return None
        return cls(code, params.get("error_description"), params.get("error_uri"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OAuth2Error):
            return NotImplemented
        return (self.code, self.description, self.uri) == (other.code, other.description, other.uri)

    def __hash__(self) -> int:
        return hash((self.code, self.description, self.uri))


class LoginErrorCode(str, Enum):
    INTERNAL_SDK_ERROR = "internal_sdk_error"
    LOGIN_CANCELLED = "login_cancelled"


class LoginError(Exception):
    def __init__(self, code: LoginErrorCode, message: Optional[str] = None) -> None:
        self.code = code
        super().__init__(message or code.value)

    @classmethod
    def internal_sdk_error(cls) -> "LoginError":
        return cls(LoginErrorCode.INTERNAL_SDK_ERROR, "Internal SDK error")

    @classmethod
    def login_cancelled(cls) -> "LoginError":
        return cls(LoginErrorCode.LOGIN_CANCELLED, "Login was cancelled")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LoginError):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)
