# fb_login/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _split_csv(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


@dataclass(frozen=True)
class Settings:
    url_schemes: list[str] = field(default_factory=list)
    auth_type: str = ""
    scopes: list[str] = field(default_factory=list)
    http_timeout_s: float = 20.0
    log_level: str = "INFO"
    pending_login_ttl_s: float = 600.0


def load_settings() -> Settings:
    return Settings(
        url_schemes=_split_csv(os.getenv("FACEBOOK_URL_SCHEMES")),
        auth_type=os.getenv("FACEBOOK_AUTH_TYPE", "").strip().lower(),
        scopes=_split_csv(os.getenv("FACEBOOK_SCOPES")),
        http_timeout_s=float(os.getenv("FACEBOOK_HTTP_TIMEOUT", "20")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        pending_login_ttl_s=float(os.getenv("FACEBOOK_PENDING_LOGIN_TTL", "600")),
    )
