# fb_login/routers/facebook_login.py
from __future__ import annotations

import asyncio
import logging
import threading
import time
from typing import Callable, Dict, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from fb_login.config import load_settings
from fb_login.errors import LoginError, OAuth2Error
from fb_login.facebook import Facebook, FacebookAuthType
from fb_login.graph_profile import ProfileFetcher
from fb_login.models.schemas import LoginErrorOut, LoginResult, LoginStart, RedirectIn
from fb_login.utils.url_parts import fragment_and_query_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth/facebook", tags=["facebook-login"])

ProviderFactory = Callable[[FacebookAuthType, list[str]], Facebook]


# ==========================================================
# Pending logins (keyed by state, in-process only)
# ==========================================================

class PendingLogins:
    """
    Providers waiting for their redirect. Entries older than ttl_s are
    dropped on every add/pop.
    """

    def __init__(self, ttl_s: float = 600.0, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_s = ttl_s
        self.clock = clock
        self._lock = threading.Lock()
        self._by_state: Dict[str, Tuple[float, Facebook]] = {}

    def _drop_expired(self, now: float) -> None:
        expired = [s for s, (created, _) in self._by_state.items() if now - created >= self.ttl_s]
        for s in expired:
            del self._by_state[s]
        if expired:
            logger.debug("Dropped %d expired pending logins", len(expired))

    def add(self, provider: Facebook) -> None:
        with self._lock:
            now = self.clock()
            self._drop_expired(now)
            self._by_state[provider.state] = (now, provider)

    def pop(self, state: Optional[str]) -> Optional[Facebook]:
        with self._lock:
            self._drop_expired(self.clock())
            if not state:
                return None
            entry = self._by_state.pop(state, None)
        return entry[1] if entry else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_state)


pending_logins = PendingLogins(ttl_s=load_settings().pending_login_ttl_s)


# ==========================================================
# Dependencies
# ==========================================================

def get_pending_logins() -> PendingLogins:
    return pending_logins


def get_provider_factory() -> ProviderFactory:
    settings = load_settings()
    fetcher = ProfileFetcher(timeout_s=settings.http_timeout_s)

    def factory(auth_type: FacebookAuthType, scopes: list[str]) -> Facebook:
        return Facebook(
            auth_type=auth_type,
            scopes=scopes or settings.scopes,
            url_schemes=settings.url_schemes,
            profile_fetcher=fetcher,
        )

    return factory


def _error_out(error: Exception) -> LoginErrorOut:
    if isinstance(error, OAuth2Error):
        return LoginErrorOut(code=error.code, description=error.description, uri=error.uri)
    if isinstance(error, LoginError):
        return LoginErrorOut(code=error.code.value, description=str(error))
    return LoginErrorOut(code="unknown", description=str(error))


# ==========================================================
# ROUTES
# ==========================================================

@router.get("/start", response_model=LoginStart)
def start_facebook_login(
    auth_type: str = "",
    scope: Optional[str] = None,
    factory: ProviderFactory = Depends(get_provider_factory),
    pending: PendingLogins = Depends(get_pending_logins),
):
    try:
        kind = FacebookAuthType(auth_type.strip().lower())
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unsupported auth_type: {auth_type!r}")

    scopes = [s.strip() for s in (scope or "").split(",") if s.strip()]
    provider = factory(kind, scopes)
    pending.add(provider)

    return LoginStart(authorization_url=provider.authorization_url, state=provider.state)


@router.post("/redirect", response_model=LoginResult)
async def facebook_redirect(
    body: RedirectIn,
    factory: ProviderFactory = Depends(get_provider_factory),
    pending: PendingLogins = Depends(get_pending_logins),
):
    state = fragment_and_query_dict(body.redirect_url).get("state")
    provider = pending.pop(state)
    if provider is None:
        # unknown state: a fresh provider has its own state, so validation fails
        logger.warning("Redirect for an unknown login state")
        provider = factory(FacebookAuthType.NONE, [])

    def on_done(token, _reserved, profile, error) -> None:
        logger.debug("Redirect handled (error=%s)", type(error).__name__ if error else None)

    token, _, profile, error = await asyncio.wrap_future(provider.handle_redirect(body.redirect_url, on_done))

    if error is not None:
        result = LoginResult(error=_error_out(error))
        return JSONResponse(status_code=400, content=result.model_dump())

    return LoginResult(access_token=token, profile=profile)
