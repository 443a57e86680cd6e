# fb_login/graph_profile.py

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from http.cookiejar import DefaultCookiePolicy
from typing import Any, Callable, Dict, Optional

import requests

logger = logging.getLogger(__name__)

GRAPH_ME_URL = "https://graph.facebook.com/me"
PROFILE_FIELDS = "email,name"

_default_executor: Optional[ThreadPoolExecutor] = None


def default_executor() -> ThreadPoolExecutor:
    global _default_executor
    if _default_executor is None:
        _default_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="fb-profile")
    return _default_executor


def ephemeral_session() -> requests.Session:
    """
    Fresh session that stores no cookies, ignores .netrc and proxy
    settings from the environment, and asks for no cached responses.
    """
    s = requests.Session()
    s.trust_env = False
    s.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
    s.headers.update({"Cache-Control": "no-cache", "Pragma": "no-cache"})
    return s


class ProfileFetcher:
    """
    Loads the logged-in user's profile from the Graph API:
      GET /me?fields=email,name&access_token=<token>

    Any failure resolves to None. A missing profile never fails the login.
    """

    def __init__(
        self,
        session_factory: Callable[[], requests.Session] = ephemeral_session,
        executor: Optional[Executor] = None,
        timeout_s: float = 20.0,
    ) -> None:
        self.session_factory = session_factory
        self.executor = executor
        self.timeout_s = timeout_s

    def fetch(self, access_token: str) -> Optional[Dict[str, Any]]:
        params = {"fields": PROFILE_FIELDS, "access_token": access_token}
        http = self.session_factory()
        try:
            resp = http.get(GRAPH_ME_URL, params=params, timeout=self.timeout_s)
        except requests.RequestException as e:
            logger.warning("Profile request failed: %s", e.__class__.__name__)
            return None
        finally:
            http.close()

        try:
            data = resp.json()
        except ValueError:
            logger.warning("Profile response was not JSON")
            return None

        if not isinstance(data, dict):
            logger.warning("Profile response was not a JSON object")
            return None
        return data

    def fetch_async(self, access_token: str) -> "Future[Optional[Dict[str, Any]]]":
        executor = self.executor or default_executor()
        return executor.submit(self.fetch, access_token)
