# fb_login/login.py
from __future__ import annotations

import logging
import threading
import webbrowser
from typing import Callable, Optional

from fb_login.errors import LoginError
from fb_login.oauth2 import LoginCallback, LoginProvider
from fb_login.utils.url_parts import url_scheme

logger = logging.getLogger(__name__)


class LoginSession:
    """
    Drives one login at a time:
      login()      -> opens the provider's authorization URL
      handle_url() -> hands the redirect URL back to the pending provider
    """

    def __init__(self, opener: Callable[[str], object] = webbrowser.open) -> None:
        self.opener = opener
        self._lock = threading.Lock()
        self._provider: Optional[LoginProvider] = None
        self._callback: Optional[LoginCallback] = None

    @property
    def pending(self) -> bool:
        return self._provider is not None

    def login(self, provider: LoginProvider, callback: LoginCallback) -> None:
        with self._lock:
            previous = self._callback
            self._provider = provider
            self._callback = callback

        if previous is not None:
            logger.info("Replacing a pending login")
            previous(None, None, None, LoginError.login_cancelled())

        url = provider.authorization_url
        logger.debug("Opening authorization URL for %s", provider.redirect_endpoint)
        self.opener(url)

    def handle_url(self, url: str) -> bool:
        """
        Returns True if the URL belonged to the pending login.
        """
        with self._lock:
            provider = self._provider
            callback = self._callback
            if provider is None or callback is None:
                return False
            if url_scheme(url) != url_scheme(provider.redirect_endpoint):
                return False
            self._provider = None
            self._callback = None

        provider.handle_redirect(url, callback)
        return True
