# fb_login/console/facebook_login_console.py
from __future__ import annotations

import logging
import threading
import webbrowser
from typing import Any, Optional

from fb_login.config import Settings, load_settings
from fb_login.facebook import Facebook, FacebookAuthType
from fb_login.graph_profile import ProfileFetcher
from fb_login.login import LoginSession


def build_provider(settings: Settings) -> Facebook:
    return Facebook(
        auth_type=FacebookAuthType(settings.auth_type),
        scopes=settings.scopes,
        url_schemes=settings.url_schemes,
        profile_fetcher=ProfileFetcher(timeout_s=settings.http_timeout_s),
    )


def open_in_browser(url: str) -> None:
    print("\nOpen this URL to login and approve:")
    print(url)
    try:
        webbrowser.open(url, new=2)
    except webbrowser.Error:
        print("(could not open a browser, copy the URL manually)")


class ConsoleResult:
    def __init__(self) -> None:
        self.done = threading.Event()
        self.access_token: Optional[str] = None
        self.profile: Optional[dict[str, Any]] = None
        self.error: Optional[Exception] = None

    def __call__(self, access_token, _reserved, profile, error) -> None:
        self.access_token = access_token
        self.profile = profile
        self.error = error
        self.done.set()


def run_login(provider: Facebook, session: LoginSession, redirect_url: str) -> ConsoleResult:
    """
    Feeds a pasted redirect URL through the session and waits for the callback.
    """
    result = ConsoleResult()
    session.login(provider, result)
    if not session.handle_url(redirect_url):
        raise ValueError(f"Not a redirect for this app (expected {provider.redirect_endpoint}).")
    result.done.wait()
    return result


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)

    provider = build_provider(settings)
    open_in_browser(provider.authorization_url)

    print(f"\nAfter login, paste the FULL redirect URL (starts with {provider.redirect_endpoint}).")
    raw = input("\nPaste redirect URL: ").strip()

    # browser already opened above
    session = LoginSession(opener=lambda _url: None)
    try:
        result = run_login(provider, session, raw)
    except ValueError as e:
        print("\n❌", e)
        return

    if result.error is not None:
        print("\n❌ Login failed:", result.error)
        return

    print("\n✅ Logged in")
    print("access_token:", (result.access_token or "")[:8] + "...")
    for k, v in (result.profile or {}).items():
        print(f"{k}: {v}")


if __name__ == "__main__":
    main()
