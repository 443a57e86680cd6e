"""
Shared fixtures: a fake requests session and an executor that runs work
inline, so profile fetches finish before handle_redirect returns.
"""

from __future__ import annotations

from concurrent.futures import Executor, Future
from typing import Any

import pytest
import requests

from fb_login.facebook import Facebook, FacebookAuthType
from fb_login.graph_profile import ProfileFetcher

SCHEMES = ["com.example.app", "fb123"]


class InlineExecutor(Executor):
    def submit(self, fn, /, *args, **kwargs):  # type: ignore[override]
        f: Future = Future()
        try:
            f.set_result(fn(*args, **kwargs))
        except BaseException as e:  # noqa: BLE001
            f.set_exception(e)
        return f


class FakeResponse:
    def __init__(self, body: Any = None, text: str | None = None) -> None:
        self._body = body
        self._text = text

    def json(self) -> Any:
        if self._text is not None:
            raise ValueError("Expecting value")
        return self._body


class FakeSession:
    def __init__(self, response: FakeResponse | None = None, exc: Exception | None = None) -> None:
        self.response = response
        self.exc = exc
        self.calls: list[tuple[str, dict, float]] = []
        self.closed = False

    def get(self, url: str, params: dict | None = None, timeout: float | None = None) -> FakeResponse:
        self.calls.append((url, dict(params or {}), timeout))
        if self.exc is not None:
            raise self.exc
        assert self.response is not None
        return self.response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def profile_session() -> FakeSession:
    return FakeSession(FakeResponse({"id": "42", "name": "Ada", "email": "ada@example.com"}))


@pytest.fixture
def make_fetcher():
    def _make(session: FakeSession) -> ProfileFetcher:
        return ProfileFetcher(session_factory=lambda: session, executor=InlineExecutor(), timeout_s=5)

    return _make


@pytest.fixture
def facebook(profile_session: FakeSession, make_fetcher) -> Facebook:
    return Facebook(url_schemes=SCHEMES, profile_fetcher=make_fetcher(profile_session))


@pytest.fixture
def make_facebook(make_fetcher):
    def _make(
        session: FakeSession | None = None,
        auth_type: FacebookAuthType = FacebookAuthType.NONE,
        scopes: list[str] | None = None,
    ) -> Facebook:
        session = session or FakeSession(FakeResponse({"name": "Ada"}))
        return Facebook(
            auth_type=auth_type,
            scopes=scopes,
            url_schemes=SCHEMES,
            profile_fetcher=make_fetcher(session),
        )

    return _make


class Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def __call__(self, token, reserved, profile, error) -> None:
        self.calls.append((token, reserved, profile, error))

    @property
    def only(self) -> tuple:
        assert len(self.calls) == 1
        return self.calls[0]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("boom")
