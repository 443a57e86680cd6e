from __future__ import annotations

from fb_login.errors import LoginError
from fb_login.login import LoginSession

from conftest import Recorder


def test_login_opens_authorization_url(facebook, recorder):
    opened: list[str] = []
    session = LoginSession(opener=opened.append)
    session.login(facebook, recorder)

    assert opened == [facebook.authorization_url]
    assert session.pending
    assert recorder.calls == []


def test_redirect_routed_to_pending_provider(facebook, recorder):
    session = LoginSession(opener=lambda _url: None)
    session.login(facebook, recorder)

    assert session.handle_url(f"fb123://authorize#access_token=XYZ&state={facebook.state}")
    assert recorder.only[0] == "XYZ"
    assert not session.pending


def test_scheme_match_is_case_insensitive(facebook, recorder):
    session = LoginSession(opener=lambda _url: None)
    session.login(facebook, recorder)
    assert session.handle_url(f"FB123://authorize#access_token=XYZ&state={facebook.state}")


def test_foreign_url_is_not_handled(facebook, recorder):
    session = LoginSession(opener=lambda _url: None)
    session.login(facebook, recorder)

    assert not session.handle_url("myapp://somewhere")
    assert session.pending
    assert recorder.calls == []


def test_nothing_pending():
    assert not LoginSession(opener=lambda _url: None).handle_url("fb123://authorize")


def test_new_login_cancels_pending_one(make_facebook):
    first, second = Recorder(), Recorder()
    session = LoginSession(opener=lambda _url: None)
    session.login(make_facebook(), first)
    fb = make_facebook()
    session.login(fb, second)

    assert first.only == (None, None, None, LoginError.login_cancelled())
    session.handle_url(f"fb123://authorize#access_token=T&state={fb.state}")
    assert second.only[0] == "T"
