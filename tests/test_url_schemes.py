from __future__ import annotations

import pytest

from fb_login.config import load_settings
from fb_login.errors import ConfigurationError
from fb_login.utils.url_schemes import registered_url_schemes, resolve_facebook_scheme


def test_resolves_first_fb_scheme_and_digits():
    scheme, client_id = resolve_facebook_scheme(["myapp", "fb1234567890", "fb999"])
    assert scheme == "fb1234567890"
    assert client_id == "1234567890"


def test_client_id_is_first_digit_run():
    _, client_id = resolve_facebook_scheme(["fb42suffix7"])
    assert client_id == "42"


def test_missing_scheme_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        resolve_facebook_scheme(["myapp", "com.example"])


def test_fb_scheme_without_digits_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        resolve_facebook_scheme(["fbapp"])


def test_reads_schemes_from_environment(monkeypatch):
    monkeypatch.setenv("FACEBOOK_URL_SCHEMES", "myapp, fb555 ,")
    assert registered_url_schemes() == ["myapp", "fb555"]
    assert resolve_facebook_scheme() == ("fb555", "555")


def test_settings_defaults(monkeypatch):
    for name in ("FACEBOOK_URL_SCHEMES", "FACEBOOK_AUTH_TYPE", "FACEBOOK_SCOPES", "FACEBOOK_HTTP_TIMEOUT", "LOG_LEVEL", "FACEBOOK_PENDING_LOGIN_TTL"):
        monkeypatch.delenv(name, raising=False)
    s = load_settings()
    assert s.url_schemes == []
    assert s.auth_type == ""
    assert s.scopes == []
    assert s.http_timeout_s == 20.0
    assert s.log_level == "INFO"
    assert s.pending_login_ttl_s == 600.0
