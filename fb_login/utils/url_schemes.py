# fb_login/utils/url_schemes.py
from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Optional

from fb_login.config import load_settings
from fb_login.errors import ConfigurationError

logger = logging.getLogger(__name__)

FACEBOOK_SCHEME_PREFIX = "fb"
_DIGITS = re.compile(r"\d+")


def registered_url_schemes(
    filter: Optional[Callable[[str], bool]] = None,
    schemes: Optional[Iterable[str]] = None,
) -> list[str]:
    """
    URL schemes the app is registered for. Reads FACEBOOK_URL_SCHEMES
    unless an explicit list is given.
    """
    if schemes is None:
        schemes = load_settings().url_schemes
    found = [s for s in schemes if s]
    if filter is not None:
        found = [s for s in found if filter(s)]
    return found


def resolve_facebook_scheme(schemes: Optional[Iterable[str]] = None) -> tuple[str, str]:
    """
    Returns (url_scheme, client_id) for the first fb<app id> scheme.
    Raises ConfigurationError when the app has none.
    """
    candidates = registered_url_schemes(lambda s: s.startswith(FACEBOOK_SCHEME_PREFIX), schemes)
    if candidates:
        scheme = candidates[0]
        m = _DIGITS.search(scheme)
        if m:
            logger.debug("Using Facebook URL scheme %s", scheme)
            return scheme, m.group(0)

    raise ConfigurationError("You must configure your Facebook URL Scheme to use Facebook login.")
