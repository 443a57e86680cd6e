# fb_login/facebook.py

from __future__ import annotations

import logging
from concurrent.futures import Future
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from fb_login.errors import ConfigurationError, LoginError, OAuth2Error
from fb_login.graph_profile import ProfileFetcher
from fb_login.oauth2 import (
    GrantType,
    LoginCallback,
    LoginOutcome,
    OAuth2Request,
    build_url,
)
from fb_login.utils.url_parts import fragment_and_query_dict, fragment_dict
from fb_login.utils.url_schemes import resolve_facebook_scheme

logger = logging.getLogger(__name__)

AUTHORIZATION_ENDPOINT = "https://www.facebook.com/dialog/oauth"


class FacebookAuthType(str, Enum):
    """
    Facebook's extension to the login dialog.
    """

    # re-asks for permissions the user declined earlier
    REREQUEST = "rerequest"
    # makes the user type their password again
    REAUTHENTICATE = "reauthenticate"
    NONE = ""


class Facebook:
    """
    Facebook Login, mobile implicit grant flow.

    Setup:
      - register an app at developers.facebook.com
      - register the URL scheme fb<APP_ID> for your app
        (FACEBOOK_URL_SCHEMES=fb<APP_ID> in .env)

    The client id and the redirect endpoint (fb<APP_ID>://authorize)
    are derived from that scheme.
    """

    def __init__(
        self,
        auth_type: FacebookAuthType = FacebookAuthType.NONE,
        scopes: Optional[List[str]] = None,
        url_schemes: Optional[Iterable[str]] = None,
        profile_fetcher: Optional[ProfileFetcher] = None,
    ) -> None:
        url_scheme, client_id = resolve_facebook_scheme(url_schemes)

        self.auth_type = FacebookAuthType(auth_type)
        self.oauth = OAuth2Request(
            client_id=client_id,
            authorization_endpoint=AUTHORIZATION_ENDPOINT,
            redirect_endpoint=f"{url_scheme}://authorize",
            grant_type=GrantType.IMPLICIT,
            scopes=list(scopes or []),
        )
        self.profile_fetcher = profile_fetcher or ProfileFetcher()

    @property
    def client_id(self) -> str:
        return self.oauth.client_id

    @property
    def state(self) -> str:
        return self.oauth.state

    @property
    def grant_type(self) -> GrantType:
        return self.oauth.grant_type

    @grant_type.setter
    def grant_type(self, value: GrantType) -> None:
        self.oauth.grant_type = value

    @property
    def redirect_endpoint(self) -> str:
        return self.oauth.redirect_endpoint

    @property
    def authorization_url_parameters(self) -> Dict[str, str]:
        params = self.oauth.authorization_url_parameters
        if self.auth_type.value:
            params["auth_type"] = self.auth_type.value
        return params

    @property
    def authorization_url(self) -> str:
        return build_url(self.oauth.authorization_endpoint, self.authorization_url_parameters)

    def handle_redirect(self, url: str, callback: LoginCallback) -> "Future[LoginOutcome]":
        """
        Handles the redirect URL coming back from the login dialog.

        Calls callback(access_token, None, profile, error) exactly once and
        returns a future resolving to the same tuple.
        """
        if self.grant_type == GrantType.AUTHORIZATION_CODE:
            raise ConfigurationError("Authorization Code Grant Type Not Supported")
        if self.grant_type != GrantType.IMPLICIT:
            raise ConfigurationError("Custom Grant Type Not Supported")

        outcome: "Future[LoginOutcome]" = Future()

        def finish(token: Optional[str], profile: Optional[Dict[str, Any]], error: Optional[Exception]) -> None:
            try:
                callback(token, None, profile, error)
            finally:
                outcome.set_result((token, None, profile, error))

        access_token = fragment_dict(url).get("access_token")
        params = fragment_and_query_dict(url)

        if not access_token or params.get("state") != self.state:
            # Facebook's mobile flow puts errors in the query, so look in both.
            error = OAuth2Error.from_params(params)
            if error is not None:
                logger.info("Facebook login failed: %s", error.code)
                finish(None, None, error)
            else:
                logger.warning("Facebook redirect without a token or with a mismatched state")
                finish(None, None, LoginError.internal_sdk_error())
            return outcome

        def on_profile(f: "Future[Optional[Dict[str, Any]]]") -> None:
            try:
                profile = f.result()
            except Exception:
                logger.exception("Profile fetch raised")
                profile = None
            logger.info("Facebook login succeeded (profile %s)", "loaded" if profile else "missing")
            finish(access_token, profile, None)

        self.profile_fetcher.fetch_async(access_token).add_done_callback(on_profile)
        return outcome
