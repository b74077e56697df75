from __future__ import annotations

import json
from functools import lru_cache
from typing import Any

import google.auth
import requests
from google.auth import exceptions as auth_exceptions
from google.auth.transport.requests import AuthorizedSession

from .core import SCOPES
from .exceptions import AuthError, SerializationError, TransportError
from .logger import logger


class FirebaseClient:
    """
    Thin authenticated JSON transport for the Firebase management APIs.
    Holds one AuthorizedSession, which refreshes the OAuth token on demand.
    """

    def __init__(self, session: AuthorizedSession) -> None:
        self.session = session

    @classmethod
    def from_credentials(cls, credentials: str | None = None) -> FirebaseClient:
        """
        Builds a client from raw JSON key material, or from Application
        Default Credentials when none is given.
        """
        if credentials:
            try:
                info = json.loads(credentials)
            except ValueError as e:
                raise AuthError(f"credentials are not valid JSON: {e}") from e
            if not isinstance(info, dict):
                raise AuthError("credentials must be a JSON object")
            try:
                creds, _ = google.auth.load_credentials_from_dict(info, scopes=SCOPES)
            except auth_exceptions.GoogleAuthError as e:
                raise AuthError(f"failed to load credentials: {e}") from e
            logger.debug(f"Loaded explicit credentials of type {info.get('type')}")
        else:
            try:
                creds, _ = google.auth.default(scopes=SCOPES)
            except auth_exceptions.DefaultCredentialsError as e:
                raise AuthError(
                    f"no credentials supplied and ADC could not be resolved: {e}"
                ) from e
            logger.debug("Resolved Application Default Credentials")

        return cls(AuthorizedSession(creds))

    def request(
        self,
        method: str,
        url: str,
        body: Any = None,
        timeout: float | None = None,
    ) -> requests.Response:
        """
        Performs a request and returns the raw response, whatever its status.
        `timeout` is the caller's deadline; None waits indefinitely.
        """
        headers = {}
        data = None
        if body is not None:
            try:
                data = json.dumps(body)
            except (TypeError, ValueError) as e:
                raise SerializationError(f"failed to marshal request body: {e}") from e
            headers["Content-Type"] = "application/json"

        logger.debug(f"{method} {url}")
        try:
            return self.session.request(
                method, url, data=data, headers=headers, timeout=timeout
            )
        except auth_exceptions.RefreshError as e:
            raise AuthError(f"failed to obtain an access token: {e}") from e
        except auth_exceptions.TransportError as e:
            raise TransportError(f"{method} {url} failed during token refresh: {e}") from e
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e


# Shared Client Registry (Lazy-loaded and cached per credential string)


@lru_cache(maxsize=8)
def get_client(credentials: str | None = None) -> FirebaseClient:
    return FirebaseClient.from_credentials(credentials)
