from pathlib import Path
from typing import Any

import httpx
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from oauthlib.oauth2.rfc6749.errors import AccessDeniedError

from app.auth.exceptions import AuthError, NotSignedInError
from app.auth.models import SignInResult, UserProfile
from app.logging.logger import Log

SCOPES = [
    "openid",
    "https://www.googleapis.com/auth/userinfo.email",
    "https://www.googleapis.com/auth/userinfo.profile",
    "https://www.googleapis.com/auth/drive.file",
    "https://www.googleapis.com/auth/spreadsheets",
]

REVOKE_URL = "https://oauth2.googleapis.com/revoke"


class GoogleAuthGateway:
    """Exchanges user consent for Google credentials and hands out API services.

    Built services are cached per sign-in and dropped on sign-out.
    """

    def __init__(
        self,
        client_secrets_file: Path,
        token_file: Path | None = None,
        port: int = 0,
    ) -> None:
        self._client_secrets_file = client_secrets_file
        self._token_file = token_file
        self._port = port
        self._credentials: Credentials | None = None
        self._services: dict[tuple[str, str], Any] = {}

    @property
    def signed_in(self) -> bool:
        return self._credentials is not None

    def sign_in(self) -> SignInResult | None:
        """Run the consent flow and fetch the user's profile.

        Returns None when the user declines consent.

        Raises:
            AuthError: if the flow or the profile request fails.
        """
        try:
            credentials = self._load_cached() or self._run_consent_flow()
        except AccessDeniedError:
            Log.info("Google sign-in was cancelled by the user")
            return None
        except (GoogleAuthError, OSError, ValueError) as exc:
            raise AuthError(f"Google sign-in failed: {exc}") from exc

        self._credentials = credentials
        self._services.clear()
        try:
            profile = self._fetch_profile()
        except HttpError as exc:
            self._forget()
            raise AuthError(f"Failed to fetch user info: {exc}") from exc

        if self._token_file is not None:
            try:
                self._token_file.write_text(credentials.to_json(), encoding="utf-8")
            except OSError as exc:
                self._forget()
                raise AuthError(f"Failed to save the Google token: {exc}") from exc

        Log.info(f"Signed in to Google as {profile.email or profile.name}")
        return SignInResult(credentials=credentials, profile=profile)

    def sign_out(self) -> None:
        """Revoke the current token and forget cached credentials and services."""
        credentials = self._credentials
        self._forget()
        if self._token_file is not None and self._token_file.exists():
            self._token_file.unlink()
        if credentials is None or not credentials.token:
            return
        try:
            response = httpx.post(
                REVOKE_URL,
                params={"token": credentials.token},
                headers={"content-type": "application/x-www-form-urlencoded"},
                timeout=10,
            )
            response.raise_for_status()
            Log.info("Google token revoked")
        except httpx.HTTPError as exc:
            Log.warning(f"Token revocation failed, signed out locally: {exc}")

    def service(self, name: str, version: str) -> Any:
        """Return a Google API service bound to the signed-in user."""
        if self._credentials is None:
            raise NotSignedInError("Sign in to Google first")
        key = (name, version)
        if key not in self._services:
            self._services[key] = build(
                name, version, credentials=self._credentials, cache_discovery=False
            )
        return self._services[key]

    def _load_cached(self) -> Credentials | None:
        if self._token_file is None or not self._token_file.exists():
            return None
        creds = Credentials.from_authorized_user_file(str(self._token_file), SCOPES)
        if creds.valid:
            return creds
        if creds.expired and creds.refresh_token:
            creds.refresh(Request())
            return creds
        return None

    def _run_consent_flow(self) -> Credentials:
        if not self._client_secrets_file.exists():
            raise AuthError(
                f"Client secrets file not found: {self._client_secrets_file}. "
                "Create an OAuth 2.0 Client ID (Desktop app) in Google Cloud Console "
                "and download its JSON."
            )
        flow = InstalledAppFlow.from_client_secrets_file(
            str(self._client_secrets_file), SCOPES
        )
        return flow.run_local_server(port=self._port, prompt="consent")

    def _fetch_profile(self) -> UserProfile:
        info = self.service("oauth2", "v2").userinfo().get().execute()
        return UserProfile(
            name=info.get("name", ""),
            email=info.get("email", ""),
            picture=info.get("picture", ""),
        )

    def _forget(self) -> None:
        self._credentials = None
        self._services.clear()
