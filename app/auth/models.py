from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UserProfile:
    """Signed-in Google user as returned by the userinfo endpoint."""

    name: str = ""
    email: str = ""
    picture: str = ""


@dataclass(frozen=True)
class SignInResult:
    """Credentials obtained from the consent flow, plus the user's profile."""

    credentials: Any
    profile: UserProfile
