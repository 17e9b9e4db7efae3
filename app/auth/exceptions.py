class AuthError(Exception):
    """Raised when signing in to Google fails for a reason other than user cancellation."""


class NotSignedInError(AuthError):
    """Raised when a Google service is requested before signing in."""
