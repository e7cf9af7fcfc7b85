"""
Authentication state for a user session.
Holds the bearer token handed over by the implicit grant flow.
"""

import urllib.parse
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Mapping, Optional

@dataclass
class AuthState:
    """Bearer token and its expiry."""
    access_token: Optional[str] = None
    expires_at: Optional[datetime] = None

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        """Check that a token is present and not yet expired."""
        if not self.access_token:
            return False
        if self.expires_at is None:
            return True
        return (now or datetime.now()) < self.expires_at

    @classmethod
    def from_callback(cls, params: Mapping[str, str], now: Optional[datetime] = None) -> 'AuthState':
        """
        Build auth state from the redirect parameters of the implicit grant.

        Args:
            params: Parsed ``access_token``/``expires_in`` redirect parameters
            now: Reference time for the expiry (defaults to now)

        Returns:
            AuthState for the returned token
        """
        if "access_token" not in params:
            raise ValueError("Callback parameters do not contain an access token")

        expires_in = int(params.get("expires_in", 3600))
        return cls(
            access_token=params["access_token"],
            expires_at=(now or datetime.now()) + timedelta(seconds=expires_in)
        )

    @classmethod
    def from_callback_url(cls, url: str, now: Optional[datetime] = None) -> 'AuthState':
        """Build auth state from the full redirect URL; the grant puts its parameters in the fragment."""
        fragment = urllib.parse.urlparse(url).fragment
        return cls.from_callback(dict(urllib.parse.parse_qsl(fragment)), now)

    @classmethod
    def from_expiry_timestamp(cls, access_token: str, expires_at: Optional[str] = None) -> 'AuthState':
        """
        Build auth state from a token and an ISO 8601 expiry timestamp.

        Timestamps with an offset are converted to local time. Without a
        timestamp the token is treated as non-expiring.
        """
        if expires_at is None:
            return cls(access_token=access_token)

        try:
            parsed = datetime.fromisoformat(expires_at)
        except ValueError:
            raise ValueError(f"Invalid token expiry timestamp: {expires_at!r}")

        if parsed.tzinfo is not None:
            parsed = parsed.astimezone().replace(tzinfo=None)
        return cls(access_token=access_token, expires_at=parsed)
