"""Client-side holder of the signed-in user's bearer credential."""
from typing import Dict, Optional


class AuthSession:
    """
    Bearer credential for outgoing requests.

    Constructed once by the application and passed to whatever needs it
    (the checkout flow, API clients) instead of being looked up globally.
    """

    def __init__(self, token: Optional[str] = None, user: Optional[dict] = None):
        self._token = token
        self._user = user

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token)

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def user(self) -> Optional[dict]:
        return self._user

    def sign_in(self, token: str, user: Optional[dict] = None) -> None:
        if not token:
            raise ValueError("token must be a non-empty string")
        self._token = token
        self._user = user

    def sign_out(self) -> None:
        self._token = None
        self._user = None

    def auth_headers(self) -> Dict[str, str]:
        """Authorization header for the current user (empty when signed out)."""
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}
