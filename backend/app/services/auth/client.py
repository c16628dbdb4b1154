"""Supabase Auth client: turns a bearer token into an AuthUser or raises AuthenticationError."""
import logging

import httpx
import jwt

from app.core.errors import AuthenticationError, MSG_INVALID_SESSION
from app.services.auth.config import SupabaseAuthConfig
from app.services.auth.types import AuthUser

logger = logging.getLogger(__name__)


class SupabaseAuthClient:
    """
    Verify access tokens issued by Supabase Auth.
    With a JWT secret configured the HS256 signature is checked locally; otherwise
    GET /auth/v1/user is asked to resolve the token.
    """

    def __init__(
        self,
        config: SupabaseAuthConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or SupabaseAuthConfig()
        self._transport = transport

    def get_user(self, token: str) -> AuthUser:
        token = (token or "").strip()
        if not token:
            raise AuthenticationError(MSG_INVALID_SESSION)
        if not self._config.is_configured():
            logger.error("Supabase auth not configured. Set SUPABASE_JWT_SECRET or SUPABASE_URL + SUPABASE_ANON_KEY.")
            raise AuthenticationError(MSG_INVALID_SESSION)
        if self._config.verifies_locally():
            return self._decode(token)
        return self._fetch_user(token)

    def _decode(self, token: str) -> AuthUser:
        try:
            claims = jwt.decode(
                token,
                self._config.jwt_secret,
                algorithms=["HS256"],
                audience=self._config.jwt_audience,
            )
            return AuthUser.from_claims(claims)
        except (jwt.PyJWTError, ValueError) as e:
            logger.warning("Supabase token rejected: %s", e)
            raise AuthenticationError(MSG_INVALID_SESSION) from e

    def _fetch_user(self, token: str) -> AuthUser:
        url = f"{self._config.url}/auth/v1/user"
        try:
            with httpx.Client(timeout=self._config.timeout, transport=self._transport) as c:
                r = c.get(url, headers=self._config.headers(token))
        except httpx.HTTPError as e:
            logger.warning("Supabase auth request failed: %s", e)
            raise AuthenticationError(MSG_INVALID_SESSION) from e
        if not r.is_success:
            logger.warning("Supabase auth returned %s: %s", r.status_code, r.text[:200] if r.text else "")
            raise AuthenticationError(MSG_INVALID_SESSION)
        try:
            return AuthUser.from_claims(r.json())
        except ValueError as e:
            logger.warning("Supabase auth returned an unusable user: %s", e)
            raise AuthenticationError(MSG_INVALID_SESSION) from e
