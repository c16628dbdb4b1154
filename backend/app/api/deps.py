"""
Shared route dependencies: the auth client and the verified caller identity.
Identity is passed to handlers explicitly (Depends), never stored globally.
"""
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.errors import AuthenticationError, MSG_MISSING_TOKEN
from app.services.auth import AuthUser, SupabaseAuthClient

_bearer = HTTPBearer(auto_error=False)


def get_auth_client() -> SupabaseAuthClient:
    return SupabaseAuthClient()


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    auth_client: SupabaseAuthClient = Depends(get_auth_client),
) -> AuthUser:
    """Resolve the Authorization: Bearer token to an AuthUser; 401 when missing or rejected."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(MSG_MISSING_TOKEN)
    return auth_client.get_user(credentials.credentials)
