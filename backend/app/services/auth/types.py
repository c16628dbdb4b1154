"""Identity returned by the auth provider once a bearer token is verified."""
from typing import Any


class AuthUser:
    """Opaque identity: provider user id, email and display name (from user_metadata.name)."""

    __slots__ = ("id", "email", "name")

    def __init__(self, *, id: str, email: str, name: str | None = None):
        self.id = id
        self.email = email
        self.name = name

    def __repr__(self) -> str:
        return f"AuthUser(id={self.id!r}, email={self.email!r})"

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "AuthUser":
        """Build from a Supabase user object or JWT claims (id or sub; user_metadata.name)."""
        if not isinstance(claims, dict):
            raise ValueError("identity payload is not an object")
        user_id = claims.get("id") or claims.get("sub")
        if not user_id:
            raise ValueError("identity has no user id")
        metadata = claims.get("user_metadata") or {}
        name = metadata.get("name") or metadata.get("full_name") if isinstance(metadata, dict) else None
        return cls(id=str(user_id), email=claims.get("email") or "", name=name)
