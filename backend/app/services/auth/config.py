"""Supabase Auth config. Values from app settings (SUPABASE_URL, SUPABASE_ANON_KEY, SUPABASE_JWT_SECRET) or explicit args."""
from app.config import settings


class SupabaseAuthConfig:
    """Project URL, anon key and optional JWT secret for verifying access tokens."""

    __slots__ = ("url", "anon_key", "jwt_secret", "jwt_audience", "timeout")

    def __init__(
        self,
        *,
        url: str | None = None,
        anon_key: str | None = None,
        jwt_secret: str | None = None,
        jwt_audience: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.url = (url if url is not None else settings.supabase_url).strip().rstrip("/")
        self.anon_key = (anon_key if anon_key is not None else settings.supabase_anon_key).strip()
        self.jwt_secret = (jwt_secret if jwt_secret is not None else settings.supabase_jwt_secret).strip()
        self.jwt_audience = jwt_audience or settings.supabase_jwt_audience
        self.timeout = timeout or settings.auth_timeout_seconds

    def verifies_locally(self) -> bool:
        return bool(self.jwt_secret)

    def is_configured(self) -> bool:
        return self.verifies_locally() or bool(self.url and self.anon_key)

    def headers(self, token: str) -> dict[str, str]:
        return {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {token}",
        }
