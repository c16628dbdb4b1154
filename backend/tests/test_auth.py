"""Bearer-token verification: local HS256 check and the remote /auth/v1/user call."""
import httpx
import pytest

from app.core.errors import AuthenticationError
from app.services.auth import AuthUser, SupabaseAuthClient, SupabaseAuthConfig
from factories import make_token


def _remote_client(handler) -> SupabaseAuthClient:
    config = SupabaseAuthConfig(url="https://proj.supabase.co/", anon_key="anon-key", jwt_secret="")
    return SupabaseAuthClient(config, transport=httpx.MockTransport(handler))


def test_missing_token_is_401(client):
    r = client.get("/api/bookings/user")

    assert r.status_code == 401
    assert r.json() == {"error": "Unauthorized: Missing token"}


def test_bad_signature_is_401(client):
    token = make_token("user-1", secret="someone-elses-secret")

    r = client.get("/api/bookings/user", headers={"Authorization": f"Bearer {token}"})

    assert r.status_code == 401
    assert r.json() == {"error": "Unauthorized: Invalid session"}


def test_local_decode_reads_identity():
    config = SupabaseAuthConfig(jwt_secret="test-jwt-secret")

    user = SupabaseAuthClient(config).get_user(make_token("abc", email="a@example.com", name="Ann"))

    assert (user.id, user.email, user.name) == ("abc", "a@example.com", "Ann")


def test_remote_lookup_sends_apikey_and_bearer():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["apikey"] = request.headers.get("apikey")
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(
            200, json={"id": "u-9", "email": "nine@example.com", "user_metadata": {"name": "Nina"}}
        )

    user = _remote_client(handler).get_user("opaque-token")

    assert seen == {
        "url": "https://proj.supabase.co/auth/v1/user",
        "apikey": "anon-key",
        "auth": "Bearer opaque-token",
    }
    assert (user.id, user.email, user.name) == ("u-9", "nine@example.com", "Nina")


def test_remote_rejection_raises():
    client = _remote_client(lambda request: httpx.Response(401, json={"msg": "invalid JWT"}))

    with pytest.raises(AuthenticationError) as exc_info:
        client.get_user("expired")
    assert exc_info.value.status_code == 401


def test_remote_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(AuthenticationError):
        _remote_client(handler).get_user("token")


def test_unconfigured_client_rejects():
    config = SupabaseAuthConfig(url="", anon_key="", jwt_secret="")

    with pytest.raises(AuthenticationError):
        SupabaseAuthClient(config).get_user("token")


def test_from_claims_requires_id():
    assert AuthUser.from_claims({"sub": "x", "email": "x@example.com"}).name is None
    with pytest.raises(ValueError):
        AuthUser.from_claims({"email": "x@example.com"})
