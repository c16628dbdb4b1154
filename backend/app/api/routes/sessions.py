"""
Session endpoint. Login happens client-side against Supabase; the API only reads bearer tokens.
"""
from fastapi import APIRouter

router = APIRouter()


@router.post("/sessions")
def create_session() -> dict:
    """Kept for clients that post after login; there is no server-side session to create."""
    return {"success": True, "message": "Authentication handled client-side or via Authorization header."}
