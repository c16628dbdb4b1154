"""Bearer-token verification delegated to Supabase Auth."""
from app.services.auth.client import SupabaseAuthClient
from app.services.auth.config import SupabaseAuthConfig
from app.services.auth.types import AuthUser

__all__ = ["AuthUser", "SupabaseAuthClient", "SupabaseAuthConfig"]
