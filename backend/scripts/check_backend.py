#!/usr/bin/env python3
"""
Quick checks so the backend can start. Run from repo root or backend/:
  cd backend && python scripts/check_backend.py
"""
import os
import sys
from pathlib import Path

# Run from backend/
backend_dir = Path(__file__).resolve().parent.parent
os.chdir(backend_dir)
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))


def main():
    errors = []

    # 1) .env
    env_file = backend_dir / ".env"
    if not env_file.exists():
        errors.append("backend/.env missing. Set DATABASE_URL and SUPABASE_* there (or in the environment).")
    else:
        print("OK  .env exists")

    # 2) DB connection and schema
    try:
        from sqlalchemy import inspect, text

        from app.db.session import engine
        from app.db.tables import ALL_TABLE_NAMES

        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("OK  Database connection (DATABASE_URL)")
        missing = set(ALL_TABLE_NAMES) - set(inspect(engine).get_table_names())
        if missing:
            errors.append(f"Tables missing: {sorted(missing)}. Run: cd backend && alembic upgrade head")
            print("FAIL Tables missing:", sorted(missing))
        else:
            print("OK  All tables present")
    except Exception as e:
        errors.append(f"Database: {e}")
        print("FAIL Database:", e)

    # 3) Auth config
    from app.services.auth import SupabaseAuthConfig

    auth = SupabaseAuthConfig()
    if not auth.is_configured():
        errors.append("Auth not configured. Set SUPABASE_JWT_SECRET, or SUPABASE_URL and SUPABASE_ANON_KEY.")
        print("FAIL Supabase auth config")
    else:
        mode = "local JWT secret" if auth.verifies_locally() else "remote /auth/v1/user"
        print(f"OK  Supabase auth ({mode})")

    # 4) App import (catches missing deps, bad imports)
    try:
        from app.main import app  # noqa: F401
        print("OK  App import (app.main)")
    except Exception as e:
        errors.append(f"App import: {e}")
        print("FAIL App import:", e)

    if errors:
        print("\n---")
        for e in errors:
            print("•", e)
        print("\nThen start backend: cd backend && uvicorn app.main:app --reload --port 8000")
        return 1

    print("\nAll checks passed. Start with: cd backend && uvicorn app.main:app --reload --port 8000")
    return 0


if __name__ == "__main__":
    sys.exit(main())
