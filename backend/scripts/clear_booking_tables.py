#!/usr/bin/env python3
"""
Completely clear all booking tables (bookings, availability, services, expert_profiles, users). Fast (TRUNCATE).
For local/dev databases only: cd backend && poetry run python scripts/clear_booking_tables.py
"""
import sys
from pathlib import Path

# backend/scripts/ -> backend/
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import text

from app.db.session import engine
from app.db.tables import TRUNCATE_ORDER


def main():
    tables = ", ".join(TRUNCATE_ORDER)
    print(f"Connecting to DB and truncating {tables} ...")
    with engine.connect() as conn:
        conn.execute(text(f"TRUNCATE TABLE {tables} RESTART IDENTITY CASCADE"))
        conn.commit()
    print("Done. All booking tables are empty.")


if __name__ == "__main__":
    main()
