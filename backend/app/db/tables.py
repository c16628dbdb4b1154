"""
Single source of truth for database tables created by migration 001.

Use these names when writing raw SQL (e.g. TRUNCATE in scripts).
"""
# All tables that exist in the DB. Must match models and migrations.
ALL_TABLE_NAMES = (
    "users",
    "expert_profiles",
    "services",
    "availability",
    "bookings",
)

# Order for TRUNCATE / drop: children before parents.
TRUNCATE_ORDER = (
    "bookings",
    "availability",
    "services",
    "expert_profiles",
    "users",
)
