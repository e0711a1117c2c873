"""
roster_admin.db

Persistence for the local employee store (async SQLAlchemy + aiosqlite).

Responsibilities:
- ORM model, engine/session helpers, schema bootstrap and repository.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Only `directory.local` imports from here; the HTTP backend never touches a database.
