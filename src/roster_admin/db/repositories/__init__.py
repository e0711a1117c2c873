"""
roster_admin.db.repositories

Repository classes wrapping an `AsyncSession`.
"""

# Package marker.
