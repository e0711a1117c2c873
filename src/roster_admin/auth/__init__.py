"""
roster_admin.auth

Authentication package.

Responsibilities:
- Session token (JWT) helpers and validation.
- Pluggable credential verification.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here depends on the client layer so the dev server can reuse it directly.
