"""
roster_admin.devserver

Dev stub backend: the employee REST contract served over the local store.

Responsibilities:
- Give `HttpEmployeeDirectory` a real server to talk to in development and tests.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# This is not the production backend; it only mirrors its contract.
