"""
roster_admin.directory

Employee directory service: one protocol, swappable backends.

Responsibilities:
- `base`: the capability-set protocol and the token precondition.
- `http`: remote REST gateway (httpx).
- `local`: persistent SQLite-backed mock.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Backends are selected in `roster_admin.app.build_directory`; nothing else
# branches on which one is active.
