"""
roster_admin.observability

Logging and request-context helpers.

Responsibilities:
- structlog configuration shared by the client layer and the dev server.
"""

# Package marker.
