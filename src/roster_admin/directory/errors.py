"""
roster_admin.directory.errors

Error taxonomy exposed by every employee directory implementation.

Responsibilities:
- Give callers a closed set of failure kinds with display-ready messages.
- Carry the HTTP status a failure maps to (used by the dev server).
"""

from __future__ import annotations


class DirectoryError(Exception):
    status_code: int = 500
    default_message: str = "An unknown error occurred."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(DirectoryError):
    status_code = 401
    default_message = "Authentication error. Please log in again."


class InvalidCredentials(DirectoryError):
    status_code = 401
    default_message = "Invalid username or password."


class NotFound(DirectoryError):
    status_code = 404
    default_message = "Employee not found."


class TransportError(DirectoryError):
    """
    Network or storage failure, including malformed responses.
    """

    status_code = 502
    default_message = "Could not reach the employee directory."


# --- Module Notes -----------------------------------------------------------
# The view-models only ever read `.message`; the classes drive control flow
# (e.g. `Unauthenticated` ends the session).
