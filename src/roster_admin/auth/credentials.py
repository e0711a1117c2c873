"""
roster_admin.auth.credentials

Credential verification for the login operation.

Responsibilities:
- Define the `CredentialVerifier` seam used by directory implementations.
- Provide the reference verifier accepting a single fixed admin credential.
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass, field
from typing import Protocol


class CredentialVerifier(Protocol):
    def verify(self, username: str, password: str) -> bool: ...


@dataclass(frozen=True, slots=True)
class FixedCredentialVerifier:
    """
    Accepts exactly one username/password pair.
    """

    username: str = "admin"
    password: str = field(default="password", repr=False)

    def verify(self, username: str, password: str) -> bool:
        # Compare both halves even when the first one fails.
        user_ok = hmac.compare_digest(username.encode(), self.username.encode())
        password_ok = hmac.compare_digest(password.encode(), self.password.encode())
        return user_ok and password_ok


# --- Module Notes -----------------------------------------------------------
# A real user store only has to satisfy `CredentialVerifier`; callers of
# `authenticate` do not change.
