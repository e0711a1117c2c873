"""
roster_admin.auth.jwt

Session token issuing and validation.

Responsibilities:
- Issue session tokens for an authenticated admin (HS256, embedded `exp`).
- Decode and validate tokens with strict claim requirements (iss/aud/exp/iat/sub).

Note:
- The client never inspects tokens; expiry lives in the token itself and is
  enforced by whoever validates it (local store or dev server).
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError

from roster_admin.settings import Settings


@dataclass(frozen=True, slots=True)
class JwtConfig:
    alg: str
    issuer: str
    audience: str
    secret: str
    ttl: timedelta = timedelta(hours=8)

    @classmethod
    def from_settings(cls, settings: Settings) -> JwtConfig:
        return cls(
            alg=settings.jwt_alg,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            secret=settings.jwt_secret,
            ttl=timedelta(minutes=settings.token_ttl_minutes),
        )


class JwtValidationError(Exception):
    pass


def issue_token(*, cfg: JwtConfig, subject: str, ttl: timedelta | None = None) -> str:
    now = datetime.now(tz=UTC)
    payload: dict[str, Any] = {
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "sub": subject,
        # jti keeps two logins within the same second distinguishable.
        "jti": uuid.uuid4().hex,
        "iat": int(now.timestamp()),
        "exp": int((now + (ttl or cfg.ttl)).timestamp()),
    }
    return jwt.encode(payload, cfg.secret, algorithm=cfg.alg)


def decode_and_validate(*, cfg: JwtConfig, token: str) -> dict[str, Any]:
    try:
        return jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={
                "require": ["exp", "iat", "iss", "aud", "sub"],
            },
        )
    except InvalidTokenError as e:
        raise JwtValidationError(str(e)) from e


# --- Module Notes -----------------------------------------------------------
# Token issuing is used by `directory.local.LocalEmployeeDirectory.authenticate`;
# validation guards every protected local operation and, through it, the dev server.
