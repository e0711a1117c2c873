"""
roster_admin.session.storage

Token persistence backends.

Responsibilities:
- Define the single-slot `TokenStorage` protocol.
- Provide a JSON-file backend and an in-memory backend.
- Raise `TokenStorageError` on any I/O or decoding failure; callers decide policy.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Protocol


class TokenStorageError(Exception):
    pass


class TokenStorage(Protocol):
    def read(self) -> str | None: ...

    def write(self, token: str) -> None: ...

    def clear(self) -> None: ...


class MemoryTokenStorage:
    def __init__(self, token: str | None = None) -> None:
        self.token = token

    def read(self) -> str | None:
        return self.token

    def write(self, token: str) -> None:
        self.token = token

    def clear(self) -> None:
        self.token = None


class FileTokenStorage:
    """
    Keeps named slots in one JSON object on disk; only `slot` is touched.
    """

    def __init__(self, path: str | os.PathLike[str], *, slot: str = "authToken") -> None:
        self._path = Path(path)
        self._slot = slot

    def read(self) -> str | None:
        token = self._load().get(self._slot)
        if token is None:
            return None
        if not isinstance(token, str):
            raise TokenStorageError(f"slot {self._slot!r} does not hold a string")
        return token or None

    def write(self, token: str) -> None:
        slots = self._load()
        slots[self._slot] = token
        self._dump(slots)

    def clear(self) -> None:
        slots = self._load()
        if slots.pop(self._slot, None) is not None:
            self._dump(slots)

    def _load(self) -> dict[str, object]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError) as e:
            raise TokenStorageError(f"cannot read {self._path}: {e}") from e
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise TokenStorageError(f"corrupt session file {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise TokenStorageError(f"corrupt session file {self._path}")
        return data

    def _dump(self, slots: dict[str, object]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp.write_text(json.dumps(slots), encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise TokenStorageError(f"cannot write {self._path}: {e}") from e
