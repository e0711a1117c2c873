"""
roster_admin.directory.models

Wire/domain models for employee records.

Responsibilities:
- Define `Employee` (store-assigned id) and `NewEmployee` (create payload).
- Enforce required-field presence; no format validation (email is free text).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

EMPLOYEE_FIELDS: tuple[str, ...] = ("name", "email", "position", "department")


class NewEmployee(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    position: str = Field(min_length=1)
    department: str = Field(min_length=1)


class Employee(NewEmployee):
    id: str = Field(min_length=1)


class LoginRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    token: str = Field(min_length=1)


# --- Module Notes -----------------------------------------------------------
# `extra="ignore"` lets form drafts carry UI-only keys without failing validation.
