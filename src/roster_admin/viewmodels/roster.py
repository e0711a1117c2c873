"""
roster_admin.viewmodels.roster

Dashboard state: the employee cache and everything that reconciles it.

Responsibilities:
- Own the roster cache; replace it wholesale on every successful refresh.
- Let only the last-issued refresh write the cache (monotonic sequence).
- Project the cache through the search term.
- Drive the add/edit and delete-confirmation state machines.
- Route every directory failure to the notification queue.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

from roster_admin.directory.base import EmployeeDirectory
from roster_admin.directory.errors import DirectoryError, Unauthenticated
from roster_admin.directory.models import EMPLOYEE_FIELDS, Employee, NewEmployee
from roster_admin.events import Listeners
from roster_admin.notifications.queue import NotificationQueue
from roster_admin.observability.logging import get_logger
from roster_admin.session.store import SessionStore

log = get_logger(__name__)


class FormMode(enum.StrEnum):
    closed = "CLOSED"
    creating = "CREATING"
    editing = "EDITING"


@dataclass(frozen=True, slots=True)
class FormState:
    mode: FormMode = FormMode.closed
    editing: Employee | None = None
    # Values as the user entered them; kept across a failed submit.
    draft: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_open(self) -> bool:
        return self.mode is not FormMode.closed

    @property
    def title(self) -> str:
        return "Edit Employee" if self.mode is FormMode.editing else "Add New Employee"


class DeletePhase(enum.StrEnum):
    idle = "IDLE"
    pending_confirmation = "PENDING_CONFIRMATION"


@dataclass(frozen=True, slots=True)
class DeleteState:
    phase: DeletePhase = DeletePhase.idle
    target: Employee | None = None


class ConfirmationRequired(Exception):
    pass


def filter_employees(employees: Iterable[Employee], term: str) -> list[Employee]:
    """
    Case-insensitive substring match on name, email, position and department.
    An empty term matches everything.
    """

    needle = term.lower()
    if not needle:
        return list(employees)
    return [
        e
        for e in employees
        if any(needle in getattr(e, name).lower() for name in EMPLOYEE_FIELDS)
    ]


def _blank_draft() -> dict[str, str]:
    return {name: "" for name in EMPLOYEE_FIELDS}


def _validation_message(e: ValidationError) -> str:
    missing = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
    if not missing:
        return "Please fill in all required fields."
    return f"Please fill in all required fields: {', '.join(missing)}."


class RosterViewModel:
    def __init__(
        self,
        *,
        directory: EmployeeDirectory,
        session: SessionStore,
        notifications: NotificationQueue,
    ) -> None:
        self._directory = directory
        self._session = session
        self._notifications = notifications
        self._listeners: Listeners[RosterViewModel] = Listeners()

        self._employees: list[Employee] = []
        self._search_term = ""
        self._loading = False
        self._error: str | None = None
        self._refresh_seq = 0

        self._form = FormState()
        self._delete = DeleteState()
        self._submitting = False
        self._deleting = False

    # -- read-only state ----------------------------------------------------

    @property
    def employees(self) -> tuple[Employee, ...]:
        return tuple(self._employees)

    @property
    def visible(self) -> list[Employee]:
        return filter_employees(self._employees, self._search_term)

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def form(self) -> FormState:
        return self._form

    @property
    def delete_state(self) -> DeleteState:
        return self._delete

    @property
    def submitting(self) -> bool:
        return self._submitting

    @property
    def deleting(self) -> bool:
        return self._deleting

    @property
    def empty_message(self) -> str | None:
        if not self._employees:
            return "No employees found. Add one to get started!"
        if not self.visible:
            return f'No employees found matching "{self._search_term}".'
        return None

    def subscribe(self, listener: Callable[[RosterViewModel], None]) -> Callable[[], None]:
        return self._listeners.add(listener)

    # -- list ---------------------------------------------------------------

    async def refresh(self) -> bool:
        self._refresh_seq += 1
        seq = self._refresh_seq
        self._loading = True
        self._emit()

        try:
            employees = await self._directory.list(self._session.token)
        except DirectoryError as e:
            if seq != self._refresh_seq:
                log.info("refresh_superseded", seq=seq, error=e.message)
                return False
            # Stale-but-available: the previous cache stays visible.
            self._loading = False
            self._error = e.message
            self._report(e)
            self._emit()
            return False

        if seq != self._refresh_seq:
            log.info("refresh_superseded", seq=seq)
            return False

        self._employees = list(employees)
        self._error = None
        self._loading = False
        self._emit()
        return True

    def search(self, term: str) -> list[Employee]:
        self._search_term = term
        self._emit()
        return self.visible

    def reset(self) -> None:
        """
        Drop every piece of dashboard state (used when the session ends).
        In-flight refreshes are disregarded when they complete.
        """

        self._refresh_seq += 1
        self._employees = []
        self._search_term = ""
        self._loading = False
        self._error = None
        self._form = FormState()
        self._delete = DeleteState()
        self._emit()

    # -- add / edit ---------------------------------------------------------

    def open_create(self) -> None:
        self._form = FormState(mode=FormMode.creating, draft=_blank_draft())
        self._emit()

    def open_edit(self, employee: Employee) -> None:
        self._form = FormState(
            mode=FormMode.editing, editing=employee, draft=employee.model_dump()
        )
        self._emit()

    def cancel_form(self) -> None:
        self._form = FormState()
        self._emit()

    async def submit(self, data: Mapping[str, Any] | BaseModel) -> bool:
        if self._submitting:
            log.warning("submit_ignored", reason="already_submitting")
            return False

        values = dict(data.model_dump() if isinstance(data, BaseModel) else data)
        employee_id = values.get("id") or None
        self._keep_draft(values, employee_id)

        try:
            payload = (
                Employee.model_validate(values)
                if employee_id
                else NewEmployee.model_validate(values)
            )
        except ValidationError as e:
            self._notifications.error(_validation_message(e))
            return False

        self._submitting = True
        self._emit()
        try:
            if employee_id:
                await self._directory.update(self._session.token, employee_id, payload)
                message = "Employee updated successfully."
            else:
                await self._directory.create(self._session.token, payload)
                message = "Employee added successfully."
        except DirectoryError as e:
            self._report(e)
            return False
        finally:
            self._submitting = False
            self._emit()

        self._form = FormState()
        self._notifications.success(message)
        # Full resync instead of patching the cache with the returned record.
        await self.refresh()
        return True

    def _keep_draft(self, values: dict[str, Any], employee_id: str | None) -> None:
        form = self._form
        if not form.is_open:
            editing = next((e for e in self._employees if e.id == employee_id), None)
            form = FormState(
                mode=FormMode.editing if employee_id else FormMode.creating,
                editing=editing,
            )
        self._form = FormState(mode=form.mode, editing=form.editing, draft=dict(values))

    # -- delete -------------------------------------------------------------

    def request_remove(self, employee: Employee) -> None:
        if self._deleting:
            return
        self._delete = DeleteState(phase=DeletePhase.pending_confirmation, target=employee)
        self._emit()

    def cancel_remove(self) -> None:
        if self._deleting:
            return
        self._delete = DeleteState()
        self._emit()

    async def remove(self, employee_id: str) -> bool:
        pending = self._delete
        if (
            pending.phase is not DeletePhase.pending_confirmation
            or pending.target is None
            or pending.target.id != employee_id
        ):
            raise ConfirmationRequired(f"deletion of {employee_id!r} was not confirmed")
        if self._deleting:
            log.warning("remove_ignored", reason="already_deleting")
            return False

        self._deleting = True
        self._emit()
        try:
            await self._directory.delete(self._session.token, employee_id)
        except DirectoryError as e:
            self._report(e)
            return False
        finally:
            self._deleting = False
            self._delete = DeleteState()
            self._emit()

        self._notifications.success("Employee deleted successfully.")
        await self.refresh()
        return True

    # -- helpers ------------------------------------------------------------

    def _report(self, e: DirectoryError) -> None:
        log.info("directory_error", kind=type(e).__name__, message=e.message)
        self._notifications.error(e.message)
        if isinstance(e, Unauthenticated) and self._session.is_authenticated:
            self._session.logout()

    def _emit(self) -> None:
        self._listeners.notify(self)


# --- Module Notes -----------------------------------------------------------
# The view must disable the submit/confirm controls while `submitting`/`deleting`
# is set; the duplicate-request guards here are the backstop.
