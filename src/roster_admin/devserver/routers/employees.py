"""
roster_admin.devserver.routers.employees

Employee CRUD endpoints.

Responsibilities:
- Serve list/create/update/delete under `/employees` with bearer auth.
- Delegate semantics (id assignment, merge, NotFound) to `LocalEmployeeDirectory`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from roster_admin.devserver.deps import bearer_token, directory_dep
from roster_admin.directory.local import LocalEmployeeDirectory
from roster_admin.directory.models import Employee, NewEmployee

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[Employee])
async def list_employees(
    token: str | None = Depends(bearer_token),
    directory: LocalEmployeeDirectory = Depends(directory_dep),
) -> list[Employee]:
    return await directory.list(token)


@router.post("", response_model=Employee, status_code=HTTP_201_CREATED)
async def create_employee(
    body: NewEmployee,
    token: str | None = Depends(bearer_token),
    directory: LocalEmployeeDirectory = Depends(directory_dep),
) -> Employee:
    return await directory.create(token, body)


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: str,
    body: NewEmployee,
    token: str | None = Depends(bearer_token),
    directory: LocalEmployeeDirectory = Depends(directory_dep),
) -> Employee:
    # The path id wins; any id in the body is ignored by the model.
    return await directory.update(token, employee_id, body)


@router.delete("/{employee_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    token: str | None = Depends(bearer_token),
    directory: LocalEmployeeDirectory = Depends(directory_dep),
) -> Response:
    await directory.delete(token, employee_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
