import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError

from employeedb.api.deps import get_employee_service
from employeedb.core.config import settings
from employeedb.models.employee import DeleteRequest, Employee
from employeedb.services.employee_service import EmployeeService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["Employees"])

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_employee_id(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid employee ID") from exc
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid employee ID")
    return value


def _positive_int_or_default(raw: Optional[str], default: int) -> int:
    # anything but a positive signed 64-bit integer falls back to the default
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if value < 1 or value > _INT64_MAX:
        return default
    return value


async def _read_delete_id(request: Request) -> int:
    body = await request.body()
    try:
        payload = DeleteRequest.model_validate_json(body)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid request body") from exc
    return payload.delete_id


@router.get("")
def get_employees(
    employee_id: Optional[str] = Query(default=None, alias="id"),
    service: EmployeeService = Depends(get_employee_service),
) -> Employee | list[Employee]:
    if employee_id:
        return service.get_employee(_parse_employee_id(employee_id))
    return service.list_employees()


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: Employee,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    return service.create_employee(payload)


@router.put("", response_model=Employee)
def update_employee(
    payload: Employee,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    return service.update_employee(payload)


@router.delete("")
async def delete_employee(
    request: Request,
    employee_id: Optional[str] = Query(default=None, alias="id"),
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    if employee_id:
        target_id = _parse_employee_id(employee_id)
    else:
        target_id = await _read_delete_id(request)

    await run_in_threadpool(service.delete_employee, target_id)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/all")
def list_employees_page(
    page: Optional[str] = Query(default=None),
    per_page: Optional[str] = Query(default=None, alias="perPage"),
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    page_number = _positive_int_or_default(page, 1)
    page_size = _positive_int_or_default(per_page, settings.default_page_size)

    employees = service.list_page(page_number, page_size)

    try:
        body = json.dumps(jsonable_encoder(employees), indent=4)
    except (TypeError, ValueError) as exc:
        logger.exception("Failed to encode employee page %s", page_number)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to format response",
        ) from exc

    return Response(content=body, media_type="application/json")
