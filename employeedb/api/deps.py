from fastapi import Request

from employeedb.services.employee_service import EmployeeService


def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service
