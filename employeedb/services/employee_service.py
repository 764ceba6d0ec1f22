from __future__ import annotations

import logging

from fastapi import HTTPException, status

from employeedb.models.employee import Employee
from employeedb.repositories.employee_store import EmployeeAlreadyExistsError, EmployeeStore


logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, store: EmployeeStore) -> None:
        self.store = store

    def create_employee(self, payload: Employee) -> Employee:
        try:
            self.store.create(payload)
        except EmployeeAlreadyExistsError as exc:
            logger.warning("Rejected duplicate employee id=%s", payload.id)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

        logger.info("Created employee id=%s", payload.id)
        return payload

    def get_employee(self, employee_id: int) -> Employee:
        employee, found = self.store.get_by_id(employee_id)
        if not found:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
        return employee

    def update_employee(self, payload: Employee) -> Employee:
        if not self.store.update(payload):
            logger.warning("Update for unknown employee id=%s", payload.id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")

        logger.info("Updated employee id=%s", payload.id)
        return payload

    def delete_employee(self, employee_id: int) -> None:
        if not self.store.delete(employee_id):
            logger.warning("Delete for unknown employee id=%s", employee_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")

        logger.info("Deleted employee id=%s", employee_id)

    def list_employees(self) -> list[Employee]:
        return self.store.list_all()

    def list_page(self, page: int, per_page: int) -> list[Employee]:
        offset = (page - 1) * per_page
        return self.store.list_paginated(offset, per_page)
