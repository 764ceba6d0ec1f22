from __future__ import annotations

from itertools import islice

from employeedb.core.rwlock import ReadWriteLock
from employeedb.models.employee import Employee


class EmployeeAlreadyExistsError(ValueError):
    def __init__(self, employee_id: int) -> None:
        super().__init__(f"employee with ID {employee_id} already exists")
        self.employee_id = employee_id


class EmployeeStore:
    """In-memory employee repository keyed by employee id.

    Listing order is insertion order. Updating a record keeps its position;
    deleting and re-creating it moves it to the end.
    """

    def __init__(self) -> None:
        self.lock = ReadWriteLock()
        self._employees: dict[int, Employee] = {}

    def create(self, employee: Employee) -> None:
        with self.lock.write_locked():
            if employee.id in self._employees:
                raise EmployeeAlreadyExistsError(employee.id)
            self._employees[employee.id] = employee

    def get_by_id(self, employee_id: int) -> tuple[Employee | None, bool]:
        with self.lock.read_locked():
            employee = self._employees.get(employee_id)
        return employee, employee is not None

    def update(self, employee: Employee) -> bool:
        with self.lock.write_locked():
            if employee.id not in self._employees:
                return False
            self._employees[employee.id] = employee
            return True

    def delete(self, employee_id: int) -> bool:
        with self.lock.write_locked():
            return self._employees.pop(employee_id, None) is not None

    def list_all(self) -> list[Employee]:
        with self.lock.read_locked():
            return list(self._employees.values())

    def list_paginated(self, offset: int, limit: int) -> list[Employee]:
        offset = max(offset, 0)
        limit = max(limit, 0)
        if limit == 0:
            return []
        with self.lock.read_locked():
            size = len(self._employees)
            if offset >= size:
                return []
            stop = min(offset + limit, size)
            return list(islice(self._employees.values(), offset, stop))

    def count(self) -> int:
        with self.lock.read_locked():
            return len(self._employees)

    def clear(self) -> None:
        with self.lock.write_locked():
            self._employees.clear()
