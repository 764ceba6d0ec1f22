"""Shared fixtures for store, service and HTTP tests."""

import pytest
from fastapi.testclient import TestClient

from employeedb.main import create_app
from employeedb.models.employee import Employee
from employeedb.repositories.employee_store import EmployeeStore
from employeedb.services.employee_service import EmployeeService


@pytest.fixture
def store() -> EmployeeStore:
    """A fresh, empty store."""
    return EmployeeStore()


@pytest.fixture
def employee() -> Employee:
    return Employee(id=1, name="Shivangi", position="Software Engineer", salary=100000)


@pytest.fixture
def populated_store(store: EmployeeStore) -> EmployeeStore:
    """A store holding employees 1..25, created in id order."""
    for i in range(1, 26):
        store.create(Employee(id=i, name=f"Employee {i}", position="Engineer", salary=1000.0 * i))
    return store


@pytest.fixture
def service(store: EmployeeStore) -> EmployeeService:
    return EmployeeService(store=store)


@pytest.fixture
def client(store: EmployeeStore):
    """HTTP client bound to an app that owns ``store``."""
    with TestClient(create_app(store=store)) as test_client:
        yield test_client
