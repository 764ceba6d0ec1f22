import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from employeedb.api.routers.employees import router as employees_router
from employeedb.core.config import settings
from employeedb.core.logging import configure_logging
from employeedb.repositories.employee_store import EmployeeStore
from employeedb.services.employee_service import EmployeeService


logger = logging.getLogger(__name__)


async def invalid_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [{"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request body", "errors": errors},
    )


def create_app(store: EmployeeStore | None = None) -> FastAPI:
    """Build the application around its own employee store.

    Each app owns exactly one store, created here unless one is passed in,
    and clears it on shutdown.
    """
    configure_logging()

    employee_store = store if store is not None else EmployeeStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("%s starting with %d employees", settings.app_name, employee_store.count())
        yield
        employee_store.clear()
        logger.info("%s stopped", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=settings.api_version,
        description="In-memory employee records with CRUD and paginated listing.",
        lifespan=lifespan,
    )
    app.state.employee_store = employee_store
    app.state.employee_service = EmployeeService(store=employee_store)

    app.add_exception_handler(RequestValidationError, invalid_request_handler)

    @app.get("/")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": settings.app_name}

    app.include_router(employees_router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
