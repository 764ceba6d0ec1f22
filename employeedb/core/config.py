from dataclasses import dataclass
from pathlib import Path
import os


def _optional_path(name: str) -> Path | None:
    raw = os.getenv(name, "").strip()
    return Path(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    app_name: str = os.getenv("EMPLOYEEDB_APP_NAME", "Employee Records Service")
    api_version: str = "1.0.0"
    host: str = os.getenv("EMPLOYEEDB_HOST", "0.0.0.0")
    port: int = int(os.getenv("EMPLOYEEDB_PORT", "8080"))
    log_level: str = os.getenv("EMPLOYEEDB_LOG_LEVEL", "INFO")
    log_dir: Path | None = _optional_path("EMPLOYEEDB_LOG_DIR")
    default_page_size: int = int(os.getenv("EMPLOYEEDB_DEFAULT_PAGE_SIZE", "10"))


settings = Settings()
