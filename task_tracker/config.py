"""
Configuration for the Task Tracker
Settings are read from TASKS_* environment variables, with a local .env loaded first
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKS"

PACKAGE_DIR = Path(__file__).resolve().parent
BUNDLED_DATA_DIR = PACKAGE_DIR / "data"

STORAGE_BACKENDS = ("json", "sqlite")
ID_SCHEMES = ("uuid", "sequential")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple, default: str) -> str:
    value = _env(name, default).lower()
    if value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}, got {value!r}")
    return value


@dataclass(frozen=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Optional[Path]

    # ---- HTTP server ----
    host: str
    port: int

    # ---- Storage ----
    data_dir: Path
    storage_backend: str
    tasks_file: Path
    tasks_db_path: Path
    id_scheme: str
    save_retries: int
    save_retry_delay_seconds: float

    # ---- Reference data ----
    users_file: Path
    categories_file: Path

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv(find_dotenv(usecwd=True), override=False)

        log_dir_raw = _env(_k("LOG_DIR"))
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task_tracker"))

        return Settings(
            app_name=_env(_k("APP_NAME"), "Task Tracker"),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
            log_dir=Path(log_dir_raw).expanduser() if log_dir_raw else None,
            host=_env(_k("HOST"), "127.0.0.1"),
            port=_env_int(_k("PORT"), 3000),
            data_dir=data_dir,
            storage_backend=_env_choice(_k("STORAGE_BACKEND"), STORAGE_BACKENDS, "json"),
            tasks_file=_env_path(_k("FILE"), data_dir / "tasks.json"),
            tasks_db_path=_env_path(_k("DB_PATH"), data_dir / "tasks.sqlite3"),
            id_scheme=_env_choice(_k("ID_SCHEME"), ID_SCHEMES, "uuid"),
            save_retries=max(0, _env_int(_k("SAVE_RETRIES"), 2)),
            save_retry_delay_seconds=max(0.0, _env_float(_k("SAVE_RETRY_DELAY"), 0.05)),
            users_file=_env_path(_k("USERS_FILE"), BUNDLED_DATA_DIR / "users.json"),
            categories_file=_env_path(_k("CATEGORIES_FILE"), BUNDLED_DATA_DIR / "categories.json"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


__all__ = ["Settings", "get_settings", "STORAGE_BACKENDS", "ID_SCHEMES"]
