"""
Runtime settings read from the process environment.

Values are looked up on every call so tests (and scripts) can change the
environment without reloading modules. `load_env_file()` pulls `config.env`
into the environment once per process; real environment variables win.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_CONFIG_ENV = "config.env"


@dataclass(frozen=True)
class DatabaseSettings:
    host: str
    port: int
    user: str
    password: str
    database: str
    ssl: bool


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def config_env_path() -> Path:
    return Path(_env_str("CONFIG_ENV_PATH", DEFAULT_CONFIG_ENV))


def load_env_file(path: Path | None = None) -> bool:
    """
    Load key=value pairs from the config file without overriding the environment.
    Returns False when the file does not exist.
    """
    target = path or config_env_path()
    if not target.is_file():
        return False
    return load_dotenv(target, override=False)


def app_env() -> str:
    return _env_str("APP_ENV", "production")


def deploy_platform() -> str:
    return _env_str("DEPLOY_PLATFORM", "Vercel")


def service_name() -> str:
    return _env_str("SERVICE_NAME", "MR-ROBOT Computer Repair")


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def database_url() -> str:
    return os.environ.get("DATABASE_URL", "").strip()


def database_settings() -> DatabaseSettings:
    # Fallbacks are local-development values only; deployments set DB_*.
    return DatabaseSettings(
        host=_env_str("DB_HOST", "localhost"),
        port=_env_int("DB_PORT", 5432),
        user=_env_str("DB_USER", "postgres"),
        password=os.environ.get("DB_PASSWORD", ""),
        database=_env_str("DB_NAME", "website"),
        ssl=app_env() == "production",
    )


def pool_max_size() -> int:
    return max(1, _env_int("DB_POOL_MAX", 10))


def admin_name() -> str:
    return _env_str("ADMIN_NAME", "admin")


def admin_email() -> str:
    return _env_str("ADMIN_EMAIL", "admin@example.com")


def admin_password_hash() -> str:
    return os.environ.get("ADMIN_PASSWORD_HASH", "").strip()


def admin_password() -> str:
    return os.environ.get("ADMIN_PASSWORD", "")


def frontend_build_dir() -> Path:
    return Path(_env_str("FRONTEND_BUILD_DIR", "build"))


def frontend_port() -> int:
    return _env_int("PORT", 3000)
