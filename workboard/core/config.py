"""
Configuration helpers for the Workboard backend.

Routers/services read settings through get_settings() instead of fetching
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_dir: Path
    web_root: Path
    cors_origins: tuple[str, ...]
    admin_username: str
    admin_password: str
    admin_token: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _list(value: str | None, default: str) -> tuple[str, ...]:
        raw = value if value is not None else default
        return tuple(item.strip() for item in raw.split(",") if item.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        data_dir=Path(os.getenv("DATA_DIR") or ROOT / "data"),
        web_root=Path(os.getenv("WEB_ROOT") or ROOT / "web"),
        cors_origins=_list(os.getenv("CORS_ORIGINS"), "*"),
        admin_username=os.getenv("ADMIN_USERNAME", "admin"),
        admin_password=os.getenv("ADMIN_PASSWORD", "password"),
        admin_token=os.getenv("ADMIN_TOKEN", "fake_jwt_token_for_admin_demo"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
