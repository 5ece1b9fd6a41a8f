from pydantic import BaseModel, Field
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv


_ROOT_DIR = Path(__file__).resolve().parents[2]
load_dotenv(_ROOT_DIR / ".env")
load_dotenv()  # fallback to current working directory


def _normalize_env(value: Optional[str], default: str) -> str:
    if value is None:
        return default
    cleaned = value.strip().lower()
    return cleaned or default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def _resolve_demo_password() -> Optional[str]:
    raw = os.getenv("SEED_DEMO_PASSWORD")
    if raw is None or not raw.strip():
        return None
    return raw


def _load_cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS")
    if raw is None or not raw.strip():
        return ["http://localhost:5173", "http://127.0.0.1:5173"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Settings(BaseModel):
    app_name: str = "Blog API"
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./blog.db")
    debug: bool = _env_bool("DEBUG", False)
    environment: str = _normalize_env(os.getenv("APP_ENV") or os.getenv("ENVIRONMENT"), "dev")
    seed_on_startup: bool = _env_bool("SEED_ON_STARTUP", True)
    # Demo accounts get no usable password unless this is set
    demo_password: Optional[str] = _resolve_demo_password()
    log_level: str = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    cors_origins: List[str] = Field(default_factory=_load_cors_origins)

    @property
    def is_production(self) -> bool:
        return self.environment in {"prod", "production"}


settings = Settings()
