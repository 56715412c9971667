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


def _resolve_hash_rounds() -> int:
    raw = os.getenv("PASSWORD_HASH_ROUNDS")
    if raw is None or not raw.strip():
        return 12
    try:
        rounds = int(raw)
    except ValueError:
        return 12
    # bcrypt only accepts cost factors in this range
    return min(max(rounds, 4), 31)


def _load_cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS")
    if not raw:
        return ["http://localhost:5173", "http://127.0.0.1:5173"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Settings(BaseModel):
    app_name: str = os.getenv("APP_NAME", "CreativaHub")
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./creativahub.db")
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    environment: str = _normalize_env(os.getenv("APP_ENV") or os.getenv("ENVIRONMENT"), "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    password_hash_rounds: int = _resolve_hash_rounds()
    seed_demo_data: bool = _env_bool("SEED_DEMO_DATA", True)
    default_admin_email: str = os.getenv("DEFAULT_ADMIN_EMAIL", "admin@creativahub.dev")
    default_admin_password: str = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123")
    cors_origins: List[str] = Field(default_factory=_load_cors_origins)

    @property
    def is_production(self) -> bool:
        return self.environment in {"prod", "production"}


settings = Settings()
