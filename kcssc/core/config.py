import os
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_SIZE = 10 * 1024 * 1024  # 10 MB
DEFAULT_CACHE_TTL_SECONDS = 5 * 60


@dataclass(frozen=True)
class Settings:
    app_env: str

    # Database ("server" and "embedded" modes)
    db_enabled: bool
    database_url: Optional[str]

    # Uploads
    public_dir: str
    upload_dir: str
    storage_bucket: Optional[str]
    max_upload_size: int

    # Client data service
    api_base_url: Optional[str]
    use_mock_data: bool
    cache_ttl_seconds: int

    port: int = 3000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def backend_configured(self) -> bool:
        """True when the client data service should talk to a real API."""
        return bool(self.api_base_url) and not self.use_mock_data


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = value.strip()
    if len(cleaned) >= 2 and cleaned[0] == cleaned[-1] and cleaned[0] in ("'", '"'):
        cleaned = cleaned[1:-1].strip()
    return cleaned or None


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    value = _clean(os.getenv(name))
    return value if value is not None else default


def _getbool(name: str, default: bool) -> bool:
    value = _getenv(name)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes", "on")


def _getint(name: str, default: int) -> int:
    value = _getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {name}: {value!r}, using {default}")
        return default


def load_env_files(app_env: Optional[str] = None) -> Optional[str]:
    """
    Loads the environment-specific file (.env.development / .env.production),
    falling back to .env. Variables already set in the process win.

    Returns the path that was loaded, or None.
    """
    app_env = app_env or _getenv("APP_ENV", "development")
    env_file = ".env.production" if app_env == "production" else ".env.development"

    for candidate in (env_file, ".env"):
        path = os.path.join(os.getcwd(), candidate)
        if os.path.exists(path):
            load_dotenv(path, override=False)
            logger.info(f"Loaded environment from {path}")
            return path

    logger.warning(f"No {env_file} or .env file found in {os.getcwd()}, using process environment only")
    return None


def build_database_url() -> Optional[str]:
    """
    DATABASE_URL takes precedence; otherwise the URL is assembled from the
    individual DB_* variables when a host or password is present.
    """
    url = _getenv("DATABASE_URL")
    if url:
        if url.startswith("postgres://"):
            url = "postgresql://" + url[len("postgres://"):]
        return url

    host = _getenv("DB_HOST")
    password = _getenv("DB_PASSWORD")
    if not host and not password:
        return None

    user = _getenv("DB_USER", "postgres")
    port = _getenv("DB_PORT", "5432")
    name = _getenv("DB_NAME", "kcssc_db")
    credentials = f"{user}:{password}" if password else user
    url = f"postgresql://{credentials}@{host or 'localhost'}:{port}/{name}"
    if _getbool("DB_SSL", False):
        url += "?sslmode=require"
    return url


def get_settings() -> Settings:
    """
    Centralized config: this is the ONLY place env vars are read.
    """
    load_env_files()

    public_dir = _getenv("PUBLIC_DIR", "public") or "public"
    origins = _getenv("CORS_ORIGINS", "*") or "*"

    return Settings(
        app_env=_getenv("APP_ENV", "development") or "development",
        db_enabled=_getbool("DB_ENABLED", True),
        database_url=build_database_url(),
        public_dir=public_dir,
        upload_dir=_getenv("UPLOAD_DIR", os.path.join(public_dir, "uploads")) or os.path.join(public_dir, "uploads"),
        storage_bucket=_getenv("STORAGE_BUCKET"),
        max_upload_size=_getint("MAX_UPLOAD_SIZE", DEFAULT_MAX_UPLOAD_SIZE),
        api_base_url=_getenv("API_BASE_URL"),
        use_mock_data=_getbool("USE_MOCK_DATA", True),
        cache_ttl_seconds=_getint("CACHE_TTL_SECONDS", DEFAULT_CACHE_TTL_SECONDS),
        port=_getint("PORT", 3000),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )


@lru_cache(maxsize=1)
def get_cached_settings() -> Settings:
    return get_settings()
