# gamevault/config.py

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv


DEFAULT_RAWG_BASE_URL = "https://api.rawg.io/api"
DEFAULT_ALLOWED_ORIGIN = "http://localhost:5173"


def _env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    """
    Application settings, read once at startup and passed explicitly
    to every component that needs them.
    """
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    rawg_api_key: str = ""
    rawg_base_url: str = DEFAULT_RAWG_BASE_URL
    rawg_page_size: int = 40
    upstream_timeout: float = 5.0

    database_url: str = "sqlite:///./gamevault.db"
    bcrypt_rounds: int = 10

    cookie_secure: bool = False
    allowed_origins: tuple[str, ...] = field(default=(DEFAULT_ALLOWED_ORIGIN,))

    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3000


def load_settings() -> Settings:
    load_dotenv()

    secret = os.getenv("JWT_SECRET")
    if not secret:
        raise RuntimeError("JWT_SECRET is not set")

    return Settings(
        jwt_secret=secret,
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        access_token_expire_minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")),
        rawg_api_key=os.getenv("RAWG_KEY", ""),
        rawg_base_url=os.getenv("RAWG_BASE_URL", DEFAULT_RAWG_BASE_URL).rstrip("/"),
        rawg_page_size=int(os.getenv("RAWG_PAGE_SIZE", "40")),
        upstream_timeout=float(os.getenv("UPSTREAM_TIMEOUT", "5")),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./gamevault.db"),
        bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "10")),
        cookie_secure=_env_bool("COOKIE_SECURE"),
        allowed_origins=tuple(
            origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGIN).split(",") if origin.strip()
        ),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "3000")),
    )
