import os
from dataclasses import dataclass, field

from dotenv import load_dotenv
from sqlalchemy.engine import URL

DEFAULT_JWT_SECRET_KEY = "change-me"


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    return int(value)


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class AppConfig:
    """Process-wide settings, built once at startup and handed to the app."""

    database_url: str
    app_env: str = "development"
    jwt_secret_key: str = DEFAULT_JWT_SECRET_KEY
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 7
    bcrypt_rounds: int = 10
    server_port: int = 3000
    sql_echo: bool = False
    cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:3000"])


def build_database_url(environ: dict) -> str:
    if environ.get("DATABASE_URL"):
        return environ["DATABASE_URL"]

    url = URL.create(
        "postgresql+psycopg2",
        username=environ.get("USER", "postgres"),
        password=environ.get("PASSWORD") or None,
        host=environ.get("HOST", "localhost"),
        port=_get_int(environ.get("DATABASE_PORT"), 5432),
        database=environ.get("DATABASE", "coursehub"),
    )
    return url.render_as_string(hide_password=False)


def load_config(environ: dict | None = None) -> AppConfig:
    if environ is None:
        load_dotenv()
        environ = dict(os.environ)

    return AppConfig(
        database_url=build_database_url(environ),
        app_env=environ.get("APP_ENV", "development"),
        jwt_secret_key=environ.get("JWT_SECRET_KEY", DEFAULT_JWT_SECRET_KEY),
        jwt_algorithm=environ.get("JWT_ALGORITHM", "HS256"),
        jwt_expires_days=_get_int(environ.get("JWT_EXPIRES_DAYS"), 7),
        bcrypt_rounds=_get_int(environ.get("BCRYPT_ROUNDS"), 10),
        server_port=_get_int(environ.get("SERVER_PORT"), 3000),
        sql_echo=_get_bool(environ.get("SQL_ECHO"), default=False),
        cors_origins=_get_list(environ.get("CORS_ORIGINS"), ["http://localhost:3000"]),
    )


def validate_runtime_config(config: AppConfig) -> None:
    if config.app_env.lower() == "production" and config.jwt_secret_key == DEFAULT_JWT_SECRET_KEY:
        raise RuntimeError("JWT_SECRET_KEY must be set in production.")
