from datetime import datetime, timedelta, timezone

import jwt

from coursehub.core.config import AppConfig


def create_access_token(
    user_id: int,
    config: AppConfig,
    expires_delta: timedelta | None = None,
) -> str:
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (expires_delta if expires_delta is not None else timedelta(days=config.jwt_expires_days))
    payload = {"id": user_id, "exp": expire, "iat": issued_at}
    return jwt.encode(payload, config.jwt_secret_key, algorithm=config.jwt_algorithm)


def decode_access_token(token: str, config: AppConfig) -> dict:
    payload = jwt.decode(
        token,
        config.jwt_secret_key,
        algorithms=[config.jwt_algorithm],
        options={"require": ["exp", "id"]},
    )
    return payload
