from dataclasses import dataclass

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from coursehub.auth import jwt_handler
from coursehub.core.config import AppConfig

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    id: int


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    config: AppConfig = Depends(get_config),
) -> Identity:
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access Denied: No Token Provided",
        )

    try:
        payload = jwt_handler.decode_access_token(credentials.credentials, config)
    except jwt.InvalidTokenError as exc:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or Expired Token",
        ) from exc

    return Identity(id=payload["id"])
