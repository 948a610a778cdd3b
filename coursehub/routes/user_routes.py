import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from coursehub.auth import jwt_handler
from coursehub.auth.dependencies import get_config
from coursehub.auth.passwords import hash_password, verify_password
from coursehub.core.config import AppConfig
from coursehub.database import get_db
from coursehub.models.user import User
from coursehub.schemas import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse
from coursehub.routes.errors import server_error

router = APIRouter(tags=['users'])

logger = logging.getLogger(__name__)

USER_EXISTS_DETAIL = 'User already exists'
INVALID_CREDENTIALS_DETAIL = 'Invalid credentials'


@router.post('/register', response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    data: RegisterRequest,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_config),
):
    try:
        existing_user = db.query(User).filter(User.email == data.email).first()
        if existing_user:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=USER_EXISTS_DETAIL,
            )

        user = User(
            name=data.name,
            email=data.email,
            password=hash_password(data.password, rounds=config.bcrypt_rounds),
            role=data.role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)

        logger.info('Registered user %s with role %s', user.id, user.role)
        return {'message': 'User registered successfully', 'user': user}
    except IntegrityError as exc:
        # A concurrent registration won the race past the lookup above.
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=USER_EXISTS_DETAIL,
        ) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise server_error('Registration failed') from exc


@router.post('/login', response_model=LoginResponse)
def login(
    data: LoginRequest,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_config),
):
    try:
        user = db.query(User).filter(User.email == data.email).first()
    except SQLAlchemyError as exc:
        raise server_error('Login failed') from exc

    if user is None or not verify_password(data.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_CREDENTIALS_DETAIL,
        )

    token = jwt_handler.create_access_token(user.id, config)
    return {'message': 'Login successful', 'token': token}
