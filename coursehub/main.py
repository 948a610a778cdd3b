import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from coursehub.core.config import AppConfig, load_config, validate_runtime_config
from coursehub.database import build_engine, build_session_factory, ensure_schema
from coursehub.routes import course_routes, enrollment_routes, review_routes, user_routes
from coursehub.routes.errors import SERVER_ERROR_DETAIL

logger = logging.getLogger(__name__)

VALUE_ERROR_PREFIX = 'Value error, '


def describe_validation_error(error: dict) -> str:
    message = error.get('msg', 'Invalid request.')
    if message.startswith(VALUE_ERROR_PREFIX):
        message = message[len(VALUE_ERROR_PREFIX):]

    location = [str(part) for part in error.get('loc', ()) if part not in ('body', 'path', 'query')]
    if error.get('type') == 'missing':
        return f"{'.'.join(location)} is required." if location else 'All fields are required.'
    if location:
        return f"{'.'.join(location)}: {message}"
    return message


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    detail = describe_validation_error(errors[0]) if errors else 'Invalid request.'
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': detail, 'errors': jsonable_encoder(errors)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception('Unhandled error on %s %s', request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'detail': SERVER_ERROR_DETAIL},
    )


def create_app(config: AppConfig | None = None) -> FastAPI:
    config = config or load_config()
    validate_runtime_config(config)

    engine = build_engine(config.database_url, echo=config.sql_echo)

    app = FastAPI(title='Course Enrollment API')
    app.state.config = config
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.on_event('startup')
    def initialize_database() -> None:
        try:
            ensure_schema(engine)
            logger.info('Connected to database at %s', engine.url.render_as_string(hide_password=True))
        except SQLAlchemyError:
            logger.exception('Database initialization failed. Check the database settings and credentials.')

    @app.on_event('shutdown')
    def dispose_engine() -> None:
        engine.dispose()

    @app.get('/')
    def root():
        return {'status': 'Course API Running'}

    app.include_router(user_routes.router, prefix='/api/users')
    app.include_router(course_routes.router, prefix='/api/courses')
    app.include_router(review_routes.router, prefix='/api/courses')
    app.include_router(enrollment_routes.router, prefix='/api/enrollments')

    return app
