from threading import Lock

from fastapi import Request
from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool


Base = declarative_base()

_schema_lock = Lock()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        engine = create_engine(database_url, echo=echo, **options)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def ensure_schema(engine: Engine) -> None:
    """Create missing tables and the unique indexes older databases lack."""
    # Imported for their side effect of registering tables on Base.metadata.
    from coursehub.models import course, enrollment, review, user  # noqa: F401

    with _schema_lock:
        Base.metadata.create_all(bind=engine)

        inspector = inspect(engine)
        user_indexes = inspector.get_indexes('users')
        user_uniques = inspector.get_unique_constraints('users')
        email_is_unique = any(
            index['column_names'] == ['email'] and index.get('unique')
            for index in user_indexes
        ) or any(constraint['column_names'] == ['email'] for constraint in user_uniques)

        with engine.begin() as connection:
            if not email_is_unique:
                connection.execute(
                    text('CREATE UNIQUE INDEX IF NOT EXISTS uq_users_email ON users(email)')
                )
            connection.execute(
                text('CREATE INDEX IF NOT EXISTS idx_reviews_course_user ON reviews(course_id, user_id)')
            )


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
