import pytest
from fastapi.testclient import TestClient

from coursehub.auth import jwt_handler
from coursehub.core.config import AppConfig
from coursehub.main import create_app


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(
        database_url='sqlite://',
        jwt_secret_key='test-secret',
        bcrypt_rounds=4,
    )


@pytest.fixture
def app(config: AppConfig):
    return create_app(config)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app, client):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def register_user(client: TestClient):
    def register(name: str, email: str, role: str = 'student', password: str = 'secret-pass') -> dict:
        response = client.post(
            '/api/users/register',
            json={'name': name, 'email': email, 'password': password, 'role': role},
        )
        assert response.status_code == 201, response.text
        return response.json()['user']

    return register


@pytest.fixture
def instructor(register_user) -> dict:
    return register_user('Ada Instructor', 'ada@example.edu', role='instructor')


@pytest.fixture
def student(register_user) -> dict:
    return register_user('Sam Student', 'sam@example.edu')


@pytest.fixture
def auth_headers(config: AppConfig, student: dict) -> dict:
    token = jwt_handler.create_access_token(student['id'], config)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def course(client, instructor: dict, auth_headers: dict) -> dict:
    response = client.post(
        '/api/courses',
        json={'title': 'Databases 101', 'description': 'Relational basics', 'instructor_id': instructor['id']},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()['course']
