"""Fixtures compartidos: base de datos SQLite en memoria y cliente HTTP."""
from contextlib import contextmanager

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import eventfence.models  # noqa: F401
from eventfence.db import Base, build_engine, get_db
from eventfence.main import app
from eventfence.models.users import User
from tests.helpers import NGO, event_payload


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    """Abre una sesión nueva en cada uso para no leer objetos cacheados"""

    @contextmanager
    def _session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    return _session


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def server_error_client(client):
    """Cliente que devuelve la respuesta 500 en lugar de relanzar la excepción"""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def users(db_session):
    """Usuarios conocidos por el proveedor de identidad"""
    with db_session() as session:
        session.add_all([
            User(id="ngo-1", name="Helping Hands", email="contact@helpinghands.org", role="ngo"),
            User(id="ngo-2", name="Green Streets", email="hello@greenstreets.org", role="ngo"),
            User(id="admin-1", name="Site Admin", email="admin@example.org", role="admin"),
            User(id="user-1", name="Jane Citizen", email="jane@example.org", role="user"),
        ])
        session.commit()


@pytest.fixture
def create_event(client, users):
    """Crear un evento vía API y devolver el documento"""

    def _create(headers=NGO, **overrides):
        response = client.post("/api/v1/events/", json=event_payload(**overrides), headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
