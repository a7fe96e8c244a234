"""
conftest.py - Shared Test Fixtures

Provides an in-memory SQLite database holding all three exercises'
tables, a TestClient per exercise with get_db overridden, and factory
fixtures for the core rows of each exercise.

Business Rules:
- All tests run against an isolated in-memory DB
- Each test function gets a fresh schema (create_all/drop_all)
- TESTING=1 makes the app lifespan skip schema sync and seeding

Called by: all test files via pytest autodiscovery
Depends on: crudlab.models, crudlab.database (get_db), crudlab.main
"""

import os
os.environ["TESTING"] = "1"  # Must be set before importing crudlab modules

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from crudlab.models import (
    AlumnosBase,
    Enrollment,
    Musician,
    MusicosBase,
    Programmer,
    Project,
    ProyectosBase,
    Song,
    Student,
)

# ── In-memory SQLite engine ──────────────────────────────────────────

TEST_DB_URL = "sqlite://"  # in-memory, fresh per session

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

_ALL_BASES = (MusicosBase, AlumnosBase, ProyectosBase)


# ── Fixtures ─────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def db_session():
    """Create every exercise's tables, yield a session, then tear down."""
    for base in _ALL_BASES:
        base.metadata.create_all(bind=engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        for base in _ALL_BASES:
            base.metadata.drop_all(bind=engine)


def _app_for(exercise: str, db_session: Session):
    from crudlab.database import get_db
    from crudlab.main import create_app

    app = create_app(exercise)

    def _override_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_db
    return app


@pytest.fixture()
def musicos_client(db_session: Session) -> TestClient:
    app = _app_for("musicos", db_session)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def alumnos_client(db_session: Session) -> TestClient:
    app = _app_for("alumnos", db_session)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def proyectos_client(db_session: Session) -> TestClient:
    app = _app_for("proyectos", db_session)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def test_musician(db_session: Session) -> Musician:
    """An active bass player with two songs."""
    musician = Musician(nombre="Flea", en_actividad=True, instrumento="bajo")
    musician.canciones = [
        Song(titulo="Around The World", anio=1999),
        Song(titulo="Dani California", anio=2006),
    ]
    db_session.add(musician)
    db_session.commit()
    db_session.refresh(musician)
    return musician


@pytest.fixture()
def test_student(db_session: Session) -> Student:
    """A student with one enrollment still in progress."""
    student = Student(nombre="Nahuel", email="nahuel@gmail.com", fecha_nacimiento=date(1996, 3, 2))
    student.cursadas = [Enrollment(materia="Logica", anio=2019, cuatrimestre=1, aprobada=None)]
    db_session.add(student)
    db_session.commit()
    db_session.refresh(student)
    return student


@pytest.fixture()
def test_enrollment(test_student: Student) -> Enrollment:
    return test_student.cursadas[0]


@pytest.fixture()
def test_programmer(db_session: Session) -> Programmer:
    programmer = Programmer(nombre="Grace Hopper", email="grace@example.com", seniority=8)
    db_session.add(programmer)
    db_session.commit()
    db_session.refresh(programmer)
    return programmer


@pytest.fixture()
def test_project(db_session: Session) -> Project:
    project = Project(titulo="Motor de reportes", descripcion="Reportes PDF", lenguaje="JAVA", activo=True)
    db_session.add(project)
    db_session.commit()
    db_session.refresh(project)
    return project
