"""
startup.py - Schema sync and sample data (idempotent)

Tables are defined in the ORM models and created with
metadata.create_all(checkfirst=True). Each exercise then gets a fixed
set of sample rows, but only while both of its entity tables are empty.

Business Rules:
- Exercises configured with reset_on_start drop every table first
  (proyectos does by default, so its data never survives a restart)
- Seed rows go through the same input schemas as API requests
- Seeding with data already present is a no-op
- Skipped entirely under TESTING

Called by: main.py lifespan
Depends on: config.py, models, schemas
"""

import logging
from datetime import date

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from .config import get_settings
from .models import (
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
from .schemas.alumnos import EnrollmentCreate, StudentCreate
from .schemas.musicos import MusicianCreate, SongCreate
from .schemas.proyectos import ProgrammerCreate, ProjectCreate
from .schemas.rules import validate

log = logging.getLogger(__name__)


# ── Sample data ──────────────────────────────────────────────────────

MUSICIANS = [
    ({"nombre": "Jimi Hendrix", "en_actividad": False, "instrumento": "guitarra"},
     [{"titulo": "Purple Haze", "anio": 1967}, {"titulo": "Hey Joe", "anio": 1966}]),
    ({"nombre": "Flea", "en_actividad": True, "instrumento": "bajo"},
     [{"titulo": "Around The World", "anio": 1999}, {"titulo": "Dani California", "anio": 2006}]),
    ({"nombre": "Dave Grohl", "en_actividad": True, "instrumento": "batería"},
     [{"titulo": "Everlong", "anio": 1997}, {"titulo": "All My Life", "anio": 2002}]),
    ({"nombre": "Robert Trujillo", "en_actividad": True, "instrumento": "bajo"},
     [{"titulo": "For Whom the Bell Tolls", "anio": 1984}, {"titulo": "One", "anio": 1988}]),
    ({"nombre": "Tom Morello", "en_actividad": True, "instrumento": "guitarra"},
     [{"titulo": "Bulls on Parade", "anio": 1996}, {"titulo": "Killing in the Name", "anio": 1992}]),
]

STUDENTS = [
    ({"nombre": "Nahuel", "email": "nahuel@gmail.com", "fecha_nacimiento": date(1996, 3, 2)},
     [{"materia": "Logica", "anio": 2019, "cuatrimestre": 1}]),
]

PROGRAMMERS = [
    {"nombre": "Ada Lovelace", "email": "ada@example.com", "seniority": 10},
    {"nombre": "Linus Torvalds", "email": "linus@example.com", "seniority": 9},
    {"nombre": "Grace Hopper", "email": "grace@example.com", "seniority": 8},
]

PROJECTS = [
    {"titulo": "Sistema de inscripciones", "descripcion": "Inscripción online a materias", "lenguaje": "PHP"},
    {"titulo": "Tablero de ventas", "descripcion": "Panel de métricas comerciales", "lenguaje": "JAVASCRIPT"},
    {"titulo": "Motor de reportes", "descripcion": "Generación de reportes PDF", "lenguaje": "JAVA"},
]

# (project index, programmer index)
ASSIGNMENTS = [(0, 0), (0, 1), (1, 2), (1, 0), (2, 2)]


# ── Seeders ──────────────────────────────────────────────────────────


def seed_musicos(db: Session) -> bool:
    if db.query(Musician).count() or db.query(Song).count():
        return False
    for musician_row, song_rows in MUSICIANS:
        musician = Musician(**validate(MusicianCreate, musician_row).model_dump())
        musician.canciones = [Song(**validate(SongCreate, row).model_dump()) for row in song_rows]
        db.add(musician)
    db.commit()
    log.info("Seeded %d musicians", len(MUSICIANS))
    return True


def seed_alumnos(db: Session) -> bool:
    if db.query(Student).count() or db.query(Enrollment).count():
        return False
    for student_row, enrollment_rows in STUDENTS:
        student = Student(**validate(StudentCreate, student_row).model_dump())
        student.cursadas = [
            Enrollment(**validate(EnrollmentCreate, row).model_dump(), aprobada=None)
            for row in enrollment_rows
        ]
        db.add(student)
    db.commit()
    log.info("Seeded %d students", len(STUDENTS))
    return True


def seed_proyectos(db: Session) -> bool:
    if db.query(Project).count() or db.query(Programmer).count():
        return False
    programmers = [Programmer(**validate(ProgrammerCreate, row).model_dump()) for row in PROGRAMMERS]
    projects = [Project(**validate(ProjectCreate, row).model_dump()) for row in PROJECTS]
    for project_idx, programmer_idx in ASSIGNMENTS:
        projects[project_idx].programadores.append(programmers[programmer_idx])
    db.add_all(programmers + projects)
    db.commit()
    log.info("Seeded %d projects and %d programmers", len(PROJECTS), len(PROGRAMMERS))
    return True


BASES = {"musicos": MusicosBase, "alumnos": AlumnosBase, "proyectos": ProyectosBase}
SEEDERS = {"musicos": seed_musicos, "alumnos": seed_alumnos, "proyectos": seed_proyectos}


def run_startup(exercise: str, engine: Engine) -> None:
    """Sync the exercise's schema and seed it. Safe to call on every boot."""
    settings = get_settings()
    if settings.testing:
        log.info("TESTING mode - skipping schema sync and seed")
        return

    metadata = BASES[exercise].metadata
    if settings.reset_on_start(exercise):
        metadata.drop_all(bind=engine)
        log.warning("Schema for %s dropped (reset_on_start)", exercise)
    metadata.create_all(bind=engine, checkfirst=True)
    log.info("ORM schema sync complete for %s", exercise)

    with Session(engine) as db:
        SEEDERS[exercise](db)
