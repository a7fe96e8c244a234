"""Declarative bases, one per exercise.

Each exercise lives in its own database file, so each gets its own
metadata: create_all/drop_all on one never touches the others.
"""

from sqlalchemy.orm import DeclarativeBase


class MusicosBase(DeclarativeBase):
    pass


class AlumnosBase(DeclarativeBase):
    pass


class ProyectosBase(DeclarativeBase):
    pass
