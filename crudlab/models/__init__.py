"""Database models - re-exports every exercise's models.

Import from here:  from crudlab.models import Musician, Student, ...
Or from submodules: from crudlab.models.musicos import Musician
"""

from .base import AlumnosBase, MusicosBase, ProyectosBase  # noqa: F401

# Exercise 1: musicians & songs
from .musicos import INSTRUMENTS, Musician, Song  # noqa: F401

# Exercise 2: students & enrollments
from .alumnos import Enrollment, Student  # noqa: F401

# Exercise 3: projects & programmers
from .proyectos import LANGUAGES, Programmer, Project, programador_proyecto  # noqa: F401
