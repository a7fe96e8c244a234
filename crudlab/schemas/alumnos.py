"""
schemas/alumnos.py - Pydantic models for Student & Enrollment endpoints

Business Rules:
- nombre, email and fecha_nacimiento are required and non-empty
- email must look like an email; stored as given
- fecha_nacimiento accepts YYYY-MM-DD or DD/MM/YYYY
- cuatrimestre is 1 or 2
- aprobada is never accepted as input: it starts unset and only the
  aprobar/reprobar endpoints change it

Called by: routers/alumnos.py, services/enrollment_service.py, startup.py
Depends on: pydantic, schemas/rules.py
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from .rules import after_rules, between, is_date, is_email, not_bool, not_empty, not_null, rules

Nombre = Annotated[Optional[str], rules(not_null, not_empty)]
Email = Annotated[Optional[str], rules(not_null, not_empty, is_email)]
FechaNacimiento = Annotated[Optional[date], rules(not_null, not_empty, is_date)]
Materia = Annotated[Optional[str], rules(not_null, not_empty)]
Anio = Annotated[Optional[int], rules(not_null, not_empty, not_bool)]
Cuatrimestre = Annotated[Optional[int], rules(not_null, not_empty, not_bool), after_rules(between(1, 2))]


# ── Input ────────────────────────────────────────────────────────────


class StudentCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nombre: Nombre
    email: Email
    fecha_nacimiento: FechaNacimiento


class StudentUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nombre: Nombre = None
    email: Email = None
    fecha_nacimiento: FechaNacimiento = None


class EnrollmentCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    materia: Materia
    anio: Anio
    cuatrimestre: Cuatrimestre


# ── Output ───────────────────────────────────────────────────────────


class EnrollmentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    materia: str
    anio: int
    cuatrimestre: int
    aprobada: bool | None = None
    alumno_id: int | None = None


class StudentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    email: str
    fecha_nacimiento: date


class StudentDetail(StudentRead):
    cursadas: list[EnrollmentRead] = Field(default_factory=list)
