"""
schemas/proyectos.py - Pydantic models for Project & Programmer endpoints

Business Rules:
- titulo and lenguaje are required; descripcion is optional
- lenguaje must be one of LANGUAGES (exact, case-sensitive)
- activo defaults to true
- programmer email must look like an email; seniority is 1-10

Called by: routers/proyectos.py, startup.py
Depends on: pydantic, schemas/rules.py, models/proyectos.py
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.proyectos import LANGUAGES
from .rules import after_rules, between, is_email, not_bool, not_empty, not_null, one_of, rules

Titulo = Annotated[Optional[str], rules(not_null, not_empty)]
Lenguaje = Annotated[Optional[str], rules(not_null, not_empty, one_of(*LANGUAGES))]
Activo = Annotated[Optional[bool], rules(not_null)]
Nombre = Annotated[Optional[str], rules(not_null, not_empty)]
Email = Annotated[Optional[str], rules(not_null, not_empty, is_email)]
Seniority = Annotated[Optional[int], rules(not_null, not_empty, not_bool), after_rules(between(1, 10))]


# ── Input ────────────────────────────────────────────────────────────


class ProjectCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    titulo: Titulo
    descripcion: Optional[str] = None
    lenguaje: Lenguaje
    activo: Activo = True


class ProjectUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    titulo: Titulo = None
    descripcion: Optional[str] = None
    lenguaje: Lenguaje = None
    activo: Activo = None


class ProgrammerCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nombre: Nombre
    email: Email
    seniority: Seniority


class ProgrammerUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nombre: Nombre = None
    email: Email = None
    seniority: Seniority = None


# ── Output ───────────────────────────────────────────────────────────


class ProgrammerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    email: str
    seniority: int


class ProjectRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    titulo: str
    descripcion: str | None = None
    lenguaje: str
    activo: bool


class ProjectDetail(ProjectRead):
    programadores: list[ProgrammerRead] = Field(default_factory=list)


class ProgrammerDetail(ProgrammerRead):
    proyectos: list[ProjectRead] = Field(default_factory=list)
