"""
schemas/musicos.py - Pydantic models for Musician & Song endpoints

Business Rules:
- nombre, instrumento, titulo and anio are required and non-empty
- en_actividad accepts only true/false or 1/0, defaults to true
- instrumento must be one of INSTRUMENTS
- anio must be between 1 and 2100

Called by: routers/musicos.py, startup.py
Depends on: pydantic, schemas/rules.py, models/musicos.py
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.musicos import INSTRUMENTS
from .rules import after_rules, between, not_bool, not_empty, not_null, one_of, rules

Nombre = Annotated[Optional[str], rules(not_null, not_empty)]
EnActividad = Annotated[
    Optional[bool],
    rules(not_null, one_of(0, 1, False, True, label="1 / true (=verdadero) ó 0 / false (=falso)")),
]
Instrumento = Annotated[Optional[str], rules(not_null, not_empty, one_of(*INSTRUMENTS))]
Titulo = Annotated[Optional[str], rules(not_null, not_empty)]
Anio = Annotated[Optional[int], rules(not_null, not_empty, not_bool), after_rules(between(1, 2100))]
MusicoId = Annotated[Optional[int], rules(not_null, not_empty, not_bool)]


# ── Input ────────────────────────────────────────────────────────────


class MusicianCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nombre: Nombre
    en_actividad: EnActividad = True
    instrumento: Instrumento


class MusicianUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nombre: Nombre = None
    en_actividad: EnActividad = None
    instrumento: Instrumento = None


class SongCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    titulo: Titulo
    anio: Anio


class SongAssign(SongCreate):
    """A song posted on its own: the musician comes in the body."""

    musico_id: MusicoId


class SongUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    titulo: Titulo = None
    anio: Anio = None


# ── Output ───────────────────────────────────────────────────────────


class SongRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    titulo: str
    anio: int
    musico_id: int | None = None


class MusicianRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    en_actividad: bool
    instrumento: str


class MusicianDetail(MusicianRead):
    canciones: list[SongRead] = Field(default_factory=list)
