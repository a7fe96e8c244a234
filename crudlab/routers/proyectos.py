"""
routers/proyectos.py - Exercise 3: Projects & Programmers

Business Rules:
- GET /proyectos/{id} includes its programmers; GET /programadores/{id}
  includes their projects
- lenguaje is one of PHP, JAVASCRIPT, C++, JAVA
- POST/DELETE /proyectos/{pid}/programadores/{gid} link/unlink a pair;
  404 if either side does not exist
- DELETE answers the literal "ok"

Called by: main.py (router mount)
Depends on: services/crud_service.py, services/association_service.py,
            schemas/proyectos.py
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from loguru import logger
from sqlalchemy.orm import Session, selectinload

from ..database import get_db
from ..models import Programmer, Project
from ..schemas.proyectos import (
    ProgrammerCreate,
    ProgrammerDetail,
    ProgrammerRead,
    ProgrammerUpdate,
    ProjectCreate,
    ProjectDetail,
    ProjectRead,
    ProjectUpdate,
)
from ..schemas.responses import CreatedResponse
from ..schemas.rules import validate
from ..services import association_service, crud_service

router = APIRouter(tags=["proyectos"])


# ── Projects ─────────────────────────────────────────────────────────


@router.get("/proyectos", response_model=list[ProjectRead])
def list_projects(db: Session = Depends(get_db)):
    return crud_service.list_records(db, Project)


@router.get("/proyectos/{project_id}", response_model=ProjectDetail)
def get_project(project_id: int, db: Session = Depends(get_db)):
    return crud_service.get_record(
        db, Project, project_id, options=[selectinload(Project.programadores)]
    )


@router.post("/proyectos", response_model=CreatedResponse)
def create_project(payload: Any = Body(None), db: Session = Depends(get_db)):
    data = validate(ProjectCreate, payload)
    project = crud_service.create_record(db, Project, data)
    logger.info("Project #{} created: {} ({})", project.id, project.titulo, project.lenguaje)
    return {"id": project.id}


@router.patch("/proyectos/{project_id}", response_model=CreatedResponse)
def update_project(project_id: int, payload: Any = Body(None), db: Session = Depends(get_db)):
    crud_service.update_record(db, Project, project_id, ProjectUpdate, payload)
    return {"id": project_id}


@router.delete("/proyectos/{project_id}")
def delete_project(project_id: int, db: Session = Depends(get_db)):
    crud_service.delete_record(db, Project, project_id)
    return "ok"


# ── Programmers ──────────────────────────────────────────────────────


@router.get("/programadores", response_model=list[ProgrammerRead])
def list_programmers(db: Session = Depends(get_db)):
    return crud_service.list_records(db, Programmer)


@router.get("/programadores/{programmer_id}", response_model=ProgrammerDetail)
def get_programmer(programmer_id: int, db: Session = Depends(get_db)):
    return crud_service.get_record(
        db, Programmer, programmer_id, options=[selectinload(Programmer.proyectos)]
    )


@router.post("/programadores", response_model=CreatedResponse)
def create_programmer(payload: Any = Body(None), db: Session = Depends(get_db)):
    data = validate(ProgrammerCreate, payload)
    programmer = crud_service.create_record(db, Programmer, data)
    logger.info("Programmer #{} created: {}", programmer.id, programmer.email)
    return {"id": programmer.id}


@router.patch("/programadores/{programmer_id}", response_model=CreatedResponse)
def update_programmer(programmer_id: int, payload: Any = Body(None), db: Session = Depends(get_db)):
    crud_service.update_record(db, Programmer, programmer_id, ProgrammerUpdate, payload)
    return {"id": programmer_id}


@router.delete("/programadores/{programmer_id}")
def delete_programmer(programmer_id: int, db: Session = Depends(get_db)):
    crud_service.delete_record(db, Programmer, programmer_id)
    return "ok"


# ── Assignments ──────────────────────────────────────────────────────


@router.post("/proyectos/{project_id}/programadores/{programmer_id}")
def link_programmer(project_id: int, programmer_id: int, db: Session = Depends(get_db)):
    association_service.link_programmer(db, project_id, programmer_id)
    return "ok"


@router.delete("/proyectos/{project_id}/programadores/{programmer_id}")
def unlink_programmer(project_id: int, programmer_id: int, db: Session = Depends(get_db)):
    association_service.unlink_programmer(db, project_id, programmer_id)
    return "ok"
