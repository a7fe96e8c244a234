"""
association_service.py - Link and unlink programmers and projects

Business Rules:
- Both ids must exist; the first missing one is reported (404)
- Linking an already linked pair is a no-op
- Unlinking a pair that is not linked is a no-op

Called by: routers/proyectos.py
Depends on: services/crud_service.py, models/proyectos.py
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import INTERNAL_ERROR, StoreError
from ..models import Programmer, Project
from .crud_service import get_record

log = logging.getLogger(__name__)


def _pair(db: Session, project_id: int, programmer_id: int) -> tuple[Project, Programmer]:
    project = get_record(db, Project, project_id)
    programmer = get_record(db, Programmer, programmer_id)
    return project, programmer


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.exception(f"{action} failed: {e}")
        raise StoreError(INTERNAL_ERROR) from e


def link_programmer(db: Session, project_id: int, programmer_id: int) -> Project:
    project, programmer = _pair(db, project_id, programmer_id)
    if programmer in project.programadores:
        return project
    project.programadores.append(programmer)
    _commit(db, f"link programmer #{programmer_id} to project #{project_id}")
    log.info(f"Programmer #{programmer_id} linked to project #{project_id}")
    return project


def unlink_programmer(db: Session, project_id: int, programmer_id: int) -> Project:
    project, programmer = _pair(db, project_id, programmer_id)
    if programmer not in project.programadores:
        return project
    project.programadores.remove(programmer)
    _commit(db, f"unlink programmer #{programmer_id} from project #{project_id}")
    log.info(f"Programmer #{programmer_id} unlinked from project #{project_id}")
    return project
