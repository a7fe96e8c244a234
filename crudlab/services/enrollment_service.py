"""
enrollment_service.py - Enrollments (cursadas) and their outcome

An enrollment moves from unset (aprobada=None) to passed or failed.
There is no way back to unset; aprobar and reprobar may flip between
passed and failed.

Business Rules:
- Enrolling requires an existing student (404 otherwise)
- A new enrollment always starts with aprobada=None
- aprobar/reprobar on an unknown id → 404; store errors → 500

Called by: routers/alumnos.py
Depends on: services/crud_service.py, schemas/alumnos.py
"""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import UPDATE_FAILED, StoreError
from ..models import Enrollment, Student
from ..schemas.alumnos import EnrollmentCreate
from ..schemas.rules import validate
from .crud_service import create_record, get_record

log = logging.getLogger(__name__)


def enroll(db: Session, student_id: int, payload: Any) -> Enrollment:
    student = get_record(db, Student, student_id)
    data = validate(EnrollmentCreate, payload)
    return create_record(db, Enrollment, data, alumno_id=student.id, aprobada=None)


def set_outcome(db: Session, enrollment_id: int, passed: bool) -> Enrollment:
    enrollment = get_record(db, Enrollment, enrollment_id)
    enrollment.aprobada = passed
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.exception(f"Setting outcome of enrollment #{enrollment_id} failed: {e}")
        raise StoreError(UPDATE_FAILED) from e
    log.info(f"Enrollment #{enrollment_id} {'approved' if passed else 'rejected'}")
    return enrollment


def approve(db: Session, enrollment_id: int) -> Enrollment:
    return set_outcome(db, enrollment_id, True)


def reject(db: Session, enrollment_id: int) -> Enrollment:
    return set_outcome(db, enrollment_id, False)
