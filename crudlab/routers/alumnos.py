"""
routers/alumnos.py - Exercise 2: Students & Enrollments (cursadas)

Business Rules:
- GET /alumnos lists students without enrollments; GET /alumnos/{id} includes them
- POST /alumnos/{id}/cursada never accepts "aprobada": it starts unset
- PATCH /cursada/aprobar/{id} and /cursada/reprobar/{id} take no body
- DELETE answers the literal "ok"

Called by: main.py (router mount)
Depends on: services/crud_service.py, services/enrollment_service.py,
            schemas/alumnos.py
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from loguru import logger
from sqlalchemy.orm import Session, selectinload

from ..database import get_db
from ..models import Enrollment, Student
from ..schemas.alumnos import (
    EnrollmentRead,
    StudentCreate,
    StudentDetail,
    StudentRead,
    StudentUpdate,
)
from ..schemas.responses import CreatedResponse
from ..schemas.rules import validate
from ..services import crud_service, enrollment_service

router = APIRouter(tags=["alumnos"])


# ── Students ─────────────────────────────────────────────────────────


@router.get("/alumnos", response_model=list[StudentRead])
def list_students(db: Session = Depends(get_db)):
    return crud_service.list_records(db, Student)


@router.get("/alumnos/{student_id}", response_model=StudentDetail)
def get_student(student_id: int, db: Session = Depends(get_db)):
    return crud_service.get_record(
        db, Student, student_id, options=[selectinload(Student.cursadas)]
    )


@router.post("/alumnos", response_model=CreatedResponse)
def create_student(payload: Any = Body(None), db: Session = Depends(get_db)):
    data = validate(StudentCreate, payload)
    student = crud_service.create_record(db, Student, data)
    logger.info("Student #{} created: {}", student.id, student.email)
    return {"id": student.id}


@router.patch("/alumnos/{student_id}", response_model=CreatedResponse)
def update_student(student_id: int, payload: Any = Body(None), db: Session = Depends(get_db)):
    crud_service.update_record(db, Student, student_id, StudentUpdate, payload)
    return {"id": student_id}


@router.delete("/alumnos/{student_id}")
def delete_student(student_id: int, db: Session = Depends(get_db)):
    crud_service.delete_record(db, Student, student_id)
    return "ok"


# ── Enrollments ──────────────────────────────────────────────────────


@router.post("/alumnos/{student_id}/cursada", response_model=CreatedResponse)
def enroll_student(student_id: int, payload: Any = Body(None), db: Session = Depends(get_db)):
    enrollment = enrollment_service.enroll(db, student_id, payload)
    logger.info("Student #{} enrolled in {} (#{})", student_id, enrollment.materia, enrollment.id)
    return {"id": enrollment.id}


@router.get("/cursada/{enrollment_id}", response_model=EnrollmentRead)
def get_enrollment(enrollment_id: int, db: Session = Depends(get_db)):
    return crud_service.get_record(db, Enrollment, enrollment_id)


@router.patch("/cursada/aprobar/{enrollment_id}", response_model=CreatedResponse)
def approve_enrollment(enrollment_id: int, db: Session = Depends(get_db)):
    enrollment_service.approve(db, enrollment_id)
    return {"id": enrollment_id}


@router.patch("/cursada/reprobar/{enrollment_id}", response_model=CreatedResponse)
def reject_enrollment(enrollment_id: int, db: Session = Depends(get_db)):
    enrollment_service.reject(db, enrollment_id)
    return {"id": enrollment_id}


@router.delete("/cursada/{enrollment_id}")
def delete_enrollment(enrollment_id: int, db: Session = Depends(get_db)):
    crud_service.delete_record(db, Enrollment, enrollment_id)
    return "ok"
