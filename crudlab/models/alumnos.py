"""Exercise 2 models - Student has many Enrollments (cursadas)."""

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import AlumnosBase


class Student(AlumnosBase):
    __tablename__ = "alumnos"
    entity_label = "el alumno"

    id = Column(Integer, primary_key=True)
    nombre = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    fecha_nacimiento = Column(Date, nullable=False)

    cursadas = relationship("Enrollment", back_populates="alumno", order_by="Enrollment.id")


class Enrollment(AlumnosBase):
    __tablename__ = "cursadas"
    entity_label = "la cursada"

    id = Column(Integer, primary_key=True)
    materia = Column(String(255), nullable=False)
    anio = Column(Integer, nullable=False)
    cuatrimestre = Column(Integer, nullable=False)  # 1 or 2
    # None = still in progress; True/False only via aprobar/reprobar
    aprobada = Column(Boolean, nullable=True, default=None)
    alumno_id = Column(Integer, ForeignKey("alumnos.id"), index=True)

    alumno = relationship("Student", back_populates="cursadas")
