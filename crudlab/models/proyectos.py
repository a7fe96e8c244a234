"""Exercise 3 models - Projects and Programmers, many-to-many."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from .base import ProyectosBase

LANGUAGES = ("PHP", "JAVASCRIPT", "C++", "JAVA")

programador_proyecto = Table(
    "programador_proyecto",
    ProyectosBase.metadata,
    Column("proyecto_id", Integer, ForeignKey("proyectos.id"), primary_key=True),
    Column("programador_id", Integer, ForeignKey("programadores.id"), primary_key=True),
)


class Project(ProyectosBase):
    __tablename__ = "proyectos"
    entity_label = "el proyecto"

    id = Column(Integer, primary_key=True)
    titulo = Column(String(255), nullable=False)
    descripcion = Column(String(1000))
    lenguaje = Column(String(20), nullable=False)  # one of LANGUAGES
    activo = Column(Boolean, nullable=False, default=True)

    programadores = relationship(
        "Programmer",
        secondary=programador_proyecto,
        back_populates="proyectos",
        order_by="Programmer.id",
    )


class Programmer(ProyectosBase):
    __tablename__ = "programadores"
    entity_label = "el programador"

    id = Column(Integer, primary_key=True)
    nombre = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    seniority = Column(Integer, nullable=False)  # 1-10

    proyectos = relationship(
        "Project",
        secondary=programador_proyecto,
        back_populates="programadores",
        order_by="Project.id",
    )
