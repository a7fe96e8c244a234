"""Exercise 1 models - Musician has many Songs."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import MusicosBase

INSTRUMENTS = ("guitarra", "batería", "bajo", "teclado", "voz")


class Musician(MusicosBase):
    __tablename__ = "musicos"
    entity_label = "el músico"

    id = Column(Integer, primary_key=True)
    nombre = Column(String(255), nullable=False)
    en_actividad = Column(Boolean, nullable=False, default=True)
    instrumento = Column(String(20), nullable=False)  # one of INSTRUMENTS

    canciones = relationship("Song", back_populates="musico", order_by="Song.id")


class Song(MusicosBase):
    __tablename__ = "canciones"
    entity_label = "la canción"

    id = Column(Integer, primary_key=True)
    titulo = Column(String(255), nullable=False)
    anio = Column(Integer, nullable=False)
    # Nullable: deleting a musician leaves its songs behind
    musico_id = Column(Integer, ForeignKey("musicos.id"), index=True)

    musico = relationship("Musician", back_populates="canciones")
