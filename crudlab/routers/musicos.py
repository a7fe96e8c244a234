"""
routers/musicos.py - Exercise 1: Musicians & Songs

Business Rules:
- GET /musicos lists musicians without songs; GET /musicos/{id} includes them
- POST validates the whole body first: 409 {"errores": [...]} on failure
- A song always belongs to an existing musician (404 otherwise)
- DELETE answers the literal "ok"

Called by: main.py (router mount)
Depends on: services/crud_service.py, schemas/musicos.py
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from loguru import logger
from sqlalchemy.orm import Session, selectinload

from ..database import get_db
from ..models import Musician, Song
from ..schemas.musicos import (
    MusicianCreate,
    MusicianDetail,
    MusicianRead,
    MusicianUpdate,
    SongAssign,
    SongCreate,
    SongRead,
    SongUpdate,
)
from ..schemas.responses import CreatedResponse
from ..schemas.rules import validate
from ..services import crud_service

router = APIRouter(tags=["musicos"])


# ── Musicians ────────────────────────────────────────────────────────


@router.get("/musicos", response_model=list[MusicianRead])
def list_musicians(db: Session = Depends(get_db)):
    return crud_service.list_records(db, Musician)


@router.get("/musicos/{musician_id}", response_model=MusicianDetail)
def get_musician(musician_id: int, db: Session = Depends(get_db)):
    return crud_service.get_record(
        db, Musician, musician_id, options=[selectinload(Musician.canciones)]
    )


@router.post("/musicos", response_model=CreatedResponse)
def create_musician(payload: Any = Body(None), db: Session = Depends(get_db)):
    data = validate(MusicianCreate, payload)
    musician = crud_service.create_record(db, Musician, data)
    logger.info("Musician #{} created: {}", musician.id, musician.nombre)
    return {"id": musician.id}


@router.patch("/musicos/{musician_id}", response_model=CreatedResponse)
def update_musician(musician_id: int, payload: Any = Body(None), db: Session = Depends(get_db)):
    crud_service.update_record(db, Musician, musician_id, MusicianUpdate, payload)
    return {"id": musician_id}


@router.delete("/musicos/{musician_id}")
def delete_musician(musician_id: int, db: Session = Depends(get_db)):
    crud_service.delete_record(db, Musician, musician_id)
    return "ok"


@router.post("/musicos/{musician_id}/canciones", response_model=CreatedResponse)
def create_musician_song(musician_id: int, payload: Any = Body(None), db: Session = Depends(get_db)):
    musician = crud_service.get_record(db, Musician, musician_id)
    data = validate(SongCreate, payload)
    song = crud_service.create_record(db, Song, data, musico_id=musician.id)
    return {"id": song.id}


# ── Songs ────────────────────────────────────────────────────────────


@router.get("/canciones", response_model=list[SongRead])
def list_songs(db: Session = Depends(get_db)):
    return crud_service.list_records(db, Song)


@router.get("/canciones/{song_id}", response_model=SongRead)
def get_song(song_id: int, db: Session = Depends(get_db)):
    return crud_service.get_record(db, Song, song_id)


@router.post("/canciones", response_model=CreatedResponse)
def create_song(payload: Any = Body(None), db: Session = Depends(get_db)):
    data = validate(SongAssign, payload)
    crud_service.get_record(db, Musician, data.musico_id)
    song = crud_service.create_record(db, Song, data)
    logger.info("Song #{} created for musician #{}", song.id, song.musico_id)
    return {"id": song.id}


@router.patch("/canciones/{song_id}", response_model=CreatedResponse)
def update_song(song_id: int, payload: Any = Body(None), db: Session = Depends(get_db)):
    crud_service.update_record(db, Song, song_id, SongUpdate, payload)
    return {"id": song_id}


@router.delete("/canciones/{song_id}")
def delete_song(song_id: int, db: Session = Depends(get_db)):
    crud_service.delete_record(db, Song, song_id)
    return "ok"
