"""
test_crud_service.py - Tests for crudlab/services/crud_service.py

Exercises the generic list/get/create/update/delete directly against
the test session, including the not-found and store-failure paths.

Called by: pytest
Depends on: crudlab/services/crud_service.py, conftest.py
"""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from crudlab.errors import QUERY_FAILED, UPDATE_FAILED, RecordNotFound, RecordValidationError, StoreError
from crudlab.models import Musician, Song
from crudlab.schemas.musicos import MusicianCreate, MusicianUpdate
from crudlab.schemas.rules import validate
from crudlab.services import crud_service


def test_list_ordered_by_id(db_session: Session):
    for name in ("B", "A", "C"):
        db_session.add(Musician(nombre=name, en_actividad=True, instrumento="voz"))
    db_session.commit()
    names = [m.nombre for m in crud_service.list_records(db_session, Musician)]
    assert names == ["B", "A", "C"]


def test_list_empty(db_session: Session):
    assert crud_service.list_records(db_session, Song) == []


def test_get_existing(db_session: Session, test_musician: Musician):
    found = crud_service.get_record(db_session, Musician, test_musician.id)
    assert found.nombre == "Flea"
    assert len(found.canciones) == 2


def test_get_missing_message_names_entity_and_id(db_session: Session):
    with pytest.raises(RecordNotFound) as exc_info:
        crud_service.get_record(db_session, Musician, 4242)
    assert exc_info.value.message == "No se encontró el músico con ID 4242."
    assert exc_info.value.status_code == 404


def test_create_assigns_id(db_session: Session):
    data = validate(MusicianCreate, {"nombre": "Nuevo", "instrumento": "teclado"})
    musician = crud_service.create_record(db_session, Musician, data)
    assert musician.id is not None
    assert musician.en_actividad is True


def test_create_extra_sets_foreign_key(db_session: Session, test_musician: Musician):
    from crudlab.schemas.musicos import SongCreate

    data = validate(SongCreate, {"titulo": "Otherside", "anio": 1999})
    song = crud_service.create_record(db_session, Song, data, musico_id=test_musician.id)
    assert song.musico_id == test_musician.id


def test_update_changes_only_given_fields(db_session: Session, test_musician: Musician):
    crud_service.update_record(db_session, Musician, test_musician.id, MusicianUpdate, {"en_actividad": False})
    refreshed = db_session.get(Musician, test_musician.id)
    assert refreshed.en_actividad is False
    assert refreshed.nombre == "Flea"
    assert refreshed.instrumento == "bajo"


def test_update_missing_id_wins_over_bad_body(db_session: Session):
    with pytest.raises(RecordNotFound):
        crud_service.update_record(db_session, Musician, 999, MusicianUpdate, {"instrumento": "flauta"})


def test_update_invalid_body_rejected(db_session: Session, test_musician: Musician):
    with pytest.raises(RecordValidationError):
        crud_service.update_record(db_session, Musician, test_musician.id, MusicianUpdate, {"instrumento": "flauta"})
    assert db_session.get(Musician, test_musician.id).instrumento == "bajo"


def test_delete_then_missing(db_session: Session, test_musician: Musician):
    crud_service.delete_record(db_session, Musician, test_musician.id)
    with pytest.raises(RecordNotFound):
        crud_service.delete_record(db_session, Musician, test_musician.id)


def test_delete_parent_keeps_children(db_session: Session, test_musician: Musician):
    song_ids = [s.id for s in test_musician.canciones]
    crud_service.delete_record(db_session, Musician, test_musician.id)
    remaining = db_session.query(Song).filter(Song.id.in_(song_ids)).all()
    assert len(remaining) == 2
    assert all(s.musico_id is None for s in remaining)


def test_list_store_failure_becomes_store_error(db_session: Session):
    boom = OperationalError("SELECT", {}, Exception("disk I/O error"))
    with patch.object(db_session, "query", side_effect=boom):
        with pytest.raises(StoreError) as exc_info:
            crud_service.list_records(db_session, Musician)
    assert exc_info.value.message == QUERY_FAILED


def test_update_commit_failure_rolls_back(db_session: Session, test_musician: Musician):
    boom = OperationalError("UPDATE", {}, Exception("database is locked"))
    with patch.object(db_session, "commit", side_effect=boom), \
         patch.object(db_session, "rollback") as rollback:
        with pytest.raises(StoreError) as exc_info:
            crud_service.update_record(db_session, Musician, test_musician.id, MusicianUpdate, {"nombre": "X"})
    assert exc_info.value.message == UPDATE_FAILED
    rollback.assert_called_once()
