"""
crud_service.py - Generic CRUD over any exercise model

Business Rules:
- list returns every row ordered by id, no related collections
- get/update/delete on an unknown id raise RecordNotFound (404)
- create persists already-validated input; update validates the
  partial body with the same rules before writing
- update touches only the fields present in the body
- store failures roll back, are logged with traceback and raise
  StoreError with a generic message (500)
- deleting a parent never cascades to its children

Called by: routers/*.py, services/association_service.py,
           services/enrollment_service.py
Depends on: errors.py, schemas/rules.py
"""

import logging
from typing import Any, Sequence

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import INTERNAL_ERROR, QUERY_FAILED, UPDATE_FAILED, RecordNotFound, StoreError
from ..schemas.rules import validate

log = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value; anything wider cannot be a stored id
MAX_ID = 2**63 - 1


def _store_failure(db: Session, message: str, action: str, exc: Exception) -> StoreError:
    db.rollback()
    log.exception(f"{action} failed: {exc}")
    return StoreError(message)


def list_records(db: Session, model) -> list:
    try:
        return db.query(model).order_by(model.id).all()
    except SQLAlchemyError as e:
        raise _store_failure(db, QUERY_FAILED, f"list {model.__tablename__}", e) from e


def get_record(db: Session, model, record_id: int, options: Sequence = ()):
    """Fetch one row by id, eager-loading ``options`` (related collections)."""
    if not -MAX_ID - 1 <= record_id <= MAX_ID:
        raise RecordNotFound(model.entity_label, record_id)
    try:
        record = db.get(model, record_id, options=list(options))
    except SQLAlchemyError as e:
        raise _store_failure(db, QUERY_FAILED, f"get {model.__tablename__} #{record_id}", e) from e
    if record is None:
        raise RecordNotFound(model.entity_label, record_id)
    return record


def create_record(db: Session, model, data: BaseModel, **extra: Any):
    """Persist a validated input schema; ``extra`` sets fields the body may not (foreign keys)."""
    values = data.model_dump()
    values.update(extra)
    record = model(**values)
    try:
        db.add(record)
        db.commit()
        db.refresh(record)
    except SQLAlchemyError as e:
        raise _store_failure(db, INTERNAL_ERROR, f"create {model.__tablename__}", e) from e
    log.info(f"Created {model.__tablename__} #{record.id}")
    return record


def update_record(db: Session, model, record_id: int, schema: type[BaseModel], payload: Any):
    """Apply a partial update. Unknown id wins over an invalid body."""
    record = get_record(db, model, record_id)
    changes = validate(schema, payload).model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(record, field, value)
    try:
        db.commit()
    except SQLAlchemyError as e:
        raise _store_failure(db, UPDATE_FAILED, f"update {model.__tablename__} #{record_id}", e) from e
    log.info(f"Updated {model.__tablename__} #{record_id}: {sorted(changes)}")
    return record


def delete_record(db: Session, model, record_id: int) -> None:
    record = get_record(db, model, record_id)
    try:
        db.delete(record)
        db.commit()
    except SQLAlchemyError as e:
        raise _store_failure(db, INTERNAL_ERROR, f"delete {model.__tablename__} #{record_id}", e) from e
    log.info(f"Deleted {model.__tablename__} #{record_id}")
