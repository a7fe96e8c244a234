"""
schemas/rules.py - Declarative field rules and their error messages

A rule is a callable ``check(value, field) -> value`` that either returns
the (possibly converted) value or raises a PydanticCustomError whose
message names the field. Rules are attached to schema fields through
``rules(...)`` (before type coercion) or ``after_rules(...)`` (after).

Business Rules:
- Rules on one field run in order; the first failure is reported
- Every failing field is reported, not just the first one
- Messages are the Spanish texts the API has always returned
- A missing required field reports the same message as an explicit null

Called by: schemas/musicos.py, schemas/alumnos.py, schemas/proyectos.py,
           services/crud_service.py, startup.py
Depends on: pydantic, errors.py
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Callable

from pydantic import AfterValidator, BaseModel, BeforeValidator, ValidationError, ValidationInfo
from pydantic_core import PydanticCustomError

from ..errors import RecordValidationError

Check = Callable[[Any, str], Any]

NOT_NULL = 'El campo "{field}" no puede ser nulo'
NOT_EMPTY = 'El campo "{field}" no puede estar vacío'
ONE_OF = 'El campo "{field}" debe ser una de las siguientes opciones: {options}'
BETWEEN = 'El campo "{field}" debe estar entre {low} y {high}'
EMAIL = 'El campo "{field}" debe ser un email válido'
DATE = 'El campo "{field}" debe ser una fecha válida'
INVALID = 'El campo "{field}" tiene un valor inválido'
NOT_AN_OBJECT = "El cuerpo de la solicitud debe ser un objeto JSON"

RULE_ERRORS = {"not_null", "not_empty", "not_bool", "one_of", "between", "email", "date"}

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")


# ── Rules ────────────────────────────────────────────────────────────


def not_null(value: Any, field: str) -> Any:
    if value is None:
        raise PydanticCustomError("not_null", NOT_NULL, {"field": field})
    return value


def not_empty(value: Any, field: str) -> Any:
    if isinstance(value, str) and not value.strip():
        raise PydanticCustomError("not_empty", NOT_EMPTY, {"field": field})
    return value


def not_bool(value: Any, field: str) -> Any:
    """Integer fields: a JSON true/false must not pass as 1/0."""
    if isinstance(value, bool):
        raise PydanticCustomError("not_bool", INVALID, {"field": field})
    return value


def one_of(*options: Any, label: str | None = None) -> Check:
    """Membership in a literal set. ``label`` replaces the listed options in the message."""
    shown = label or ", ".join(str(o) for o in options)

    def check(value: Any, field: str) -> Any:
        if value is not None and not any(_same(value, o) for o in options):
            raise PydanticCustomError("one_of", ONE_OF, {"field": field, "options": shown})
        return value

    return check


def _same(value: Any, option: Any) -> bool:
    # bool is an int subclass: True must not match the option 1 by accident
    return value == option and isinstance(value, bool) == isinstance(option, bool)


def between(low: int, high: int) -> Check:
    def check(value: Any, field: str) -> Any:
        if value is not None and not low <= value <= high:
            raise PydanticCustomError("between", BETWEEN, {"field": field, "low": low, "high": high})
        return value

    return check


def is_email(value: Any, field: str) -> Any:
    if isinstance(value, str) and not _EMAIL_RE.match(value.strip()):
        raise PydanticCustomError("email", EMAIL, {"field": field})
    return value


def is_date(value: Any, field: str) -> Any:
    """Accept a date, an ISO ``YYYY-MM-DD`` string or a ``DD/MM/YYYY`` string."""
    if value is None or isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        for fmt in _DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
    raise PydanticCustomError("date", DATE, {"field": field})


# ── Attaching rules to fields ────────────────────────────────────────


def rules(*checks: Check) -> BeforeValidator:
    """Run ``checks`` on the raw input, before pydantic coerces the type."""

    def run(value: Any, info: ValidationInfo) -> Any:
        for rule in checks:
            value = rule(value, info.field_name)
        return value

    return BeforeValidator(run)


def after_rules(*checks: Check) -> AfterValidator:
    """Run ``checks`` on the coerced value (numeric ranges need an int)."""

    def run(value: Any, info: ValidationInfo) -> Any:
        for rule in checks:
            value = rule(value, info.field_name)
        return value

    return AfterValidator(run)


# ── Running validation ───────────────────────────────────────────────


def error_messages(exc: ValidationError) -> list[str]:
    """Turn a pydantic ValidationError into the API's list of messages."""
    messages: list[str] = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        if not loc:
            msg = NOT_AN_OBJECT
        elif err["type"] in RULE_ERRORS:
            msg = err["msg"]
        elif err["type"] == "missing":
            msg = NOT_NULL.format(field=loc[0])
        else:
            msg = INVALID.format(field=loc[0])
        if msg not in messages:
            messages.append(msg)
    return messages


def check(schema: type[BaseModel], payload: Any) -> list[str]:
    """Return every failing field's message; an empty list means valid."""
    try:
        schema.model_validate(payload)
    except ValidationError as exc:
        return error_messages(exc)
    return []


def validate(schema: type[BaseModel], payload: Any) -> BaseModel:
    """Validate ``payload`` against ``schema`` or raise RecordValidationError."""
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise RecordValidationError(error_messages(exc)) from exc
