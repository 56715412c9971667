"""Helpers to apply partial updates on SQLModel instances.

Only the fields present in the incoming payload are touched; everything else
keeps its stored value. ``updated_at`` is refreshed on every call, even when the
payload is empty, so callers can rely on it moving forward after any update.
"""

from __future__ import annotations

from typing import Any, Dict, Type, TypeVar

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel

from ..models import utcnow


TModel = TypeVar("TModel", bound=SQLModel)

_PROTECTED_FIELDS = {"id", "created_at", "updated_at"}


def _coerce_field_value(model: Type[TModel], field_name: str, value: Any) -> Any:
    """Coerce *value* to the python type declared in ``model`` for ``field_name``.

    Values that cannot be coerced are returned unchanged; the request schemas
    have already validated them.
    """

    if value is None:
        return None

    field = model.model_fields.get(field_name)
    if field is None:
        return value

    adapter = TypeAdapter(field.annotation)
    try:
        return adapter.validate_python(value)
    except ValidationError:
        return value


def normalize_payload_for_model(model: Type[TModel], data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of *data* restricted to ``model`` columns and coerced to their types."""

    coerced: Dict[str, Any] = {}
    for key, value in data.items():
        if key in _PROTECTED_FIELDS or key not in model.model_fields:
            continue
        coerced[key] = _coerce_field_value(model, key, value)
    return coerced


def apply_partial_update(instance: TModel, data: Dict[str, Any]) -> TModel:
    """Coerce *data*, assign it into *instance* and bump ``updated_at``."""

    model = type(instance)
    coerced = normalize_payload_for_model(model, data)
    for key, value in coerced.items():
        setattr(instance, key, value)
    if "updated_at" in model.model_fields:
        instance.updated_at = utcnow()
    return instance


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when *exc* was raised by a unique index or constraint."""

    orig = exc.orig
    # psycopg2 exposes pgcode, psycopg 3 sqlstate
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code is not None:
        return code == "23505"
    message = str(orig).lower()
    return "unique constraint" in message or "duplicate entry" in message


def commit_or_conflict(session: Session, instance: TModel, conflict: Type[Exception]) -> TModel:
    """Persist *instance*, mapping a unique-constraint violation to *conflict*.

    The handlers check for duplicates before writing, but two concurrent
    requests can both pass that check; the store's unique index rejects the
    second write and this turns it into the same domain error. Any other
    integrity failure is re-raised untouched.
    """

    session.add(instance)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        if not is_unique_violation(exc):
            raise
        raise conflict() from exc
    session.refresh(instance)
    return instance
