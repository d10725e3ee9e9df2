"""Utilities for ensuring string primary keys are populated."""
from __future__ import annotations

import uuid
from typing import Type

from sqlalchemy import event
from sqlalchemy.orm import Mapper


def new_id() -> str:
    """Return a fresh opaque identifier (32 lowercase hex characters)."""
    return uuid.uuid4().hex


def register_string_pk_listener(model: Type[object], pk_name: str = "id") -> None:
    """Ensure ``model`` receives an opaque string primary key before insert.

    Identifiers are exposed to clients verbatim, so they are random rather than
    sequential and never reveal how many rows another user owns. The listener
    only assigns a value when the instance does not already carry one, which
    lets tests and fixtures pin ids explicitly.
    """

    table = getattr(model, "__table__", None)
    if table is None or pk_name not in table.c:
        raise ValueError(f"Model {model!r} does not expose a '{pk_name}' column")

    @event.listens_for(model, "before_insert", propagate=True)
    def _assign_string_pk(_: Mapper, connection, target) -> None:  # pragma: no cover - SQLAlchemy callback
        if getattr(target, pk_name) is not None:
            return
        setattr(target, pk_name, new_id())
