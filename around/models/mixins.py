"""Mixins for SQLAlchemy models."""

import re
import secrets
import time
from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, String, func

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def new_object_id() -> str:
    """Generate a 24-character hex identifier: 4-byte timestamp followed by 8 random bytes."""
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def is_object_id(value: object) -> bool:
    """Check whether a value has the document identifier format."""
    return isinstance(value, str) and OBJECT_ID_PATTERN.fullmatch(value) is not None


def utcnow() -> datetime:
    return datetime.now(UTC)


class ObjectIdMixin:
    """Mixin adding a string primary key generated on the application side."""

    id = Column(String(24), primary_key=True, default=new_object_id)


class CreatedAtMixin:
    """Mixin to add a created_at timestamp column."""

    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )
