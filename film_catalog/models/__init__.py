import functools
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

db = SQLAlchemy()


def _unicode_lower(value):
    return value.lower() if value is not None else None


@event.listens_for(Engine, "connect")
def _configure_sqlite(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        # sqlite ignores ON DELETE CASCADE unless asked per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        # built-in lower() only folds ASCII, so "Š" and "š" would differ
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampMixin:
    created_at = db.Column(
        db.DateTime,
        default=utcnow,               # on INSERT
        server_default=db.func.now(),
        nullable=False
    )
    updated_at = db.Column(
        db.DateTime,
        default=utcnow,
        onupdate=utcnow,              # on UPDATE
        server_default=db.func.now(),
        nullable=False
    )

    def touch(self):
        """Advance updated_at for mutations that only change the join table."""
        self.updated_at = utcnow()


class IdentityMixin:
    """Entities are equal when they share an id; unsaved ones only equal themselves."""

    def __eq__(self, other):
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        return self.id is not None and self.id == other.id

    def __hash__(self):
        # constant per type: the id is assigned on flush and the hash must not change,
        # so hashed lookups degrade to a linear scan over equal-typed entities
        return hash(type(self))


@contextmanager
def transaction():
    """Commit the session on success, roll back and re-raise on any error."""
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def transactional(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with transaction():
            return func(*args, **kwargs)
    return wrapper


from film_catalog.models.film_actor import film_actor  # noqa: E402
from film_catalog.models.film import Film  # noqa: E402
from film_catalog.models.actor import Actor  # noqa: E402

__all__ = ["db", "film_actor", "Film", "Actor", "transaction", "transactional", "utcnow"]
