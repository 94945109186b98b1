"""Submission store - persists normalized submissions, one table per form.

Uniqueness (email per table) is enforced by the database's unique
constraints. Concurrent inserts of the same email therefore produce exactly
one row; the loser surfaces as DuplicateKey.
"""

import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from sqlalchemy import select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from criticus.db.base import Base
from criticus.db.enums import FormKind
from criticus.db.models import MODEL_BY_KIND
from criticus.db.session import build_engine, build_session_factory
from criticus.services.errors import DuplicateKey, StorageUnavailable
from criticus.services.submission_validator import SubmissionRecord

logger = logging.getLogger(__name__)

# Driver error codes for unique/primary-key violations
SQLITE_UNIQUE_ERRORS = {"SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY"}
POSTGRES_UNIQUE_VIOLATION = "23505"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def duplicate_key_field(error: IntegrityError) -> str | None:
    """
    Return the violated column ("email" or "id") for a unique violation, else None.

    Reads structured driver codes only: sqlite3's sqlite_errorname,
    psycopg 3's sqlstate / psycopg2's pgcode.
    """
    orig = error.orig
    sqlite_name = getattr(orig, "sqlite_errorname", None)
    if sqlite_name is not None:
        if sqlite_name not in SQLITE_UNIQUE_ERRORS:
            return None
        return "id" if sqlite_name == "SQLITE_CONSTRAINT_PRIMARYKEY" else "email"

    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate != POSTGRES_UNIQUE_VIOLATION:
        return None
    constraint_name = getattr(getattr(orig, "diag", None), "constraint_name", None) or ""
    return "id" if constraint_name.endswith("_pkey") else "email"


class SubmissionStore:
    """
    Table-per-form persistence.

    Built once at process start (from_url), shared by all requests and
    closed at shutdown. Each call uses its own short-lived session.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        *,
        engine: Engine | None = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._session_factory = session_factory
        self._engine = engine if engine is not None else session_factory.kw["bind"]
        self._clock = clock

    @classmethod
    def from_url(cls, database_url: str, **kwargs) -> "SubmissionStore":
        engine = build_engine(database_url)
        return cls(build_session_factory(engine), engine=engine, **kwargs)

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_all(self) -> None:
        """Create missing tables (embedded mode and tests)."""
        Base.metadata.create_all(self._engine)

    def close(self) -> None:
        self._engine.dispose()

    def ping(self) -> None:
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def insert(
        self,
        kind: FormKind,
        record: SubmissionRecord,
        submission_id: uuid.UUID | None = None,
    ) -> uuid.UUID:
        """
        Insert one normalized record and return its id.

        The row is committed before this returns.

        Raises:
            DuplicateKey: uniqueness constraint violated (email, or a reused id)
            StorageUnavailable: any other persistence failure
        """
        kind = FormKind(kind)
        if record.kind != kind:
            raise ValueError(f"{type(record).__name__} cannot be stored as {kind.value}")

        model = MODEL_BY_KIND[kind]
        row_id = submission_id or uuid.uuid4()
        row = model(id=row_id, created_at=self._clock(), **record.to_row())

        with self._session_factory() as db:
            db.add(row)
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                field = duplicate_key_field(exc)
                if field is not None:
                    raise DuplicateKey(kind, field) from exc
                raise StorageUnavailable(kind, str(exc.orig)) from exc
            except SQLAlchemyError as exc:
                db.rollback()
                raise StorageUnavailable(kind, str(exc)) from exc

        logger.debug("Stored %s submission %s", kind.value, row_id)
        return row_id

    def list(self, kind: FormKind) -> list:
        """All rows for a form kind, newest first."""
        kind = FormKind(kind)
        model = MODEL_BY_KIND[kind]
        stmt = select(model).order_by(model.created_at.desc(), model.id.desc())
        try:
            with self._session_factory() as db:
                return list(db.scalars(stmt))
        except SQLAlchemyError as exc:
            raise StorageUnavailable(kind, str(exc)) from exc
