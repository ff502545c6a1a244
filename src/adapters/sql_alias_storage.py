"""SQL alias storage (SQLAlchemy 2.0 ORM).

Table `url_alias(pid, source, alias, langcode)`. One session per call; the
schema is created on first use. Driver errors surface as `StorageError`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Mapping

from sqlalchemy import Engine, Integer, String, create_engine, delete, select
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from adapters.alias_conditions import normalize_conditions, preferred_record
from core.domain.language import LANGCODE_NOT_SPECIFIED
from core.domain.models import AliasRecord
from core.errors import AliasConflictError, AliasNotFoundError, DuplicateAliasError, StorageError


logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class UrlAlias(Base):
    __tablename__ = "url_alias"

    pid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    source: Mapped[str] = mapped_column(String(255), index=True)
    alias: Mapped[str] = mapped_column(String(255), index=True)
    langcode: Mapped[str] = mapped_column(String(12), default=LANGCODE_NOT_SPECIFIED)

    def to_record(self) -> AliasRecord:
        return AliasRecord(pid=self.pid, source=self.source, alias=self.alias, langcode=self.langcode)


def build_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(database_url, future=True, echo=False)

    if url.database in (None, "", ":memory:"):
        # In-memory SQLite lives per connection: share a single one.
        return create_engine(
            database_url,
            future=True,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(database_url, future=True, echo=False)


class SqlAliasStorage:
    """SQLAlchemy implementation of `core.interfaces.alias_storage.AliasStorage`."""

    backend = "sql"

    def __init__(self, database_url: str | None = None, *, engine: Engine | None = None) -> None:
        if engine is None and database_url is None:
            raise ValueError("database_url or engine is required")
        try:
            if engine is None:
                engine = build_engine(database_url)
            Base.metadata.create_all(engine)
        except SQLAlchemyError as exc:
            raise StorageError(f"Cannot open alias database: {exc}") from exc
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with self._session_factory() as session, session.begin():
                yield session
        except SQLAlchemyError as exc:
            raise StorageError(f"Alias database error: {exc}") from exc

    def _where(self, fields: Mapping[str, Any]) -> list[Any]:
        return [getattr(UrlAlias, field) == value for field, value in fields.items()]

    def save(
        self,
        source: str,
        alias: str,
        langcode: str = LANGCODE_NOT_SPECIFIED,
        pid: int | None = None,
    ) -> AliasRecord:
        with self._session() as session:
            conflict_q = select(UrlAlias).where(
                UrlAlias.alias == alias,
                UrlAlias.langcode == langcode,
                UrlAlias.source != source,
            )
            if pid is not None:
                conflict_q = conflict_q.where(UrlAlias.pid != pid)
            conflict = session.scalars(conflict_q.limit(1)).first()
            if conflict is not None:
                raise AliasConflictError(alias, langcode, conflict.source)

            if pid is None:
                row = session.scalars(
                    select(UrlAlias).where(
                        UrlAlias.source == source,
                        UrlAlias.alias == alias,
                        UrlAlias.langcode == langcode,
                    ).limit(1)
                ).first()
                if row is not None:
                    return row.to_record()
                row = UrlAlias(source=source, alias=alias, langcode=langcode)
                session.add(row)
                op = "insert"
            else:
                row = session.get(UrlAlias, pid)
                if row is None:
                    raise AliasNotFoundError(pid)
                identical = session.scalars(
                    select(UrlAlias.pid).where(
                        UrlAlias.pid != pid,
                        UrlAlias.source == source,
                        UrlAlias.alias == alias,
                        UrlAlias.langcode == langcode,
                    ).limit(1)
                ).first()
                if identical is not None:
                    raise DuplicateAliasError(pid, identical)
                row.source = source
                row.alias = alias
                row.langcode = langcode
                op = "update"

            session.flush()
            record = row.to_record()

        logger.info(
            "Alias %s",
            op,
            extra={"backend": self.backend, "pid": record.pid, "source": source, "alias": alias, "langcode": langcode},
        )
        return record

    def delete(self, conditions: Mapping[str, Any]) -> int:
        fields = normalize_conditions(conditions)
        with self._session() as session:
            result = session.execute(delete(UrlAlias).where(*self._where(fields)))
            count = int(result.rowcount or 0)
        logger.info("Deleted %d alias(es)", count, extra={"backend": self.backend, "path": fields.get("source")})
        return count

    def load(self, conditions: Mapping[str, Any]) -> AliasRecord | None:
        fields = normalize_conditions(conditions)
        with self._session() as session:
            row = session.scalars(
                select(UrlAlias).where(*self._where(fields)).order_by(UrlAlias.pid).limit(1)
            ).first()
            return row.to_record() if row is not None else None

    def _records(self, **fields: Any) -> list[AliasRecord]:
        with self._session() as session:
            rows = session.scalars(select(UrlAlias).where(*self._where(fields)).order_by(UrlAlias.pid))
            return [row.to_record() for row in rows]

    def lookup_path_alias(self, path: str, langcode: str) -> str | None:
        record = preferred_record(self._records(source=path), langcode)
        return record.alias if record else None

    def lookup_path_source(self, alias: str, langcode: str) -> str | None:
        record = preferred_record(self._records(alias=alias), langcode)
        return record.source if record else None

    def alias_exists(self, alias: str, langcode: str, source: str | None = None) -> bool:
        q = select(UrlAlias.pid).where(UrlAlias.alias == alias, UrlAlias.langcode == langcode)
        if source is not None:
            q = q.where(UrlAlias.source != source)
        with self._session() as session:
            return session.scalars(q.limit(1)).first() is not None

    def list_aliases(self) -> list[AliasRecord]:
        return self._records()
