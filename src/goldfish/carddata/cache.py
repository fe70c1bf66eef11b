"""On-disk cache of resolved card data (SQLite via SQLAlchemy)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from sqlalchemy import Column, DateTime, String, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as SQLSession, declarative_base, sessionmaker

from goldfish.errors import IoFailure
from goldfish.model.schema import normalize_name

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


Base = declarative_base()


class CachedCard(Base):
    """A card name resolved by the card-data service."""

    __tablename__ = "cards"

    key = Column(String, primary_key=True)  # normalized name
    name = Column(String, nullable=False)
    type_line = Column(String, nullable=False)
    fetched_at = Column(DateTime, default=utc_now)


# Module-level engine cache to avoid recreating engines
_engines: dict[str, Any] = {}


def get_engine(db_path: str | Path):
    """Create or get the cached SQLAlchemy engine for a cache file."""
    db_path = str(db_path)
    if db_path in _engines:
        return _engines[db_path]

    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)

    _engines[db_path] = engine
    return engine


def get_session(db_path: str | Path) -> SQLSession:
    """Open a session on the cache file, creating tables on first use."""
    return sessionmaker(bind=get_engine(db_path))()


def get_test_db() -> SQLSession:
    """Fresh in-memory cache database with tables created."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)()


class CardCache:
    """Name -> type line store. Entries never expire."""

    def __init__(self, session: SQLSession):
        self.session = session

    @classmethod
    def open(cls, db_path: str | Path) -> "CardCache":
        try:
            return cls(get_session(db_path))
        except (OSError, SQLAlchemyError) as e:
            raise IoFailure(f"cannot open card cache {db_path}: {e}") from e

    def get(self, name: str) -> Optional[CachedCard]:
        try:
            return self.session.get(CachedCard, normalize_name(name))
        except SQLAlchemyError as e:
            raise IoFailure(f"card cache lookup failed: {e}") from e

    def put(self, name: str, type_line: str, requested_as: Optional[str] = None) -> CachedCard:
        """Store a resolution under the normalized name it was requested by."""
        entry = CachedCard(
            key=normalize_name(requested_as if requested_as is not None else name),
            name=name,
            type_line=type_line,
            fetched_at=utc_now(),
        )
        try:
            entry = self.session.merge(entry)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise IoFailure(f"card cache write failed: {e}") from e
        logger.debug(f"Cached {name}: {type_line}")
        return entry

    def __len__(self) -> int:
        return self.session.query(CachedCard).count()

    def close(self) -> None:
        self.session.close()
