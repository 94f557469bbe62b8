"""SQLAlchemy database models and setup."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker

from vcintel.config import settings

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DBRecord(Base):
    """One JSON document stored under a named collection."""

    __tablename__ = "records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    collection = Column(String(100), nullable=False)
    record_id = Column(String(64), nullable=False)
    data = Column(Text, nullable=False)  # JSON object
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        UniqueConstraint("collection", "record_id", name="uq_record_collection_id"),
        Index("idx_record_collection", "collection"),
    )


# Database initialization
def init_db(db_url: Optional[str] = None) -> sessionmaker:
    """Initialize database and return session maker."""
    url = db_url or settings.database_url
    engine = create_engine(url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)


