"""SQLAlchemy models for the pesatrack database."""

from typing import Optional
from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()

DEFAULT_STORE_TIMEOUT = 30.0


class LedgerEntry(Base):
    """Ledger entry model."""

    __tablename__ = "ledger_entries"

    id = Column(Integer, primary_key=True)
    date = Column(DateTime, nullable=False)
    description = Column(String, nullable=False)
    amount = Column(Float, nullable=False)
    direction = Column(String(6), nullable=False)
    category = Column(String, nullable=False)
    balance = Column(Float, nullable=True)
    receipt_number = Column(String, nullable=True)
    created_at = Column(DateTime, nullable=False)

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_amount_non_negative"),
        CheckConstraint("direction IN ('debit', 'credit')", name="ck_direction"),
        Index("ix_ledger_entries_date", "date"),
        Index("ix_ledger_entries_category", "category"),
    )


def create_session_factory(
    database_url: str, timeout: Optional[float] = None
) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory.

    ``timeout`` bounds how long a call waits: the SQLite busy timeout, or the
    connection pool checkout timeout for other backends.
    """
    engine_kwargs = {}
    if timeout is not None:
        if database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"timeout": timeout}
        else:
            engine_kwargs["pool_timeout"] = timeout
    engine = create_engine(database_url, echo=False, **engine_kwargs)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
