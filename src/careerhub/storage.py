"""Key/value storage backends holding the job collection.

The store only ever needs three calls on a named slot: read it, overwrite
it, or remove it. ``SqliteStorage`` keeps slots in a single SQLAlchemy
table so the collection survives between runs; ``MemoryStorage`` keeps them
in a dict.
"""

from abc import ABC, abstractmethod

from sqlalchemy import Column, String, Text, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from careerhub.errors import StorageUnavailableError


class StoragePort(ABC):
    """Get/set/remove interface over named string slots."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the slot's value, or None when the slot is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove the slot. Removing an absent slot does nothing."""


class MemoryStorage(StoragePort):
    """Dict-backed storage. ``writes`` counts every ``set_item`` call."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items = dict(items or {})
        self.writes = 0

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self.writes += 1

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


# --- SQLite ---

class Base(DeclarativeBase):
    pass


class SlotRow(Base):
    __tablename__ = "storage"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)


def get_engine(db_path: str = "careerhub.db"):
    """Create SQLAlchemy engine."""
    return create_engine(f"sqlite:///{db_path}", echo=False)


def init_db(db_path: str = "careerhub.db"):
    """Initialize database and create tables."""
    engine = get_engine(db_path)
    Base.metadata.create_all(engine)
    return engine


def get_session(engine) -> Session:
    """Create a new database session."""
    session_factory = sessionmaker(bind=engine)
    return session_factory()


class SqliteStorage(StoragePort):
    """Slots stored as rows of the ``storage`` table.

    Each call opens its own session and commits before returning, so a
    write is durable as soon as ``set_item`` returns.
    """

    def __init__(self, engine) -> None:
        self._engine = engine

    def get_item(self, key: str) -> str | None:
        try:
            with get_session(self._engine) as session:
                row = session.get(SlotRow, key)
                return row.value if row else None
        except SQLAlchemyError as e:
            raise StorageUnavailableError(f"Cannot read storage slot '{key}': {e}") from e

    def set_item(self, key: str, value: str) -> None:
        try:
            with get_session(self._engine) as session:
                session.merge(SlotRow(key=key, value=value))
                session.commit()
        except SQLAlchemyError as e:
            raise StorageUnavailableError(f"Cannot write storage slot '{key}': {e}") from e

    def remove_item(self, key: str) -> None:
        try:
            with get_session(self._engine) as session:
                session.query(SlotRow).filter_by(key=key).delete()
                session.commit()
        except SQLAlchemyError as e:
            raise StorageUnavailableError(f"Cannot clear storage slot '{key}': {e}") from e
