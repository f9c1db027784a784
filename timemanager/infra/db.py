"""
Key-value storage backends.

Architecture Decision: Why SQLAlchemy for a key-value store?
- One tiny table gives durable, crash-safe writes through SQLite
- The ORM keeps the statements free of hand-built SQL
- Swapping to another database only means changing the URL

The dashboard writes every value synchronously, so a plain (non-async) engine
is used.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from sqlalchemy import create_engine, select, delete, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker, Session


# Base class for all models
class Base(DeclarativeBase):
    pass


class KeyValueModel(Base):
    """SQLAlchemy model for a single stored value"""
    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)


class KeyValueStore(ABC):
    """
    Abstract interface for a durable string-to-string store.

    Values are UTF-8 text. There is no multi-key commit: each set() is
    independent.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored text, or None if the key is absent"""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store text under key, replacing any previous value"""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key; missing keys are ignored"""


class MemoryKeyValueStore(KeyValueStore):
    """Dict-backed store for tests and throwaway sessions"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class SqlKeyValueStore(KeyValueStore):
    """
    Key-value store on top of a SQLAlchemy engine.

    Each operation opens its own short session and commits immediately.
    """

    def __init__(self, db_url: str):
        self.engine = create_engine(db_url, echo=False)
        self.session_factory = sessionmaker(self.engine, class_=Session, expire_on_commit=False)
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        """Get a new database session"""
        return self.session_factory()

    def get(self, key: str) -> Optional[str]:
        with self.get_session() as session:
            result = session.execute(select(KeyValueModel).where(KeyValueModel.key == key))
            model = result.scalar_one_or_none()
            return model.value if model else None

    def set(self, key: str, value: str) -> None:
        with self.get_session() as session:
            model = session.get(KeyValueModel, key)
            if model is None:
                session.add(KeyValueModel(key=key, value=value))
            else:
                model.value = value
            session.commit()

    def delete(self, key: str) -> None:
        with self.get_session() as session:
            session.execute(delete(KeyValueModel).where(KeyValueModel.key == key))
            session.commit()

    def dispose(self) -> None:
        self.engine.dispose()


def open_store(db_url: str) -> KeyValueStore:
    """Open the store named by a settings URL"""
    if db_url == "memory":
        return MemoryKeyValueStore()
    return SqlKeyValueStore(db_url)
