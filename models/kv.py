"""Database models for the key/value store."""
from datetime import datetime
from sqlalchemy import create_engine, Column, String, Text, DateTime
from sqlalchemy.orm import declarative_base, sessionmaker
import config

Base = declarative_base()


class KVEntry(Base):
    """One value under a namespaced key."""
    __tablename__ = "kv_entries"

    namespace = Column(String, primary_key=True)
    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


def make_engine(database_url: str = None):
    """Create an engine; sqlite needs cross-thread access under uvicorn."""
    url = database_url or config.DATABASE_URL
    return create_engine(
        url,
        connect_args={"check_same_thread": False} if url.startswith("sqlite") else {}
    )


# Database setup
engine = make_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Initialize database tables."""
    Base.metadata.create_all(bind=bind or engine)
