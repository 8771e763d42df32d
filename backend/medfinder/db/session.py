"""Database session. SQLite compatible with connection pooling."""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from medfinder.core.config import settings

if settings.DATABASE_URL.startswith("sqlite"):
    # SQLite: NullPool for thread-safety, busy timeout for concurrent writers
    from sqlalchemy.pool import NullPool
    engine = create_engine(
        settings.DATABASE_URL,
        connect_args={
            "check_same_thread": False,
            "timeout": settings.DB_TIMEOUT_SECONDS,
        },
        poolclass=NullPool,
    )
else:
    # PostgreSQL/MySQL: QueuePool with sensible defaults
    engine = create_engine(
        settings.DATABASE_URL,
        pool_size=5,
        max_overflow=10,
        pool_timeout=settings.DB_TIMEOUT_SECONDS,
        pool_recycle=3600,
        pool_pre_ping=True,
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
