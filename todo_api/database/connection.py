from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from todo_api.config.errors import InternalError
from todo_api.config.settings import settings
import logging

logger = logging.getLogger(__name__)


def build_engine(url: str, echo: bool = False):
    """Create the engine, with SQLite-specific pooling for local and test runs"""
    if url.startswith("sqlite"):
        engine_kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            engine_kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **engine_kwargs)

    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_timeout=20,
        max_overflow=0
    )


# Built on first use so that a bad URL or missing driver is reported by
# init_db and per request instead of failing at import time.
_engine = None

def get_engine():
    global _engine
    if _engine is None:
        _engine = build_engine(settings.database_url, echo=settings.SQL_ECHO)
    return _engine

SessionLocal = sessionmaker(autocommit=False, autoflush=False)
Base = declarative_base()

def get_db():
    try:
        engine = get_engine()
    except Exception as e:
        logger.error(f"Database engine unavailable: {e}")
        raise InternalError()

    db = SessionLocal(bind=engine)
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def check_db() -> bool:
    """Return True if the store answers a trivial query"""
    try:
        with get_engine().connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database not reachable: {e}")
        return False

def init_db() -> bool:
    """
    Create all tables.

    A store that is unreachable at startup is logged and tolerated; requests
    will fail individually until it comes back.
    """
    # Model modules register their tables on Base.metadata when imported
    from todo_api.models import todo, user  # noqa: F401

    if settings.MONGO_URI and not settings.DATABASE_URL:
        logger.warning("MONGO_URI is not supported and is ignored; set DATABASE_URL instead")

    if not check_db():
        logger.error("Skipping table creation, database is unavailable")
        return False

    try:
        Base.metadata.create_all(bind=get_engine())
        logger.info("Database tables created/verified successfully")
        return True
    except Exception as e:
        logger.error(f"Error creating tables: {e}")
        return False
