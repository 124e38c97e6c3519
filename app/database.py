from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.config import get_settings

# Load .env file (DATABASE_URL lives there)
load_dotenv()

DATABASE_URL = get_settings().DATABASE_URL

_engine_kwargs: dict = {}
if DATABASE_URL.startswith("sqlite"):
    # SQLite is only used for local runs and tests; share one connection across threads
    _engine_kwargs["connect_args"] = {"check_same_thread": False}
    if ":memory:" in DATABASE_URL or DATABASE_URL in ("sqlite://", "sqlite:///"):
        _engine_kwargs["poolclass"] = StaticPool

engine = create_engine(
    DATABASE_URL,
    future=True,
    pool_pre_ping=not DATABASE_URL.startswith("sqlite"),
    **_engine_kwargs,
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    future=True,
)

Base = declarative_base()


def get_db():
    """
    Request-scoped session dependency. Schema changes go through Alembic
    (migrations/versions), never through create_all.
    """
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
