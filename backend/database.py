# backend/database.py
from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker

from config import settings


def normalize_database_url(url: str) -> str:
    # Hosted Postgres hands out postgres:// URLs, SQLAlchemy wants postgresql://
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def engine_options(url: str) -> dict:
    # Request threads share the SQLite connection; server databases get stale
    # connections checked before use instead
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


SQLALCHEMY_DATABASE_URL = normalize_database_url(settings.DATABASE_URL)

engine = create_engine(SQLALCHEMY_DATABASE_URL, **engine_options(SQLALCHEMY_DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# One session per request, closed when the response is done
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    # Models must be imported so their tables are registered on Base.metadata
    import models.users  # noqa: F401
    import models.jobs  # noqa: F401
    import models.log  # noqa: F401
    Base.metadata.create_all(bind=engine)
