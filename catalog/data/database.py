# catalog/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from catalog.utils.settings import DATABASE_URL

Base = declarative_base()


def make_engine(url: str = DATABASE_URL, **kwargs) -> Engine:
    #sqlite nie lubi sesji z innych watkow (uvicorn threadpool)
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, **kwargs)


def make_session_factory(bind: Engine) -> sessionmaker:
    # expire_on_commit=False: rekordy zwracane z gatewaya maja byc czytelne po zamknieciu sesji
    return sessionmaker(bind=bind, autocommit=False, autoflush=False, expire_on_commit=False)


engine = make_engine()
SessionLocal = make_session_factory(engine)


def init_db(bind: Engine = engine) -> None:
    """Creates all tables registered on Base.metadata."""
    import catalog.data.models  # noqa: F401

    Base.metadata.create_all(bind=bind)
