from contextlib import contextmanager
import os
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///data/app.db")


def build_engine(url: str) -> Engine:
    if url.startswith("sqlite") and ":memory:" in url:
        # one shared connection, otherwise every checkout sees an empty database
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )
    # Ensure sqlite file parent directory exists to avoid 'unable to open database file'
    if url.startswith("sqlite:///"):
        db_path = url.split("sqlite:///")[-1]
        Path(db_path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, future=True)


def build_session_factory(engine: Engine):
    maker = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)

    @contextmanager
    def session_scope():
        session = maker()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return session_scope


engine = build_engine(DATABASE_URL)
get_session = build_session_factory(engine)


def init_db(bind: Engine = None) -> None:
    """Create all tables on the given engine (defaults to the module engine)."""
    from ..models import Base

    Base.metadata.create_all(bind or engine)
