# db.py
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from loguru import logger

from eventfence.settings import settings

Base = declarative_base()


def build_engine(url: str, **kwargs) -> Engine:
    """Crear el engine; en SQLite se activan las foreign keys"""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    engine = create_engine(url, echo=settings.database_echo, **kwargs)

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(bind: Optional[Engine] = None) -> None:
    """Crear las tablas si no existen"""
    # Registrar los modelos en Base.metadata
    import eventfence.models  # noqa: F401

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info(f"Tablas listas en {bind.url.render_as_string(hide_password=True)}")


def get_db():
    """Dependencia de FastAPI: una sesión por request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
