"""SQLAlchemy engine and session factory."""
from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from ballot_registry.core.config import Settings, get_settings
from ballot_registry.obs import instrument_sqlalchemy_engine


def build_engine(settings: Settings) -> Engine:
    connect_args: dict[str, object] = {}
    if settings.database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    engine = create_engine(settings.database_url, pool_pre_ping=True, connect_args=connect_args)
    if settings.enable_tracing:
        instrument_sqlalchemy_engine(engine)
    return engine


settings = get_settings()
engine = build_engine(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


__all__ = ["SessionLocal", "build_engine", "engine"]
