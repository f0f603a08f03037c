from __future__ import annotations

import logging
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from moneyvalue.db_base import Base
from moneyvalue.settings import get_settings

logger = logging.getLogger(__name__)


def get_database_url() -> str:
    return get_settings().database_url


def make_engine(url: str) -> Engine:
    # sqlite needs check_same_thread when sessions move between threads
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    return create_engine(url, connect_args=connect_args)


@lru_cache
def get_engine() -> Engine:
    url = get_database_url()
    logger.debug("Creating engine for %s", url)
    return make_engine(url)


@lru_cache
def get_session_factory() -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False)


def new_session() -> Session:
    return get_session_factory()()


def init_db(engine: Engine | None = None) -> None:
    # import here so every row class is registered on Base.metadata
    from moneyvalue.repositories.sql_account_repository import AccountRow  # noqa: F401

    target = engine if engine is not None else get_engine()
    Base.metadata.create_all(target)
