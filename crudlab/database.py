"""Database engine and session factory.

Every exercise owns one engine (one SQLite file). The app factory stores
the session factory on app.state so get_db can hand out a session bound
to the right database.
"""

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker


def create_db_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # Requests are served from a threadpool; SQLite connections must be shareable
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
