# storefront/data/database.py
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.utils.settings import DATABASE_URL, DATABASE_ECHO

Base = declarative_base()


def _on_sqlite_connect(dbapi_connection, connection_record):
    # pysqlite must not emit its own deferred BEGIN, _begin_immediate does it
    dbapi_connection.isolation_level = None

    # sqlite ignores ON DELETE CASCADE / SET NULL unless this is on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _begin_immediate(conn):
    # write lock taken at BEGIN, every read of the transaction already sees
    # the state it will write against (sqlite has no SELECT ... FOR UPDATE)
    conn.exec_driver_sql("BEGIN IMMEDIATE")


def make_engine(url: str = DATABASE_URL, echo: bool = DATABASE_ECHO) -> Engine:
    if not url.startswith("sqlite"):
        return create_engine(url, echo=echo, pool_pre_ping=True)

    if url in ("sqlite://", "sqlite:///:memory:"):
        # one connection shared by every session, in-memory db lives as long as it does
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False, "timeout": 30},
        )

    event.listen(engine, "connect", _on_sqlite_connect)
    event.listen(engine, "begin", _begin_immediate)
    return engine


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(bind=bind, autocommit=False, autoflush=False)


engine = make_engine()
SessionLocal = make_session_factory(engine)


def init_db(bind: Engine = engine) -> None:
    # all models have to be imported before create_all
    import storefront.data.models  # noqa: F401

    Base.metadata.create_all(bind=bind)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
