from sqlmodel import SQLModel, Session, create_engine

from recipe_costing.config import settings


def _connect_args(dsn: str) -> dict:
    # SQLite connections are shared with FastAPI's threadpool
    return {"check_same_thread": False} if dsn.startswith("sqlite") else {}


engine = create_engine(
    settings.database_dsn,
    connect_args=_connect_args(settings.database_dsn),
    pool_pre_ping=True,
)


def create_db_and_tables() -> None:
    SQLModel.metadata.create_all(engine)


def get_session() -> Session:
    return Session(engine)
