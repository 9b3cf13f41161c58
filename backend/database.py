"""Database configuration and session management."""

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from config import DATABASE_URL

MIGRATIONS_DIR = Path(__file__).parent / "db_migrations"


def make_engine(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, echo=False)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


engine = make_engine(DATABASE_URL)

SessionLocal = make_session_factory(engine)


class Base(DeclarativeBase):
    pass


def init_db(bind: Engine = engine):
    import orm  # noqa: F401

    Base.metadata.create_all(bind=bind)


def upgrade_schema(url: str = DATABASE_URL) -> None:
    """Apply Alembic migrations up to head.

    The config is built in code so an installed package needs only the
    ``db_migrations`` directory, not ``alembic.ini``.
    """
    alembic_cfg = Config()
    alembic_cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    # configparser interpolation: escape '%' in URL-encoded passwords
    alembic_cfg.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    command.upgrade(alembic_cfg, "head")
