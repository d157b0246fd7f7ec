"""
============================================================
CRC CARD
============================================================
Module: alembic/env.py (migration runtime)

Responsibilities:
  - Run the hand-written master data migrations online or offline.
  - Resolve the target database: `-x database_url=...` first, then the
    DATABASE_URL the API itself reads (pydantic-settings).

Collaborators:
  - masterdata.crosscutting.config.get_settings
  - SQLAlchemy (engine for the migration connection only)

Policy:
  - No ORM metadata. Tables are declared in versions/*.py.
============================================================
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from masterdata.crosscutting.config import get_settings

alembic_cfg = context.config

if alembic_cfg.config_file_name is not None:
    fileConfig(alembic_cfg.config_file_name, disable_existing_loggers=False)

_DRIVER_PREFIXES = ("postgresql://", "postgres://")


def as_psycopg_url(database_url: str) -> str:
    """SQLAlchemy needs the psycopg 3 dialect spelled out."""
    for prefix in _DRIVER_PREFIXES:
        if database_url.startswith(prefix):
            return "postgresql+psycopg://" + database_url[len(prefix) :]
    return database_url


def migration_url() -> str:
    override = context.get_x_argument(as_dictionary=True).get("database_url")
    return as_psycopg_url(override or get_settings().database_url)


def run_migrations_offline() -> None:
    """Emit SQL to stdout (alembic upgrade --sql)."""
    context.configure(
        url=migration_url(),
        target_metadata=None,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(migration_url(), poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            context.configure(connection=connection, target_metadata=None)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
