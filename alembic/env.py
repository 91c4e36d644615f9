"""Alembic environment for the rental lifecycle schema.

The database URL comes from `DATABASE_URL` (or `.env`) unless overridden with
`alembic -x database_url=... upgrade head`.
"""
# pylint: disable=no-member,invalid-name,wrong-import-order

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from rental_lifecycle.config import config_load_database_url

alembic_config = context.config

if alembic_config.config_file_name is not None:
    fileConfig(alembic_config.config_file_name, disable_existing_loggers=False)


def _migration_resolve_database_url() -> str:
    override_url = context.get_x_argument(as_dictionary=True).get("database_url", "").strip()
    return override_url or config_load_database_url()


def _migration_run_offline(database_url: str) -> None:
    context.configure(
        url=database_url,
        target_metadata=None,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _migration_run_online(database_url: str) -> None:
    engine = create_engine(database_url, poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            context.configure(connection=connection, target_metadata=None, transaction_per_migration=True)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


resolved_database_url = _migration_resolve_database_url()
if context.is_offline_mode():
    _migration_run_offline(resolved_database_url)
else:
    _migration_run_online(resolved_database_url)
