"""
Alembic environment for the *airlog* project.

Key points
──────────
• Reads the database URL from the project settings.
• Uses the single declarative `Base.metadata` for autogeneration.
• Works in both online & offline modes.
"""

from __future__ import annotations

from logging.config import fileConfig

from sqlalchemy import create_engine, pool

from alembic import context
from airlog_core.config.environments import get_settings
from airlog_server.adapters.db.sqlalchemy_models import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)  # pulls in logging
target_metadata = Base.metadata  # for ‑‑autogenerate


def get_url() -> str:
    """Return the SQLAlchemy‑compatible DB URL from project settings."""
    return get_settings().DATABASE_URL


def run_migrations_offline() -> None:
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(
        get_url(),
        poolclass=pool.NullPool,
        future=True,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
