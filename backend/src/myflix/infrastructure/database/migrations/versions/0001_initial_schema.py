"""Initial schema — identity, catalog

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ── Extensions ──────────────────────────────────────────────────────────
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ── Schemas ──────────────────────────────────────────────────────────────
    op.execute("CREATE SCHEMA IF NOT EXISTS identity")
    op.execute("CREATE SCHEMA IF NOT EXISTS catalog")

    # ── catalog.movies ───────────────────────────────────────────────────────
    op.create_table(
        "movies",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("genre_name", sa.Text, nullable=False),
        sa.Column("genre_description", sa.Text, nullable=True),
        sa.Column("director_name", sa.Text, nullable=False),
        sa.Column("director_bio", sa.Text, nullable=True),
        sa.Column("director_birth_year", sa.Integer, nullable=True),
        sa.Column("director_death_year", sa.Integer, nullable=True),
        sa.Column("actors", postgresql.ARRAY(sa.Text), nullable=False, server_default=sa.text("'{}'")),
        sa.Column("image_path", sa.Text, nullable=True),
        sa.Column("featured", sa.Boolean, nullable=False, server_default=sa.text("false")),
        schema="catalog",
    )
    op.create_index("ix_movies_title", "movies", ["title"], schema="catalog")
    op.create_index("ix_movies_genre_name", "movies", ["genre_name"], schema="catalog")
    op.create_index("ix_movies_director_name", "movies", ["director_name"], schema="catalog")

    # ── identity.users ───────────────────────────────────────────────────────
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("username", sa.String(50), nullable=False, unique=True),
        sa.Column("email", sa.Text, nullable=False),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column("birthday", sa.Date, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("username ~ '^[A-Za-z0-9]{5,}$'", name="ck_users_username_alnum"),
        schema="identity",
    )

    # ── identity.user_favorites ──────────────────────────────────────────────
    op.create_table(
        "user_favorites",
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("movie_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("user_id", "movie_id"),
        sa.ForeignKeyConstraint(["user_id"], ["identity.users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["movie_id"], ["catalog.movies.id"], ondelete="CASCADE"),
        schema="identity",
    )


def downgrade() -> None:
    op.drop_table("user_favorites", schema="identity")
    op.drop_table("users", schema="identity")
    op.drop_index("ix_movies_director_name", table_name="movies", schema="catalog")
    op.drop_index("ix_movies_genre_name", table_name="movies", schema="catalog")
    op.drop_index("ix_movies_title", table_name="movies", schema="catalog")
    op.drop_table("movies", schema="catalog")
    op.execute("DROP SCHEMA IF EXISTS identity")
    op.execute("DROP SCHEMA IF EXISTS catalog")
