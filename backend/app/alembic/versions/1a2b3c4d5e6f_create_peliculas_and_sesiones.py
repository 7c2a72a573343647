"""create peliculas and sesiones

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

import sqlalchemy as sa
import sqlmodel.sql.sqltypes
from alembic import op

# revision identifiers, used by Alembic.
revision = "1a2b3c4d5e6f"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "peliculas",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("director", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("time", sa.Integer(), nullable=True),
        sa.Column("trailer", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("poster_image", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("screenshot", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("synopsis", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("rating", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_peliculas_id"), "peliculas", ["id"], unique=False)

    op.create_table(
        "sesiones",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("movie_id", sa.Integer(), nullable=False),
        sa.Column("room_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["movie_id"], ["peliculas.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_sesiones_id"), "sesiones", ["id"], unique=False)
    op.create_index(
        op.f("ix_sesiones_movie_id"), "sesiones", ["movie_id"], unique=False
    )


def downgrade():
    op.drop_index(op.f("ix_sesiones_movie_id"), table_name="sesiones")
    op.drop_index(op.f("ix_sesiones_id"), table_name="sesiones")
    op.drop_table("sesiones")
    op.drop_index(op.f("ix_peliculas_id"), table_name="peliculas")
    op.drop_table("peliculas")
