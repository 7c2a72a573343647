from sqlmodel import create_engine

from app.core.config import settings

# Make sure every table is registered on the metadata
from app.models import Movie, Screening  # noqa: F401

# The schema itself is owned by alembic (app/alembic)
engine = create_engine(str(settings.SQLALCHEMY_DATABASE_URI), pool_pre_ping=True)
