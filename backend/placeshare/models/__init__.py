"""ORM Models - SQLAlchemy declarative models for the database storage backend.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from placeshare.models.place import Place  # noqa: F401
from placeshare.models.user import User  # noqa: F401
