"""
Point liftlog at an in-memory SQLite database before any test module imports
liftlog.db, then create the schema once for the whole run.
"""
import os

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"

from liftlog.db import Base, engine  # noqa: E402
from liftlog import models  # noqa: E402,F401

Base.metadata.create_all(bind=engine)
