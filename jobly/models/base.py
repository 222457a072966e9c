"""
Base model shared by all tables.
"""
from jobly.core.database import Base


class BaseModel(Base):
    """
    Abstract base for Jobly tables.

    Tables use natural keys (handle, username) or serial ids, so no
    key mixin is applied here.
    """

    __abstract__ = True
