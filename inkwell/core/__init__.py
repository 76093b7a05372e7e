"""Core app configuration, database access, security and domain errors."""

from inkwell.core.config import get_settings, settings
from inkwell.core.database import get_db, init_db

__all__ = ["get_settings", "settings", "get_db", "init_db"]
