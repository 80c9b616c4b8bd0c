"""Built-in host components registered from runtime configuration."""

from .database import DatabaseComponent, db_create_engine
from .remote_http import RemoteHttpComponent

__all__ = ["DatabaseComponent", "RemoteHttpComponent", "db_create_engine"]
