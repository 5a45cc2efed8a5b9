from inventory_api.database.base import Base
from inventory_api.database.engine import build_engine, engine
from inventory_api.database.session import SessionLocal, database_reachable, get_db

__all__ = ["Base", "SessionLocal", "build_engine", "database_reachable", "engine", "get_db"]
