from .db import (
    SessionLocal,
    create_tables,
    engine,
    get_db,
    get_database_url,
)
from .models import Base, AvisoORM

__all__ = [
    "SessionLocal",
    "create_tables",
    "engine",
    "get_db",
    "get_database_url",
    "Base",
    "AvisoORM",
]
