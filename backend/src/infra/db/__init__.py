from infra.db.models import Base, OutageModel
from infra.db.session import (
    build_database_url,
    check_database_connection,
    create_database_schema,
    create_engine,
    create_session_factory,
    session_scope,
)

__all__ = [
    "Base",
    "OutageModel",
    "build_database_url",
    "check_database_connection",
    "create_database_schema",
    "create_engine",
    "create_session_factory",
    "session_scope",
]
