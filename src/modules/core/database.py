"""Database connection lifecycle.

``connect_db`` opens the default connection and checks it once.  A
failure is logged and reported as ``False``; callers decide whether a
dead store is fatal.
"""

from __future__ import annotations

import structlog
from django.db import DatabaseError, connections

logger = structlog.get_logger(__name__)


def connect_db(alias: str = "default") -> bool:
    """Connect to and authenticate against the database behind ``alias``."""
    conn = connections[alias]
    try:
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError as exc:
        logger.error(
            "database.connection_failed",
            alias=alias,
            error=f"Hubo un error al conectar a la BD: {exc}",
        )
        return False
    logger.info("database.connected", alias=alias, vendor=conn.vendor)
    return True
