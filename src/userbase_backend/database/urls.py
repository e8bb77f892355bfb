"""Connection URL helpers."""

from __future__ import annotations

from sqlalchemy.engine import make_url

# Async driver -> driver suffix usable by a blocking engine ("" is the default).
_SYNC_DRIVERS = {
    "aiosqlite": "",
    "asyncpg": "+psycopg",
    "aiomysql": "+pymysql",
    "asyncmy": "+pymysql",
}


def sync_database_url(url: str) -> str:
    """Return ``url`` with any asyncio-only driver swapped for a blocking one.

    ``postgresql+psycopg`` serves both modes and is returned untouched.
    """

    parsed = make_url(url)
    driver = parsed.get_driver_name()
    if driver not in _SYNC_DRIVERS:
        return url
    drivername = f"{parsed.get_backend_name()}{_SYNC_DRIVERS[driver]}"
    return parsed.set(drivername=drivername).render_as_string(hide_password=False)
