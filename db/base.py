from urllib.parse import urlparse

from peewee import Database, DatabaseProxy, Model, SqliteDatabase
from playhouse.db_url import parse
from playhouse.pool import PooledPostgresqlDatabase

from core.logging import get_logger

log = get_logger("db")

# Bound at startup (init_db) or by tests (bind_database); models only see the proxy
db = DatabaseProxy()


class BaseModel(Model):
    class Meta:
        database = db


def create_database(
    database_url: str,
    max_connections: int = 20,
    stale_timeout: int = 300,
) -> Database:
    """
    Build a peewee database from a URL.

    postgres/postgresql URLs get a connection pool, sqlite URLs a plain
    SqliteDatabase (e.g. sqlite:///boxscores.db or sqlite:////abs/path.db).
    """
    scheme = urlparse(database_url).scheme
    parsed_url = parse(database_url)
    db_name = parsed_url.pop("database")

    if scheme in ("postgres", "postgresql"):
        return PooledPostgresqlDatabase(
            db_name,
            max_connections=max_connections,
            stale_timeout=stale_timeout,
            **parsed_url,
        )
    if scheme == "sqlite":
        return SqliteDatabase(db_name, pragmas={"journal_mode": "wal"})
    raise ValueError(f"Unsupported database URL scheme: {scheme!r}")


def bind_database(database: Database) -> Database:
    """Point every model at ``database`` and create missing tables."""
    from .models import PlayerGame, TeamGame, TeamName

    db.initialize(database)
    db.create_tables([TeamName, PlayerGame, TeamGame], safe=True)
    return database


# Function to initialize database connection
def init_db(database_url: str, **kwargs) -> Database:
    """Initialize database connection and create tables if they don't exist."""
    database = create_database(database_url, **kwargs)
    bind_database(database)
    database.connect(reuse_if_open=True)
    log.info("database_initialized", backend=type(database).__name__)
    return database


# Function to close database connection
def close_db():
    """Close database connection."""
    if db.obj is not None and not db.is_closed():
        db.close()
        log.info("database_closed")
