import logging
import os

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from biztime.api.core.config import settings

logger = logging.getLogger(__name__)

# ----------------------------------------------------
# 1. DATABASE URL
# ----------------------------------------------------
DATABASE_URL = settings.DATABASE_URL


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _ensure_sqlite_dir(url: str) -> None:
    # sqlite:///relative/path.db or sqlite:////absolute/path.db
    if ":///" not in url:
        return
    path = url.split(":///", 1)[1].split("?", 1)[0]
    if path and path != ":memory:":
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)


# ----------------------------------------------------
# 2. CREATE ENGINE
# ----------------------------------------------------
def build_engine(url: str, **kwargs) -> Engine:
    """
    Creates an engine for `url`.

    SQLite needs check_same_thread=False because FastAPI runs sync
    handlers in a threadpool, and foreign keys switched on per connection
    so comp_code is enforced the same way a server database enforces it.
    """
    if _is_sqlite(url):
        _ensure_sqlite_dir(url)
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        engine = create_engine(url, connect_args=connect_args, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(url, pool_pre_ping=True, **kwargs)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = build_engine(DATABASE_URL, echo=settings.SQL_ECHO)

# ----------------------------------------------------
# 3. SESSION FACTORY
# ----------------------------------------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ----------------------------------------------------
# 4. BASE CLASS FOR ALL MODELS
# ----------------------------------------------------
Base = declarative_base()


# ----------------------------------------------------
# 5. DEPENDENCY FOR FASTAPI
# ----------------------------------------------------
def get_db():
    """
    FastAPI dependency — yields a DB session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ----------------------------------------------------
# 6. AUTO-MIGRATION LOGIC
# ----------------------------------------------------
def table_exists(bind: Engine, table_name: str) -> bool:
    return table_name in inspect(bind).get_table_names()


def run_migrations(bind: Engine | None = None):
    """
    Performs minimal startup migrations:
    - If a table doesn't exist → create it.
    - If columns missing → ADD COLUMN.

    Full schema changes belong in the alembic revisions.
    """

    from biztime.api.models.company_model import Company
    from biztime.api.models.invoice_model import Invoice

    bind = bind or engine

    for model in (Company, Invoice):
        table = model.__table__

        if not table_exists(bind, table.name):
            logger.info("[DB] Creating table: %s", table.name)
            table.create(bind=bind)
            continue

        existing_cols = [col["name"] for col in inspect(bind).get_columns(table.name)]

        for col_name, col_obj in table.columns.items():
            if col_name not in existing_cols:
                col_type = col_obj.type.compile(bind.dialect)
                alter = f"ALTER TABLE {table.name} ADD COLUMN {col_name} {col_type}"
                logger.info("[DB][MIGRATION] %s", alter)
                with bind.begin() as conn:
                    conn.execute(text(alter))

    logger.info("[DB] Migration complete.")
