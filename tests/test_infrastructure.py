"""Database bootstrap, settings and logging setup."""

import json
import logging

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.pool import StaticPool

from biztime.api.core.config import Settings
from biztime.api.core.db import build_engine, run_migrations
from biztime.api.core.observability import JSONFormatter, setup_logging


@pytest.fixture
def empty_engine():
    engine = build_engine("sqlite:///:memory:", poolclass=StaticPool)
    yield engine
    engine.dispose()


def test_run_migrations_creates_tables(empty_engine):
    run_migrations(empty_engine)

    tables = inspect(empty_engine).get_table_names()
    assert {"companies", "invoices"} <= set(tables)


def test_run_migrations_adds_missing_columns(empty_engine):
    with empty_engine.begin() as conn:
        conn.execute(text("CREATE TABLE companies (code VARCHAR PRIMARY KEY, name VARCHAR)"))

    run_migrations(empty_engine)

    cols = {c["name"] for c in inspect(empty_engine).get_columns("companies")}
    assert cols == {"code", "name", "description"}


def test_run_migrations_is_repeatable(empty_engine):
    run_migrations(empty_engine)
    run_migrations(empty_engine)
    assert "invoices" in inspect(empty_engine).get_table_names()


def test_sqlite_enforces_foreign_keys(empty_engine):
    run_migrations(empty_engine)

    with pytest.raises(IntegrityError):
        with empty_engine.begin() as conn:
            conn.execute(text("INSERT INTO invoices (comp_code, amt) VALUES ('nope', 10)"))


def test_invoice_column_defaults(empty_engine):
    run_migrations(empty_engine)

    with empty_engine.begin() as conn:
        conn.execute(text(
            "INSERT INTO companies (code, name, description) VALUES ('apple', 'Apple', 'x')"
        ))
        conn.execute(text("INSERT INTO invoices (comp_code, amt) VALUES ('apple', 350)"))
        row = conn.execute(text("SELECT paid, add_date, paid_date FROM invoices")).one()

    assert not row.paid
    assert row.add_date is not None
    assert row.paid_date is None


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///elsewhere.db")
    monkeypatch.setenv("LOG_FORMAT", "json")
    monkeypatch.setenv("SQL_ECHO", "true")

    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL == "sqlite:///elsewhere.db"
    assert settings.LOG_FORMAT == "json"
    assert settings.SQL_ECHO is True


def test_json_formatter_includes_extras():
    record = logging.LogRecord(
        "biztime.test", logging.WARNING, __file__, 1, "not found", None, None,
    )
    record.path = "/companies/x"
    record.status = 404

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "biztime.test"
    assert payload["message"] == "not found"
    assert payload["path"] == "/companies/x"
    assert payload["status"] == 404
    assert "method" not in payload


def test_setup_logging_does_not_stack_handlers():
    root = logging.getLogger()
    before = len(root.handlers)

    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")

    ours = [h for h in root.handlers if getattr(h, "_biztime", False)]
    assert len(ours) == 1
    assert len(root.handlers) == before + 1
    assert root.level == logging.INFO

    root.removeHandler(ours[0])
