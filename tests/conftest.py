"""Test fixtures — fresh in-memory SQLite database per test + FastAPI client.

get_db is overridden so every request uses the test engine. StaticPool
keeps a single connection, which is what makes ":memory:" shareable
between the fixtures and the app.
"""

import os

# Keep the app module from touching a real database file on import
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from biztime.api.core.db import Base, build_engine, get_db
from biztime.api.main import app
from biztime.api.models.company_model import Company
from biztime.api.models.invoice_model import Invoice


@pytest.fixture
def test_engine():
    engine = build_engine("sqlite:///:memory:", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def test_db(test_session_factory):
    db = test_session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(test_session_factory):
    """FastAPI test client with DB dependency overridden.

    Server errors come back as 500 responses instead of being re-raised,
    so the catch-all handler is exercised the way a real client sees it.
    """
    def override_get_db():
        db = test_session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()


@pytest.fixture
def test_company(test_db):
    company = Company(code="apple", name="Apple Computer", description="A fast computer")
    test_db.add(company)
    test_db.commit()
    test_db.refresh(company)
    return {"code": company.code, "name": company.name, "description": company.description}


@pytest.fixture
def test_invoice(test_db, test_company):
    invoice = Invoice(comp_code=test_company["code"], amt=Decimal("350"))
    test_db.add(invoice)
    test_db.commit()
    test_db.refresh(invoice)
    return {
        "id": invoice.id,
        "comp_code": invoice.comp_code,
        "amt": f"{invoice.amt:.2f}",
        "paid": invoice.paid,
        "add_date": invoice.add_date.isoformat(),
        "paid_date": None,
    }
