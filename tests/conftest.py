from __future__ import annotations

import itertools

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.db.init_db import init_db
from app.db.session import build_engine, get_db
from app.main import app


@pytest.fixture()
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(session_factory):
    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    # Not entered as a context manager: the lifespan would create ./customers.db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_customer(client):
    phones = itertools.count(5550000001)

    def _make(**overrides) -> int:
        payload = {
            "first_name": "Test",
            "last_name": "Customer",
            "phone_number": str(next(phones)),
            "city": "Springfield",
        }
        payload.update(overrides)
        response = client.post("/api/customers", json=payload)
        assert response.status_code == 200, response.text
        return response.json()["customerId"]

    return _make


@pytest.fixture()
def make_address(client):
    def _make(customer_id: int, **overrides) -> int:
        payload = {
            "address_details": "12 Baker Street",
            "city": "Springfield",
            "state": "IL",
            "pin_code": "62701",
        }
        payload.update(overrides)
        response = client.post(f"/api/customers/{customer_id}/addresses", json=payload)
        assert response.status_code == 200, response.text
        return response.json()["addressId"]

    return _make
