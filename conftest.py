import pytest
from fastapi.testclient import TestClient

import models  # noqa: F401  (registrasi tabel ke Base)
from database import Base, SessionLocal, engine
from main import app


@pytest.fixture
def db():
    """Sesi database in-memory yang bersih untuk setiap tes."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    with TestClient(app) as test_client:
        yield test_client
