import os

# Configure the app for tests before anything imports petmarket.core.config
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENCODING_SECRET_KEY"] = "test-secret-key"
os.environ["RATE_LIMIT_ENABLED"] = "0"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from main import app
from petmarket.core.config import settings
from petmarket.core.rate_limiter import limiter
from petmarket.database.core import get_db
from petmarket.database.models import Base

# Use an in-memory SQLite database for testing. StaticPool keeps a single
# connection so the request threads see the tables created here.
TEST_SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

TEST_EMAIL = "a@b.com"
TEST_PASSWORD = "pw"


@pytest.fixture(scope="function")
def db_session():
    """
    Creates a new, isolated in-memory database session for each test.
    """
    engine = create_engine(
        TEST_SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session, tmp_path, monkeypatch):
    """
    Creates a TestClient for the app with the test database and a temp upload dir.
    """
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path / "uploads"))
    limiter.enabled = False

    def override_get_db():
        try:
            yield db_session
        finally:
            db_session.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def signup_and_login(client, email=TEST_EMAIL, password=TEST_PASSWORD):
    """Create an account through the API and return (user_id, headers)."""
    response = client.post("/signup", json={"email": email, "password": password})
    assert response.status_code == 200, response.text

    response = client.post("/login", json={"username": email, "password": password})
    assert response.status_code == 200, response.text
    body = response.json()
    return body["userId"], {"Authorization": f"Bearer {body['token']}"}


@pytest.fixture(scope="function")
def auth(client):
    """(user_id, headers) for a freshly registered user."""
    return signup_and_login(client)


@pytest.fixture(scope="function")
def auth_headers(auth):
    return auth[1]


@pytest.fixture(scope="function")
def create_pet(client, auth_headers):
    """Factory that lists a pet through /add-pet and returns its id."""
    def _create(pname="Rex", headers=None, **fields):
        data = {
            "pname": pname,
            "pdesc": fields.get("pdesc", "Friendly dog"),
            "price": fields.get("price", "120"),
            "category": fields.get("category", "dog"),
            "contactNumber": fields.get("contactNumber", "555-0100"),
        }
        files = {"pimage": ("dog.png", b"\x89PNG fake image", "image/png")}
        response = client.post("/add-pet", data=data, files=files, headers=headers or auth_headers)
        assert response.status_code == 200, response.text

        pets = client.post("/my-pets", headers=headers or auth_headers).json()["pets"]
        return next(p["_id"] for p in reversed(pets) if p["pname"] == pname)
    return _create
