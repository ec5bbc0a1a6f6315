import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lodge.database import get_db, enable_sqlite_foreign_keys
# Import all model classes to ensure they're registered with SQLAlchemy
from lodge.models import Base, Room, Tenant, User
# Import FastAPI app AFTER model imports
from lodge.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """FastAPI test client with test database"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def build_tenant_data(n: int = 0, **overrides) -> dict:
    """
    Valid tenant payload (camelCase, as sent by clients).

    Each n gets its own Aadhar and phone numbers so several tenants can coexist.
    """
    data = {
        "name": f"Tenant {n}",
        "fatherName": f"Father {n}",
        "villageName": "Rampur",
        "tehsil": "Sadar",
        "policeStation": "Kotwali",
        "district": "Bareilly",
        "pincode": "243001",
        "state": "Uttar Pradesh",
        "email": None,
        "aadharNumber": f"1234567890{n:02d}",
        "phoneNumber": f"98765432{n:02d}",
        "fatherPhoneNumber": f"91234567{n:02d}",
    }
    data.update(overrides)
    return data


@pytest.fixture
def tenant_data():
    """Factory for valid tenant payloads"""
    return build_tenant_data


@pytest.fixture
def make_room(db_session):
    """Factory creating a room directly in the database"""

    def _make_room(name: str = "F1", **fields) -> Room:
        room = Room(name=name, **fields)
        db_session.add(room)
        db_session.commit()
        db_session.refresh(room)
        return room

    return _make_room


@pytest.fixture
def room(make_room) -> Room:
    return make_room("F1")


@pytest.fixture
def make_tenant(client):
    """Factory creating a tenant through the API; returns the response JSON"""

    def _make_tenant(room_id: int, n: int = 0, **overrides) -> dict:
        response = client.post("/api/tenants", json={**build_tenant_data(n, **overrides), "roomId": room_id})
        assert response.status_code == 201, response.json()
        return response.json()

    return _make_tenant
