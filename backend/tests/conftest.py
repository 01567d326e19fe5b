import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from accounts.auth import hash_password
from accounts.database import get_session
from accounts.main import app
from accounts.models.user import Role, User


@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        # Seed admin user
        admin = User(
            username="admin",
            password_hash=hash_password("admin-pass"),
            role=Role.ADMIN.value,
        )
        session.add(admin)
        session.commit()
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def alice_id(client: TestClient) -> int:
    response = client.post(
        "/api/register",
        json={
            "username": "alice",
            "password": "secret1",
            "roll_number": "123456789012",
            "gender": "female",
            "email": "alice@example.com",
            "phone_number": "5551234567",
        },
    )
    return response.json()["userId"]
