import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from resume_builder.client.gateway import ResumeGateway
from resume_builder.client.local_storage import LocalStorage
from resume_builder.db.database import Base, get_db
from resume_builder.main import app


def make_resume(**overrides):
    """A complete resume body that passes store validation."""
    resume = {
        "name": "Ada Lovelace",
        "title": "Analyst",
        "phone": "+44 20 0000 0000",
        "email": "ada@example.com",
        "location": "London",
        "website": "https://ada.example.com",
        "summary": "Mathematician working on the Analytical Engine.",
        "experiences": [
            {
                "company": "Analytical Engine Co.",
                "position": "Programmer",
                "duration": "1842 - 1843",
                "responsibilities": ["Wrote the first published algorithm"],
            }
        ],
        "education": [
            {"institution": "Home tutoring", "degree": "Mathematics", "year": "1835"}
        ],
        "skills": ["Mathematics", "Algorithms"],
    }
    resume.update(overrides)
    return resume


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def override_db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _get_test_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def client(override_db):
    return TestClient(app)


@pytest.fixture
def gateway(override_db):
    return ResumeGateway(
        base_url="http://testserver/api",
        transport=httpx.ASGITransport(app=app),
    )


@pytest.fixture
def offline_gateway():
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    return ResumeGateway(
        base_url="http://localhost:5999/api",
        transport=httpx.MockTransport(refuse),
    )


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(directory=str(tmp_path / "backup"))
