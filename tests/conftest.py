import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from api.main import create_app
from config import Settings
from database.database import create_db_engine, create_session_factory, init_db
from database.models import Registration as RegistrationRecord
from services.registration_store import RegistrationStore


@pytest.fixture
def valid_payload():
    return {
        "event": "Hackathon",
        "teamName": "Alpha",
        "teamLeader": "Asha",
        "phoneNo": "9876543210",
        "email": "a@b.com",
        "rollNo": "R1",
        "members": ["Asha", "Vik"],
    }


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", ENVIRONMENT="test", CORS_ORIGINS="*")


@pytest.fixture
def engine():
    """In-memory SQLite shared by all connections of one test"""
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def store(session_factory):
    return RegistrationStore(session_factory)


@pytest.fixture
def fetch_records(session_factory):
    def _fetch():
        db = session_factory()
        try:
            return db.query(RegistrationRecord).all()
        finally:
            db.close()
    return _fetch


@pytest.fixture
def app(settings, engine):
    return create_app(settings=settings, engine=engine)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
