import os
import shutil
import tempfile

# Set environment variables BEFORE any imports that might use settings
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_bistro.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["PROBLEM_BASE_URI"] = "https://bistro.test/problems"
os.environ["GENERIC_USER_MESSAGE"] = "Something went wrong on our side. Please try again later."

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.main import app


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()
        shutil.rmtree(temp_db_dir, ignore_errors=True)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override.

    Server exceptions are not re-raised so unhandled failures can be checked
    through the 500 problem document the client receives.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from app.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def kitchen(db):
    """Create a kitchen for testing."""
    from app.repositories.kitchen import create_kitchen

    return create_kitchen(db, name="Thai")


@pytest.fixture(scope="function")
def restaurant(db, kitchen):
    """Create a restaurant for testing."""
    from decimal import Decimal

    from app.repositories.restaurant import create_restaurant

    return create_restaurant(
        db, name="Thai Gourmet", shipping_fee=Decimal("10.00"), kitchen_id=kitchen.id
    )
