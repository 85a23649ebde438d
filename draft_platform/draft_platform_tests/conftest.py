import os
import tempfile

import pytest
from fastapi.testclient import TestClient

# Point the service at a throwaway SQLite file before any module reads settings
_db_dir = tempfile.mkdtemp(prefix="spirit11-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'spirit11.db')}"

from draft_platform.draft_platform.draft_service.main import app  # noqa: E402
from draft_platform.draft_platform.draft_service.db import Base, engine  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
