import pytest
from fastapi.testclient import TestClient

from peer_review.main import app


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)
