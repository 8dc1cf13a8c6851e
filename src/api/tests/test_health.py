"""Unit tests for health and root endpoints."""

import os
import tempfile
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from api.main import app, SERVICE_NAME, VERSION
from api.dependencies import get_optional_word_repo
from adapter.fake.word_repository import FakeWordRepository


class TestHealth(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)
        self.repo = FakeWordRepository()
        app.dependency_overrides[get_optional_word_repo] = lambda: self.repo

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_healthy(self):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "healthy")
        self.assertEqual(data["services"]["database"]["status"], "healthy")

    def test_degraded(self):
        self.repo.healthy = False

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["status"], "degraded")

    def test_store_not_opened_is_degraded(self):
        """Test a missing store reports the usual degraded body."""
        app.dependency_overrides[get_optional_word_repo] = lambda: None

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 503)
        data = response.json()
        self.assertEqual(data["status"], "degraded")
        self.assertEqual(data["services"]["database"]["status"], "unhealthy")
        self.assertNotIn("detail", data)

    def test_root(self):
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            "service": SERVICE_NAME,
            "version": VERSION,
            "status": "running",
        })


class TestLifespan(unittest.TestCase):
    """Test the store is opened and closed with the app."""

    def test_store_opened_and_closed(self):
        with tempfile.TemporaryDirectory() as tmp:
            with patch.dict(os.environ, {"WORDBOOK_DATA_DIR": os.path.join(tmp, "data")}):
                with TestClient(app) as client:
                    repo = app.state.word_repository
                    self.assertIsNotNone(repo)
                    response = client.post("/words", json={"word": "hello", "definition": "a greeting"})
                    self.assertEqual(response.status_code, 201)
                    self.assertTrue(os.path.exists(os.path.join(tmp, "data", "database.sqlite")))

                self.assertIsNone(app.state.word_repository)


if __name__ == '__main__':
    unittest.main()
