"""Tests for the health check endpoint."""

import unittest
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from api.main import app


class TestHealth(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)

    @patch('api.routes.health.is_configured', return_value=False)
    def test_in_memory_directory_is_healthy(self, _):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "healthy")
        self.assertIn("directory", body["services"])

    @patch('api.routes.health.get_mongodb_client')
    @patch('api.routes.health.is_configured', return_value=True)
    def test_mongodb_healthy(self, _, mock_get_client):
        mock_get_client.return_value = MagicMock()

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["services"]["mongodb"]["status"], "healthy")

    @patch('api.routes.health.get_mongodb_client', return_value=None)
    @patch('api.routes.health.is_configured', return_value=True)
    def test_mongodb_unavailable_is_503(self, _, __):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 503)
        body = response.json()
        self.assertEqual(body["status"], "unhealthy")
        self.assertEqual(body["services"]["mongodb"]["status"], "unhealthy")


if __name__ == '__main__':
    unittest.main()
