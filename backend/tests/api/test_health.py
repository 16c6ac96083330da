"""Tests for health check endpoints."""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from api import app


client = TestClient(app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self):
        response = client.get("/api/health")
        assert set(response.json().keys()) == {"status", "version"}

    @patch("api.routes.health.get_settings")
    def test_ready_with_memory_storage(self, mock_settings):
        mock_settings.return_value.storage_backend = "memory"
        response = client.get("/api/ready")
        assert response.status_code == 200
        assert response.json() == {"status": "ready", "storage": "memory"}

    @patch("api.routes.health.get_settings")
    def test_not_ready_without_supabase_url(self, mock_settings):
        mock_settings.return_value.storage_backend = "supabase"
        mock_settings.return_value.supabase_url = ""
        response = client.get("/api/ready")
        assert response.json()["status"] == "not_ready"
