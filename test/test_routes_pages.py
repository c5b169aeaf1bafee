"""
Page route tests - rendered HTML through the full application
"""

from __future__ import annotations

from themehooks.config import Settings

CLASS_MESSAGE = "This is rendered using the class-based way of implementing theme hooks!"
LEGACY_MESSAGE = "This is rendered using the legacy way of implementing theme hooks!"


class TestPageRoutes:
    def test_class_hooks_page(self, client):
        response = client.get("/class-hooks")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert CLASS_MESSAGE in response.text
        assert 'class="class-hooks-message"' in response.text

    def test_class_hooks_page_attaches_styles_once(self, client):
        response = client.get("/class-hooks")
        assert response.text.count("/static/class_hooks/custom_styles.css") == 1

    def test_legacy_hooks_page(self, client):
        response = client.get("/legacy-hooks")
        assert response.status_code == 200
        assert LEGACY_MESSAGE in response.text
        assert 'class="legacy-hooks-message"' in response.text

    def test_legacy_hooks_page_has_no_attachments(self, client):
        response = client.get("/legacy-hooks")
        assert "custom_styles.css" not in response.text

    def test_page_title(self, client):
        response = client.get("/class-hooks")
        assert "<h1>Class Hooks</h1>" in response.text

    def test_attached_stylesheet_is_served(self, client):
        response = client.get("/static/class_hooks/custom_styles.css")
        assert response.status_code == 200
        assert ".class-hooks-message" in response.text

    def test_unknown_page_returns_404_json(self, client):
        response = client.get("/not-a-page")
        assert response.status_code == 404
        assert response.json()["error"]["error_code"] == "RESOURCE_NOT_FOUND"

    def test_disabled_extension_has_no_page(self):
        from fastapi.testclient import TestClient

        from main import create_app

        with TestClient(create_app(Settings(enabled_extensions=["legacy_hooks"]))) as client:
            assert client.get("/class-hooks").status_code == 404
            assert client.get("/legacy-hooks").status_code == 200


class TestHelpPages:
    def test_class_hooks_help(self, client):
        response = client.get("/admin/help/class_hooks")
        assert response.status_code == 200
        assert "class-based way of implementing hooks with dependency injection" in response.text

    def test_help_html_not_escaped(self, client):
        response = client.get("/admin/help/class_hooks")
        assert "<p>This module demonstrates" in response.text

    def test_legacy_hooks_help(self, client):
        response = client.get("/admin/help/legacy_hooks")
        assert response.status_code == 200
        assert "legacy procedural way" in response.text

    def test_missing_help_is_404(self, client):
        response = client.get("/admin/help/anything_else")
        assert response.status_code == 404
        body = response.json()
        assert body["error"]["message"] == "No help available for: anything_else"
        assert body["error"]["path"] == "/admin/help/anything_else"


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "app": "Theme Hooks", "version": "1.0.0"}

    def test_request_id_header_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

    def test_request_id_generated(self, client):
        response = client.get("/class-hooks")
        assert response.headers.get("X-Request-ID")
