"""
Web API Endpoint Tests
======================
Integration tests for the preview and site hosting endpoints.

Usage:
    pip install framework-preview[test]
    pytest tests/web_api/test_endpoints.py -v
"""
import pytest


# Skip entire module if FastAPI not installed
pytest.importorskip("fastapi")


from fastapi.testclient import TestClient
from framework_preview.storage import LocalObjectStore
from framework_preview.web_api.main import app
from framework_preview.web_api.routers.sites import get_store


SFC = "<template><h1>{{x}}</h1></template><script>export default{data(){return{x:1}}}</script>"


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def store(tmp_path):
    """Point the sites router at a temporary object store."""
    local = LocalObjectStore(tmp_path, base_url="/sites/")
    app.dependency_overrides[get_store] = lambda: local
    yield local
    app.dependency_overrides.pop(get_store, None)


# ============================================================================
# ROOT / HEALTH
# ============================================================================

class TestHealthEndpoint:
    """Tests for GET /, /health and /ready"""

    def test_root_returns_name(self, client):
        """Root endpoint names the API."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "Framework Preview API"

    def test_health_returns_ok_status(self, client):
        """Health endpoint returns status: ok."""
        data = client.get("/health").json()
        assert data["status"] == "ok"
        assert "version" in data

    def test_ready_runs_self_check(self, client):
        """Readiness passes when every sample renders."""
        data = client.get("/ready").json()
        assert data == {"status": "ready", "failed": []}


# ============================================================================
# PREVIEW ENDPOINTS
# ============================================================================

class TestClassifyEndpoint:
    """Tests for POST /preview/classify"""

    def test_classify_react(self, client):
        """JSX-looking code is React."""
        response = client.post("/preview/classify", json={"source": "const A = () => <div/>;"})
        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "react"
        assert data["name"] == "React"
        assert data["needs_browser_compilation"] is True
        assert len(data["cdn_script_urls"]) == 3

    def test_classify_empty(self, client):
        """Empty input is vanilla."""
        data = client.post("/preview/classify", json={"source": ""}).json()
        assert data["kind"] == "vanilla"
        assert data["cdn_script_urls"] == []

    def test_missing_source_is_422(self, client):
        """Request body must carry source."""
        response = client.post("/preview/classify", json={})
        assert response.status_code == 422


class TestRenderEndpoint:
    """Tests for POST /preview/render"""

    def test_render_returns_html(self, client):
        """Rendered document is served as text/html."""
        response = client.post("/preview/render", json={"source": SFC})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "createApp(AppComponent).mount('#app')" in response.text

    def test_render_forced_kind(self, client):
        """kind overrides detection."""
        response = client.post("/preview/render", json={"source": "<p>x</p>", "kind": "alpine"})
        assert "alpinejs" in response.text

    def test_render_unknown_kind_is_400(self, client):
        """Unknown kinds are rejected."""
        response = client.post("/preview/render", json={"source": "x", "kind": "cobol"})
        assert response.status_code == 400

    def test_oversized_source_is_413(self, client, monkeypatch):
        """Sources above MAX_SOURCE_CHARS are rejected."""
        from framework_preview.web_api.config import settings

        monkeypatch.setattr(settings, "MAX_SOURCE_CHARS", 10)
        response = client.post("/preview/render", json={"source": "x" * 11})
        assert response.status_code == 413


class TestPreviewEndpoint:
    """Tests for POST /preview/ and GET /preview/templates/{kind}"""

    def test_combined(self, client):
        """Verdict and document in one response."""
        data = client.post("/preview/", json={"source": SFC}).json()
        assert data["verdict"]["kind"] == "vue"
        assert data["document"].startswith("<!DOCTYPE html>")

    def test_template(self, client):
        """Starter snippet for a known kind."""
        data = client.get("/preview/templates/react").json()
        assert data["name"] == "React"
        assert "useState" in data["template"]

    def test_unknown_template_is_404(self, client):
        """Unknown kinds have no template."""
        assert client.get("/preview/templates/cobol").status_code == 404


# ============================================================================
# SITES
# ============================================================================

class TestSitesEndpoint:
    """Tests for POST /sites/ and GET /sites/{project_id}"""

    def test_publish_and_serve(self, client, store):
        """A published site is served with caching headers."""
        response = client.post("/sites/", json={"project_id": "demo", "source": "<p>hosted</p>"})
        assert response.status_code == 200
        data = response.json()
        assert data["path"] == "public/demo.html"
        assert data["url"] == "/sites/public/demo.html"
        assert data["kind"] == "vanilla"

        served = client.get("/sites/demo")
        assert served.status_code == 200
        assert "<p>hosted</p>" in served.text
        assert served.headers["cache-control"] == "public, max-age=3600"

    def test_public_url_serves_same_document(self, client, store):
        """The returned url resolves to the stored page."""
        url = client.post("/sites/", json={"project_id": "demo", "source": "<p>x</p>"}).json()["url"]
        assert client.get(url).text == client.get("/sites/demo").text

    def test_missing_site_is_404_page(self, client, store):
        """Unknown projects get the Site Not Found page."""
        response = client.get("/sites/nothing-here")
        assert response.status_code == 404
        assert "Site Not Found" in response.text

    def test_bad_project_id_is_400(self, client, store):
        """Unsafe project ids are rejected."""
        response = client.post("/sites/", json={"project_id": "..", "source": "<p>x</p>"})
        assert response.status_code == 400

    def test_oversized_publish_is_413(self, client, store, monkeypatch):
        """Publishing enforces the same size limit as previewing."""
        from framework_preview.web_api.config import settings

        monkeypatch.setattr(settings, "MAX_SOURCE_CHARS", 10)
        response = client.post("/sites/", json={"project_id": "big", "source": "x" * 11})
        assert response.status_code == 413
        assert client.get("/sites/big").status_code == 404
