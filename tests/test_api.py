"""
Unit Tests for the Codec Router
===============================
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    from asc100_core.api import create_codec_router
    from asc100_core.config import CodecSettings

    settings = CodecSettings(
        charset="v1_standard",
        strategy="core",
        filter_policy="strict",
        alphabet="url_safe",
        strict_padding=False,
    )
    app = FastAPI()
    app.include_router(create_codec_router(settings))
    return TestClient(app)


class TestEncodeEndpoint:
    """Tests for POST /codec/encode."""

    def test_encode(self, client):
        """Should encode with the router defaults."""
        response = client.post("/codec/encode", json={"text": "AB"})

        assert response.status_code == 200
        body = response.json()
        assert body["result"] == "Qog"
        assert body["input_length"] == 2
        assert body["output_length"] == 3
        assert body["strategy"] == "core"
        assert body["charset"] == "v1_standard"

    def test_encode_with_options(self, client):
        """Request options should override the defaults."""
        response = client.post(
            "/codec/encode",
            json={"text": "#EOF#", "strategy": "extensions"},
        )

        assert response.status_code == 200
        assert response.json()["result"] == "yg"

    def test_invalid_character(self, client):
        """Invalid input should map to 422 with error details."""
        response = client.post("/codec/encode", json={"text": "Héllo"})

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "non_ascii_input"
        assert body["detail"]["position"] == 1
        assert body["detail"]["character"] == "é"

    def test_configuration_error(self, client):
        """An invalid option combination should map to 422."""
        response = client.post(
            "/codec/encode",
            json={"text": "abc", "filter_policy": "sanitize"},
        )

        assert response.status_code == 422
        assert response.json()["code"] == "configuration_error"


class TestDecodeEndpoint:
    """Tests for POST /codec/decode."""

    def test_decode(self, client):
        """Should decode with the router defaults."""
        response = client.post("/codec/decode", json={"encoded": "Qog"})

        assert response.status_code == 200
        assert response.json()["result"] == "AB"

    def test_malformed(self, client):
        """Unknown symbols should map to malformed_encoding."""
        response = client.post("/codec/decode", json={"encoded": "Q*g"})

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "malformed_encoding"
        assert body["detail"]["position"] == 1

    def test_strategy_mismatch(self, client):
        """Marker indices under core should map to strategy_mismatch."""
        response = client.post("/codec/decode", json={"encoded": "yg"})

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "strategy_mismatch"
        assert body["detail"]["index"] == 101

    def test_strict_padding(self, client):
        """strict_padding should reject dirty padding bits."""
        response = client.post("/codec/decode", json={"encoded": "Qoh", "strict_padding": True})

        assert response.status_code == 422
        assert response.json()["code"] == "malformed_encoding"


class TestInfoEndpoints:
    """Tests for the read-only endpoints."""

    def test_charsets(self, client):
        """Should list versions and markers."""
        response = client.get("/codec/charsets")

        assert response.status_code == 200
        body = response.json()
        assert body["default"] == "v1_standard"
        assert [c["name"] for c in body["charsets"]][0] == "v1_standard"
        assert len(body["charsets"]) == 4
        assert len(body["markers"]) == 19
        assert body["markers"][0] == {
            "token": "#INV#",
            "index": 100,
            "description": "Invalid character placeholder",
        }

    def test_metrics(self, client):
        """Should expose Prometheus text."""
        client.post("/codec/encode", json={"text": "AB"})
        response = client.get("/codec/metrics")

        assert response.status_code == 200
        assert "asc100_operations_total" in response.text
