"""
FastAPI endpoint tests for the numwords API.

Uses httpx + FastAPI TestClient, no real server needed.
"""

from __future__ import annotations

import dotenv
import pytest
from fastapi.testclient import TestClient

import api
import numwords
from api import app

client = TestClient(app)


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == numwords.__version__
        assert data["languages_loaded"] == len(numwords.supported_languages())

    def test_lifespan_prewarms(self) -> None:
        with TestClient(app) as warmed:
            assert warmed.get("/health").status_code == 200

    def test_entry_point_loads_dotenv(self) -> None:
        assert api.load_dotenv is dotenv.load_dotenv


class TestLanguagesEndpoint:
    def test_lists_supported_codes(self) -> None:
        data = client.get("/languages").json()
        assert "en" in data["languages"]
        assert "sr-Cyrl" in data["languages"]
        assert data["languages"] == sorted(data["languages"])


# ═══════════════════════════════════════════════════════════════════════
# /convert
# ═══════════════════════════════════════════════════════════════════════


class TestConvertEndpoint:
    def test_integer(self) -> None:
        resp = client.post("/convert", json={"value": 1234, "lang": "en"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["words"] == "one thousand two hundred and thirty-four"
        assert data["value"] == "1234"
        assert data["lang"] == "en"

    def test_decimal_string_keeps_digits(self) -> None:
        data = client.post("/convert", json={"value": "1234.05"}).json()
        assert data["words"] == "one thousand two hundred and thirty-four point zero five"

    def test_default_language_reported(self) -> None:
        data = client.post("/convert", json={"value": 7}).json()
        assert data["lang"] == "en"
        assert data["words"] == "seven"

    def test_options_are_forwarded(self) -> None:
        data = client.post(
            "/convert", json={"value": 2002, "lang": "ru", "gender": "feminine"}
        ).json()
        assert data["words"] == "две тысячи две"

    def test_region_and_drop_spaces(self) -> None:
        data = client.post(
            "/convert", json={"value": 105, "lang": "en", "region": "US", "drop_spaces": True}
        ).json()
        assert data["words"] == "onehundredfive"

    def test_script_option(self) -> None:
        data = client.post("/convert", json={"value": 2000, "lang": "sr", "script": "native"}).json()
        assert data["words"] == "две хиљаде"

    def test_big_integer(self) -> None:
        data = client.post("/convert", json={"value": str(10**30), "lang": "en"}).json()
        assert data["words"] == "one thousand octillion"


class TestConvertErrors:
    @pytest.mark.parametrize("value", ["abc", "1e5", "", "1.2.3"])
    def test_bad_numeral_is_400(self, value: str) -> None:
        resp = client.post("/convert", json={"value": value})
        assert resp.status_code == 400
        assert resp.json()["detail"]["code"] == "INVALID_FORMAT"

    def test_unsupported_language_is_404(self) -> None:
        resp = client.post("/convert", json={"value": 1, "lang": "xx"})
        assert resp.status_code == 404
        detail = resp.json()["detail"]
        assert detail["code"] == "UNSUPPORTED_LOCALE"
        assert detail["details"]["lang"] == "xx"
        assert "en" in detail["details"]["supported"]

    def test_beyond_vocabulary_is_500(self) -> None:
        resp = client.post("/convert", json={"value": str(10**33), "lang": "ru"})
        assert resp.status_code == 500
        assert resp.json()["detail"]["code"] == "MISSING_VOCABULARY"

    def test_unknown_gender_rejected_by_schema(self) -> None:
        resp = client.post("/convert", json={"value": 1, "gender": "neuter"})
        assert resp.status_code == 422

    def test_missing_value_rejected(self) -> None:
        resp = client.post("/convert", json={"lang": "en"})
        assert resp.status_code == 422
