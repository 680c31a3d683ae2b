"""Tests for the HTTP API."""

from typing import AsyncGenerator

import httpx
import pytest
from fastapi.testclient import TestClient

from cipherbench.core.config import Settings, get_settings
from cipherbench.db.session import configure_engine
from cipherbench.dependencies import get_gemini_client
from cipherbench.main import create_app
from cipherbench.services.ai.gemini_client import GeminiClient

PREFIX = "/api/v1"


def gemini_reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture
def app(tmp_path):
    configure_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


def use_gemini(app, handler, api_key: str | None = "test-key") -> list[GeminiClient]:
    """
    Route the app's Gemini client through an in-memory transport.

    Returns the list that collects each client once it has been closed.
    """
    closed: list[GeminiClient] = []

    async def override() -> AsyncGenerator[GeminiClient, None]:
        gemini = GeminiClient(
            api_key="unused",
            model="test-model",
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )
        gemini.api_key = api_key
        try:
            yield gemini
        finally:
            await gemini.close()
            closed.append(gemini)

    app.dependency_overrides[get_gemini_client] = override
    return closed


class TestCiphersEndpoint:
    """Test the cipher listing."""

    def test_lists_all_ciphers(self, client):
        response = client.get(f"{PREFIX}/ciphers")

        assert response.status_code == 200
        kinds = {item["cipher_type"]: item["key_kind"] for item in response.json()}
        assert kinds == {
            "caesar": "integer",
            "rail_fence": "integer",
            "transposition": "word",
            "playfair": "word",
        }


class TestTransformEndpoints:
    """Test /encrypt and /decrypt."""

    def test_encrypt_caesar(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"text": "Attack", "key": "3", "cipher_type": "caesar"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["record"]["result_text"] == "Dwwdfn"
        assert body["record"]["original_text"] == "Attack"
        assert body["record"]["direction"] == "encrypt"
        assert body["record"]["key"] == "3"
        assert "shift of 3" in body["explanation"]

    def test_integer_key(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"text": "Attack", "key": 3, "cipher_type": "caesar"},
        )

        assert response.status_code == 200
        assert response.json()["record"]["result_text"] == "Dwwdfn"

    def test_text_is_trimmed(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"text": "  Attack \n", "key": "3", "cipher_type": "caesar"},
        )

        assert response.json()["record"]["original_text"] == "Attack"

    @pytest.mark.parametrize(
        "cipher_type,key,plaintext",
        [
            ("caesar", "13", "Meet me at noon"),
            ("rail_fence", "4", "WE ARE DISCOVERED"),
            ("transposition", "ZEBRA", "ATTACK AT DAWN"),
        ],
    )
    def test_roundtrip(self, client, cipher_type, key, plaintext):
        encrypted = client.post(
            f"{PREFIX}/encrypt",
            json={"text": plaintext, "key": key, "cipher_type": cipher_type},
        ).json()["record"]["result_text"]

        decrypted = client.post(
            f"{PREFIX}/decrypt",
            json={"text": encrypted, "key": key, "cipher_type": cipher_type},
        )

        assert decrypted.status_code == 200
        assert decrypted.json()["record"]["result_text"] == plaintext

    def test_playfair_reference(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={
                "text": "Hide the gold in the tree stump",
                "key": "PLAYFAIREXAMPLE",
                "cipher_type": "playfair",
            },
        )

        assert response.status_code == 200
        assert response.json()["record"]["result_text"] == "BMODZBXDNABEKUDMUIXMMOUVIF"

    def test_playfair_odd_decrypt_rejected(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"text": "ABC", "key": "KEYWORD", "cipher_type": "playfair"},
        )

        assert response.status_code == 400
        assert "even" in response.json()["detail"]

    @pytest.mark.parametrize(
        "cipher_type,key",
        [
            ("caesar", "three"),
            ("rail_fence", "1"),
            ("transposition", "1234"),
            ("playfair", "!!!"),
            ("caesar", "   "),
        ],
    )
    def test_invalid_key(self, client, cipher_type, key):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"text": "HELLO", "key": key, "cipher_type": cipher_type},
        )

        assert response.status_code == 400

    def test_blank_text_rejected(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"text": "   ", "key": "3", "cipher_type": "caesar"},
        )

        assert response.status_code == 400

    def test_text_over_limit_rejected(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"text": "A" * 100_001, "key": "3", "cipher_type": "caesar"},
        )

        assert response.status_code == 400
        assert "100000" in response.json()["detail"]

    def test_text_limit_follows_settings(self, app, client):
        app.dependency_overrides[get_settings] = lambda: Settings(max_text_length=200_000)

        response = client.post(
            f"{PREFIX}/encrypt",
            json={"text": "A" * 150_000, "key": "3", "cipher_type": "caesar"},
        )

        assert response.status_code == 200
        assert response.json()["record"]["result_text"] == "D" * 150_000

    def test_unknown_cipher_rejected(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"text": "HELLO", "key": "3", "cipher_type": "vigenere"},
        )

        assert response.status_code == 422

    def test_failed_operation_not_recorded(self, client):
        client.post(
            f"{PREFIX}/encrypt",
            json={"text": "HELLO", "key": "x", "cipher_type": "caesar"},
        )

        assert client.get(f"{PREFIX}/history").json()["total"] == 0


class TestHistoryEndpoint:
    """Test the recent-operations history."""

    def test_newest_first(self, client):
        for word in ["one", "two", "three"]:
            client.post(
                f"{PREFIX}/encrypt",
                json={"text": word, "key": "1", "cipher_type": "caesar"},
            )

        body = client.get(f"{PREFIX}/history").json()

        assert body["total"] == 3
        assert [item["original_text"] for item in body["items"]] == ["three", "two", "one"]
        assert body["items"][0]["result_text"] == "uisff"
        assert body["items"][0]["cipher_type"] == "caesar"
        assert body["items"][0]["direction"] == "encrypt"

    def test_keeps_only_ten(self, client):
        for i in range(12):
            client.post(
                f"{PREFIX}/encrypt",
                json={"text": f"message {i}", "key": "5", "cipher_type": "caesar"},
            )

        body = client.get(f"{PREFIX}/history").json()

        assert body["total"] == 10
        assert len(body["items"]) == 10
        assert body["items"][0]["original_text"] == "message 11"
        assert body["items"][-1]["original_text"] == "message 2"

    def test_limit(self, client):
        for i in range(4):
            client.post(
                f"{PREFIX}/decrypt",
                json={"text": f"text {i}", "key": "2", "cipher_type": "rail_fence"},
            )

        body = client.get(f"{PREFIX}/history", params={"limit": 2}).json()

        assert [item["original_text"] for item in body["items"]] == ["text 3", "text 2"]
        assert body["items"][0]["direction"] == "decrypt"

    def test_limit_above_history_size_is_capped(self, client):
        for i in range(12):
            client.post(
                f"{PREFIX}/encrypt",
                json={"text": f"note {i}", "key": "7", "cipher_type": "caesar"},
            )

        response = client.get(f"{PREFIX}/history", params={"limit": 50})

        assert response.status_code == 200
        assert len(response.json()["items"]) == 10

    def test_limit_must_be_positive(self, client):
        response = client.get(f"{PREFIX}/history", params={"limit": 0})

        assert response.status_code == 422

    def test_clear(self, client):
        for i in range(3):
            client.post(
                f"{PREFIX}/encrypt",
                json={"text": f"text {i}", "key": "KEY", "cipher_type": "transposition"},
            )

        response = client.delete(f"{PREFIX}/history")

        assert response.status_code == 200
        assert response.json() == {"deleted": 3}
        assert client.get(f"{PREFIX}/history").json() == {"items": [], "total": 0}


class TestPlayfairMatrixEndpoint:
    """Test the Playfair key square endpoint."""

    def test_matrix_for_keyword(self, client):
        response = client.get(f"{PREFIX}/playfair/matrix", params={"key": "PLAYFAIREXAMPLE"})

        assert response.status_code == 200
        rows = response.json()["rows"]
        assert rows[0] == ["P", "L", "A", "Y", "F"]
        assert rows[4] == ["T", "U", "V", "W", "Z"]

    def test_matrix_without_key(self, client):
        rows = client.get(f"{PREFIX}/playfair/matrix").json()["rows"]

        assert rows[0] == ["A", "B", "C", "D", "E"]
        assert rows[1] == ["F", "G", "H", "I", "K"]


class TestExplainEndpoint:
    """Test Gemini-backed explanations."""

    @pytest.fixture
    def operation(self):
        return {
            "original_text": "Attack",
            "result_text": "Dwwdfn",
            "key": "3",
            "cipher_type": "caesar",
            "direction": "encrypt",
        }

    def test_explanation(self, app, client, operation):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["api_key"] = request.headers["x-goog-api-key"]
            seen["body"] = request.content.decode()
            return httpx.Response(200, json=gemini_reply(" Each letter moved 3 places. "))

        closed = use_gemini(app, handler)
        response = client.post(f"{PREFIX}/explain", json=operation)

        assert response.status_code == 200
        assert len(closed) == 1
        assert response.json() == {
            "explanation": "Each letter moved 3 places.",
            "model": "test-model",
        }
        assert seen["url"].endswith("/test-model:generateContent")
        assert seen["api_key"] == "test-key"
        assert "Dwwdfn" in seen["body"]
        assert "Encryption" in seen["body"]

    def test_disabled_without_api_key(self, app, client, operation):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("Gemini must not be called")

        use_gemini(app, handler, api_key=None)
        response = client.post(f"{PREFIX}/explain", json=operation)

        assert response.status_code == 503

    def test_upstream_failure(self, app, client, operation):
        use_gemini(app, lambda request: httpx.Response(500, json={}))
        response = client.post(f"{PREFIX}/explain", json=operation)

        assert response.status_code == 502

    def test_empty_reply(self, app, client, operation):
        use_gemini(app, lambda request: httpx.Response(200, json={"candidates": []}))
        response = client.post(f"{PREFIX}/explain", json=operation)

        assert response.status_code == 502

    def test_non_json_reply(self, app, client, operation):
        closed = use_gemini(
            app,
            lambda request: httpx.Response(
                200,
                text="<html>proxy error</html>",
                headers={"content-type": "text/html"},
            ),
        )
        response = client.post(f"{PREFIX}/explain", json=operation)

        assert response.status_code == 502
        assert "unreadable" in response.json()["detail"]
        assert len(closed) == 1

    @pytest.mark.parametrize(
        "payload",
        [
            ["not", "an", "object"],
            {"candidates": "oops"},
            {"candidates": [{"content": {"parts": [{"text": 5}]}}]},
        ],
    )
    def test_malformed_reply(self, app, client, operation, payload):
        use_gemini(app, lambda request: httpx.Response(200, json=payload))
        response = client.post(f"{PREFIX}/explain", json=operation)

        assert response.status_code == 502

    @pytest.mark.parametrize("field", ["result_text", "original_text", "key"])
    def test_incomplete_operation(self, app, client, operation, field):
        use_gemini(app, lambda request: httpx.Response(200, json=gemini_reply("unused")))
        operation[field] = " "
        response = client.post(f"{PREFIX}/explain", json=operation)

        assert response.status_code == 400
