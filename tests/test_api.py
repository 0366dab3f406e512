"""
Tests for the HTTP API.
"""
import hashlib
import re

from textforge.core.config import get_settings
from textforge.services.engines import crypto

API = "/api/v1"


class TestTransformationsEndpoint:
    def test_list_defaults_to_everything(self, client):
        response = client.get(f"{API}/transformations")
        assert response.status_code == 200
        body = response.json()
        assert body["mode"] == "detect"
        assert body["total"] == 53
        assert body["transformations"][0]["id"] == "base64"

    def test_list_by_mode(self, client):
        body = client.get(f"{API}/transformations", params={"mode": "decode"}).json()
        assert body["mode"] == "decode"
        assert all(t["can_decode"] for t in body["transformations"])
        assert "sha256" not in [t["id"] for t in body["transformations"]]

    def test_invalid_mode(self, client):
        response = client.get(f"{API}/transformations", params={"mode": "sideways"})
        assert response.status_code == 422

    def test_get_one(self, client):
        body = client.get(f"{API}/transformations/aes").json()
        assert body == {
            "id": "aes",
            "name": "AES Encryption",
            "category": "Cipher",
            "description": "AES-256-GCM encryption with PBKDF2 key derivation",
            "can_encode": True,
            "can_decode": True,
            "reversibility": "reversible",
            "risk_level": "medium",
        }

    def test_get_unknown(self, client):
        response = client.get(f"{API}/transformations/nope")
        assert response.status_code == 404
        assert "not found" in response.json()["detail"]


class TestPipelineEndpoints:
    def test_execute(self, client):
        response = client.post(
            f"{API}/pipeline/execute",
            json={
                "input": "Hi",
                "steps": [
                    {"id": "one", "transformationId": "base64"},
                    {"id": "two", "transformationId": "hex", "mode": "encode"},
                ],
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["final_output"] == "53476b3d"
        assert [r["step_id"] for r in body["results"]] == ["one", "two"]
        assert body["results"][0]["output"] == "SGk="
        assert body["warnings"] == []

    def test_execute_reports_failures_and_warnings(self, client):
        body = client.post(
            f"{API}/pipeline/execute",
            json={
                "input": "abc",
                "steps": [
                    {"id": "missing", "transformationId": "nope"},
                    {"id": "hash", "transformationId": "sha256"},
                ],
            },
        ).json()
        assert body["results"][0] == {
            "step_id": "missing",
            "input": "abc",
            "output": "abc",
            "success": False,
            "error": "Transformation not found",
        }
        assert body["final_output"] == hashlib.sha256(b"abc").hexdigest()
        assert [w["type"] for w in body["warnings"]] == ["irreversible", "irreversible"]
        assert body["warnings"][0]["step_ids"] == ["hash"]

    def test_execute_generates_missing_step_ids(self, client):
        body = client.post(
            f"{API}/pipeline/execute",
            json={"input": "a", "steps": [{"transformationId": "reverse"}]},
        ).json()
        assert body["results"][0]["step_id"]

    def test_execute_input_too_long(self, small_limits_client):
        response = small_limits_client.post(
            f"{API}/pipeline/execute",
            json={"input": "x" * 11, "steps": []},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Input length 11 exceeds maximum 10"

    def test_execute_too_many_steps(self, small_limits_client):
        steps = [{"transformationId": "reverse"}] * 3
        response = small_limits_client.post(
            f"{API}/pipeline/execute",
            json={"input": "x", "steps": steps},
        )
        assert response.status_code == 400

    def test_execute_html_entity_surrogate_pair(self, client):
        response = client.post(
            f"{API}/pipeline/execute",
            json={
                "input": "&#55357;&#56613;",
                "steps": [
                    {"transformationId": "html-entity", "mode": "decode"},
                    {"transformationId": "hex"},
                ],
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["results"][0]["output"] == "🔥"
        assert body["final_output"] == "f09f94a5"

    def test_execute_unpaired_surrogate_fails_the_step(self, client):
        body = client.post(
            f"{API}/pipeline/execute",
            json={
                "input": "&#55357;",
                "steps": [{"transformationId": "html-entity", "mode": "decode"}],
            },
        ).json()
        assert not body["results"][0]["success"]
        assert "unpaired surrogate" in body["results"][0]["error"]
        assert body["final_output"] == "&#55357;"

    def test_analyze(self, client):
        body = client.post(
            f"{API}/pipeline/analyze",
            json={"steps": [{"id": "u", "transformationId": "uppercase"}]},
        ).json()
        assert body["warnings"][0]["type"] == "data-loss"
        assert body["warnings"][0]["step_ids"] == ["u"]

    def test_export_then_import(self, client):
        exported = client.post(
            f"{API}/pipeline/export",
            json={
                "name": "mine",
                "steps": [{"transformationId": "caesar", "mode": "decode", "options": {"shift": 7}}],
            },
        ).json()
        assert exported["name"] == "mine"
        assert exported["steps"] == [
            {"transformationId": "caesar", "mode": "decode", "options": {"shift": 7}}
        ]

        imported = client.post(f"{API}/pipeline/import", json=exported).json()
        step = imported["steps"][0]
        assert step["transformationId"] == "caesar"
        assert step["mode"] == "decode"
        assert step["options"] == {"shift": 7}
        assert step["id"]

    def test_import_invalid_document(self, client):
        response = client.post(f"{API}/pipeline/import", json={"steps": "nope"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid pipeline file format"

    def test_presets(self, client):
        presets = client.get(f"{API}/pipeline/presets").json()
        assert len(presets) == 5
        assert presets[0]["id"] == "builtin-base64-hex"

    def test_preset_by_id(self, client):
        body = client.get(f"{API}/pipeline/presets/builtin-rot13-base64").json()
        assert [s["transformationId"] for s in body["steps"]] == ["rot13", "base64"]

    def test_unknown_preset(self, client):
        assert client.get(f"{API}/pipeline/presets/nope").status_code == 404


class TestDetectEndpoints:
    def test_detect(self, client):
        body = client.post(f"{API}/detect", json={"input": "aGk="}).json()
        assert body["candidates"][0]["id"] == "base64"

    def test_confidence(self, client):
        body = client.post(f"{API}/detect/confidence", json={"input": "SGVsbG8gV29ybGQ="}).json()
        assert body["results"][0]["transformation"]["id"] == "base64"
        assert body["results"][0]["confidence"] == 90

    def test_layers(self, client):
        body = client.post(f"{API}/detect/layers", json={"input": "Wlc1aw=="}).json()
        assert body["layers"] == ["Layer 1: Base64", "Layer 2: Base64", "Final: end"]

    def test_layers_max_depth(self, client):
        body = client.post(f"{API}/detect/layers", json={"input": "Wlc1aw==", "max_depth": 1}).json()
        assert body["layers"] == ["Layer 1: Base64", "Final: ZW5k"]

    def test_layers_max_depth_bounds(self, client):
        response = client.post(f"{API}/detect/layers", json={"input": "x", "max_depth": 0})
        assert response.status_code == 422

    def test_detect_input_too_long(self, small_limits_client):
        for path in ("", "/confidence", "/layers"):
            response = small_limits_client.post(f"{API}/detect{path}", json={"input": "a" * 11})
            assert response.status_code == 400


class TestGenerateEndpoints:
    def test_password(self, client):
        body = client.get(
            f"{API}/generate/password",
            params={"length": 24, "symbols": False, "uppercase": False},
        ).json()
        assert body["kind"] == "password"
        assert re.fullmatch(r"[a-z0-9]{24}", body["value"])

    def test_password_length_bounds(self, client):
        assert client.get(f"{API}/generate/password", params={"length": 0}).status_code == 422
        assert client.get(f"{API}/generate/password", params={"length": 257}).status_code == 422

    def test_uuid(self, client):
        body = client.get(f"{API}/generate/uuid").json()
        assert re.fullmatch(r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}", body["value"])

    def test_random_key(self, client):
        first = client.get(f"{API}/generate/key").json()["value"]
        second = client.get(f"{API}/generate/key").json()["value"]
        assert re.fullmatch(r"[0-9a-f]{64}", first)
        assert first != second

    def test_derived_key_is_deterministic(self, small_limits_client):
        response = small_limits_client.get(f"{API}/generate/key", params={"password": "pw"})
        expected = crypto.derive_key_hex("pw", get_settings().kdf_default_salt, 1000)
        assert response.json()["value"] == expected
