from __future__ import annotations

from ssb_core.oir import load_oir_bank


def test_generate_and_submit_roundtrip(client):
    gen = client.get("/api/oir/generate-test")
    assert gen.status_code == 200
    data = gen.json()["data"]
    assert data["test_id"].startswith("oir_test_static_")

    key = load_oir_bank()["answer_key"]
    sub = client.post(
        "/api/oir/submit-test",
        json={"test_id": data["test_id"], "answers": key, "time_taken": 900},
    )
    assert sub.status_code == 200
    result = sub.json()["data"]
    assert result["score"] == 100
    assert result["performance_level"] == "Excellent"

    analytics = client.post("/api/oir/get-analytics", json={"test_result": result})
    assert analytics.status_code == 200
    assert analytics.json()["data"]["strengths"][-1] == "Well-balanced cognitive abilities"


def test_submit_requires_fields(client):
    assert client.post("/api/oir/submit-test", json={"answers": {}}).status_code == 400
    assert client.post("/api/oir/submit-test", json={"test_id": "x"}).status_code == 400
    assert client.post("/api/oir/get-analytics", json={}).status_code == 400


def test_test_info(client):
    info = client.get("/api/oir/test-info").json()["data"]
    assert info["total_questions"] == 20
    assert info["scoring"]["passing_score"] == 60
