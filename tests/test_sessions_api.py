def _start(client, **payload):
    r = client.post("/sessions", json=payload or None)
    assert r.status_code == 201
    body = r.json()
    return body["id"], body["state"]


def test_create_session(client):
    session_id, state = _start(client)
    assert isinstance(session_id, str) and session_id
    assert state["age_group"] == "explorer"
    assert state["selected_operations"] == ["addition", "subtraction", "multiplication", "division"]
    problem = state["current_problem"]
    assert len(problem["options"]) == 4 and problem["correct_answer"] in problem["options"]
    assert problem["prompt"].endswith("= ?")
    assert state["accuracy"] == 0 and state["is_answered"] is False


def test_create_session_with_age_group(client):
    _, state = _start(client, age_group="baby")
    assert state["age_group"] == "baby"
    assert state["selected_operations"] == ["addition"]


def test_create_session_unknown_age_group(client):
    r = client.post("/sessions", json={"age_group": "toddler"})
    assert r.status_code == 404


def test_get_session_404(client):
    r = client.get("/sessions/nope")
    assert r.status_code == 404


def test_answer_round_trip(client, scheduler):
    session_id, state = _start(client)
    answer = state["current_problem"]["correct_answer"]

    r = client.post(f"/sessions/{session_id}/answer", json={"value": answer})
    assert r.status_code == 200
    s = r.json()["state"]
    assert s["score"] == 1 and s["total_answered"] == 1
    assert s["celebrate"] is True and s["feedback"].startswith("Good!")
    assert s["accuracy"] == 100

    # answering again inside the feedback window changes nothing
    r = client.post(f"/sessions/{session_id}/answer", json={"value": answer + 1})
    assert r.json()["state"] == s

    scheduler.fire_all()
    s = client.get(f"/sessions/{session_id}").json()["state"]
    assert s["is_answered"] is False and s["selected_answer"] is None
    assert s["score"] == 1


def test_wrong_answer(client):
    session_id, state = _start(client)
    problem = state["current_problem"]
    wrong = next(o for o in problem["options"] if o != problem["correct_answer"])
    s = client.post(f"/sessions/{session_id}/answer", json={"value": wrong}).json()["state"]
    assert s["score"] == 0 and s["total_answered"] == 1
    assert f"The answer is {problem['correct_answer']}" in s["feedback"]
    assert s["celebrate"] is False


def test_answer_requires_integer(client):
    session_id, _ = _start(client)
    r = client.post(f"/sessions/{session_id}/answer", json={"value": "seven"})
    assert r.status_code == 422


def test_change_age_group(client):
    session_id, _ = _start(client)
    r = client.post(f"/sessions/{session_id}/age-group", json={"age_group": "little"})
    assert r.status_code == 200
    s = r.json()["state"]
    assert s["age_group"] == "little"
    assert s["selected_operations"] == ["addition", "subtraction"]

    r = client.post(f"/sessions/{session_id}/age-group", json={"age_group": "toddler"})
    assert r.status_code == 404


def test_toggle_operation(client):
    session_id, _ = _start(client)
    r = client.post(f"/sessions/{session_id}/operations/division/toggle")
    assert r.status_code == 200
    assert "division" not in r.json()["state"]["selected_operations"]


def test_toggle_operation_outside_tier(client):
    session_id, _ = _start(client, age_group="baby")
    r = client.post(f"/sessions/{session_id}/operations/subtraction/toggle")
    assert r.status_code == 400


def test_toggle_unknown_operation(client):
    session_id, _ = _start(client)
    r = client.post(f"/sessions/{session_id}/operations/modulo/toggle")
    assert r.status_code == 422


def test_reset(client, scheduler):
    session_id, state = _start(client)
    for _ in range(3):
        answer = state["current_problem"]["correct_answer"]
        client.post(f"/sessions/{session_id}/answer", json={"value": answer})
        scheduler.fire_all()
        state = client.get(f"/sessions/{session_id}").json()["state"]
    assert state["score"] == 3

    s = client.post(f"/sessions/{session_id}/reset").json()["state"]
    assert (s["score"], s["total_answered"], s["accuracy"]) == (0, 0, 0)
    assert s["current_problem"]["operation"] in s["selected_operations"]


def test_delete_session(client):
    session_id, _ = _start(client)
    assert client.delete(f"/sessions/{session_id}").status_code == 204
    assert client.get(f"/sessions/{session_id}").status_code == 404
    assert client.delete(f"/sessions/{session_id}").status_code == 404
