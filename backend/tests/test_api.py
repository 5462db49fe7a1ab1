from fastapi.testclient import TestClient

from indiaguessr.main import create_app
from indiaguessr.services.sessions import SessionStore


def _start(client, **body):
    response = client.post("/api/game/start", json=body)
    assert response.status_code == 201
    return response.json()


def test_health(client):
    assert client.get("/api/health").json() == {"status": "healthy"}


def test_list_divisions(client):
    response = client.get("/api/divisions")

    assert response.status_code == 200
    names = response.json()["names"]
    assert len(names) == 28
    assert names[0] == "Andhra Pradesh"


def test_start_game(client):
    game = _start(client)

    assert game["status"] == "round_active"
    assert game["total_rounds"] == 5
    assert game["current_round_index"] == 1
    assert game["cumulative_score"] == 0
    assert client.get(f"/api/game/{game['id']}").json() == game


def test_start_game_with_custom_rounds(client):
    assert _start(client, total_rounds=2)["total_rounds"] == 2


def test_start_game_rejects_zero_rounds(client):
    assert client.post("/api/game/start", json={"total_rounds": 0}).status_code == 422


def test_current_round_hides_truth_until_guess(client):
    game = _start(client)

    current = client.get(f"/api/game/{game['id']}/round").json()
    assert current["round_number"] == 1
    assert current["revealed"] is False
    assert current["true_division_name"] is None
    assert len(current["region"]) == 49
    assert current["region"][0] == current["region"][-1]
    assert current["view"]["zoom"] == 7

    guess = client.post(f"/api/game/{game['id']}/guess", json={"division_name": "Goa"}).json()

    current = client.get(f"/api/game/{game['id']}/round").json()
    assert current["revealed"] is True
    assert current["true_division_name"] == guess["true_division_name"]


def test_guess_response(client):
    game = _start(client)

    response = client.post(f"/api/game/{game['id']}/guess", json={"division_name": "Kerala"})

    assert response.status_code == 200
    body = response.json()
    assert body["round_number"] == 1
    assert body["guessed_division_name"] == "Kerala"
    assert body["guess_latitude"] == 10.8505
    assert body["guess_longitude"] == 76.2711
    assert body["total_score"] == body["score"]
    assert body["game_completed"] is False
    if body["is_exact_match"]:
        assert body["score"] == 5000
    else:
        assert body["score"] == max(0, int(5000 - body["distance_km"] * 8 + 0.5))


def test_guess_unknown_division(client):
    game = _start(client)
    response = client.post(f"/api/game/{game['id']}/guess", json={"division_name": "Atlantis"})
    assert response.status_code == 400


def test_guess_twice_conflicts(client):
    game = _start(client)
    client.post(f"/api/game/{game['id']}/guess", json={"division_name": "Goa"})
    response = client.post(f"/api/game/{game['id']}/guess", json={"division_name": "Goa"})
    assert response.status_code == 409


def test_reveal_without_body_uses_first_division(client):
    game = _start(client)

    response = client.post(f"/api/game/{game['id']}/reveal")

    assert response.status_code == 200
    assert response.json()["guessed_division_name"] == "Andhra Pradesh"


def test_reveal_with_selection(client):
    game = _start(client)
    response = client.post(f"/api/game/{game['id']}/reveal", json={"division_name": "Assam"})
    assert response.json()["guessed_division_name"] == "Assam"


def test_next_before_guess_conflicts(client):
    game = _start(client)
    assert client.post(f"/api/game/{game['id']}/next").status_code == 409


def test_full_game(client):
    game = _start(client, total_rounds=3)
    game_id = game["id"]
    scores = []

    for round_number in range(1, 4):
        guess = client.post(f"/api/game/{game_id}/guess", json={"division_name": "Punjab"}).json()
        scores.append(guess["score"])
        assert guess["round_number"] == round_number
        assert guess["game_completed"] is (round_number == 3)
        state = client.post(f"/api/game/{game_id}/next").json()

    assert state["status"] == "finished"
    assert state["cumulative_score"] == sum(scores)

    rounds = client.get(f"/api/game/{game_id}/rounds").json()
    assert [r["round_number"] for r in rounds] == [1, 2, 3]
    assert [r["score"] for r in rounds] == scores

    assert client.post(f"/api/game/{game_id}/next").status_code == 409


def test_unknown_session(client):
    assert client.get("/api/game/missing").status_code == 404
    assert client.post("/api/game/missing/guess", json={"division_name": "Goa"}).status_code == 404


def test_delete_game(client):
    game = _start(client)

    assert client.delete(f"/api/game/{game['id']}").status_code == 204
    assert client.get(f"/api/game/{game['id']}").status_code == 404


def test_start_game_without_body(client):
    response = client.post("/api/game/start")

    assert response.status_code == 201
    assert response.json()["total_rounds"] == 5


def test_finished_games_do_not_pile_up(engine):
    store = SessionStore(max_sessions=10)
    with TestClient(create_app(engine, store)) as small_client:
        for _ in range(50):
            game = _start(small_client, total_rounds=1)
            small_client.post(f"/api/game/{game['id']}/guess", json={"division_name": "Goa"})
            assert small_client.post(f"/api/game/{game['id']}/next").json()["status"] == "finished"

        assert len(small_client.app.state.sessions) == 10
        assert small_client.get(f"/api/game/{game['id']}").status_code == 200
