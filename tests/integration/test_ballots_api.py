from __future__ import annotations

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from ballot_registry.voting import ManualClock
from tests.conftest import START_TIME

BALLOT = {"name": "new ballot", "choices": ["1", "2", "3"], "duration_seconds": 10}


@pytest.fixture()
def open_ballot(client: TestClient, admin_headers: dict[str, str]) -> int:
    created = client.post("/api/ballots", json=BALLOT, headers=admin_headers)
    assert created.status_code == 201
    registered = client.post(
        "/api/voters", json={"identities": ["v0", "v1", "v2"]}, headers=admin_headers
    )
    assert registered.status_code == 204
    return created.json()["id"]


def test_create_ballot_returns_full_ballot(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.post("/api/ballots", json=BALLOT, headers=admin_headers)

    assert response.status_code == 201
    assert response.json() == {
        "id": 0,
        "name": "new ballot",
        "end": START_TIME + 10,
        "choices": [
            {"id": 0, "name": "1", "vote_count": 0},
            {"id": 1, "name": "2", "vote_count": 0},
            {"id": 2, "name": "3", "vote_count": 0},
        ],
    }
    assert client.get("/api/ballots/next-id").json() == {"next_ballot_id": 1}
    assert client.get("/api/ballots/0").json() == response.json()


def test_ballot_ids_follow_creation_order(client: TestClient, admin_headers: dict[str, str]) -> None:
    ids = [
        client.post("/api/ballots", json={**BALLOT, "name": f"b{i}"}, headers=admin_headers).json()["id"]
        for i in range(3)
    ]
    assert ids == [0, 1, 2]
    assert client.get("/api/ballots/next-id").json()["next_ballot_id"] == 3


def test_non_admin_cannot_create_ballot(
    client: TestClient, headers_for: Callable[[str], dict[str, str]]
) -> None:
    response = client.post(
        "/api/ballots",
        json={"name": "bad", "choices": [], "duration_seconds": -1},
        headers=headers_for("account-3"),
    )

    assert response.status_code == 403
    assert response.json()["detail"]["code"] == "unauthorized"
    assert client.get("/api/ballots/next-id").json()["next_ballot_id"] == 0


def test_invalid_ballot_definition(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.post(
        "/api/ballots", json={"name": "empty", "choices": [], "duration_seconds": 10}, headers=admin_headers
    )
    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "invalid_ballot"


def test_unknown_ballot_returns_404(client: TestClient) -> None:
    response = client.get("/api/ballots/7")
    assert response.status_code == 404
    assert response.json()["detail"] == {"code": "not_found", "message": "ballot not found"}


def test_vote_is_recorded_and_counted(
    client: TestClient,
    clock: ManualClock,
    headers_for: Callable[[str], dict[str, str]],
    open_ballot: int,
) -> None:
    status_url = f"/api/ballots/{open_ballot}/votes/v1"
    assert client.get(status_url).json() == {"identity": "v1", "ballot_id": open_ballot, "has_voted": False}

    clock.advance(1)
    response = client.post(
        f"/api/ballots/{open_ballot}/votes", json={"choice_index": 0}, headers=headers_for("v1")
    )

    assert response.status_code == 204
    assert client.get(status_url).json()["has_voted"] is True
    choices = client.get(f"/api/ballots/{open_ballot}").json()["choices"]
    assert [choice["vote_count"] for choice in choices] == [1, 0, 0]


@pytest.mark.parametrize(
    ("voter", "choice_index", "expected_status", "expected_code"),
    [
        ("v5", 0, 403, "not_voter"),
        ("v1", 3, 422, "invalid_choice"),
    ],
)
def test_vote_rejections(
    client: TestClient,
    headers_for: Callable[[str], dict[str, str]],
    open_ballot: int,
    voter: str,
    choice_index: int,
    expected_status: int,
    expected_code: str,
) -> None:
    response = client.post(
        f"/api/ballots/{open_ballot}/votes",
        json={"choice_index": choice_index},
        headers=headers_for(voter),
    )
    assert response.status_code == expected_status
    assert response.json()["detail"]["code"] == expected_code
    assert client.get(f"/api/ballots/{open_ballot}/votes/{voter}").json()["has_voted"] is False


def test_vote_on_missing_ballot(client: TestClient, headers_for: Callable[[str], dict[str, str]]) -> None:
    response = client.post("/api/ballots/3/votes", json={"choice_index": 0}, headers=headers_for("v1"))
    assert response.status_code == 404


def test_results_before_end_are_hidden(client: TestClient, open_ballot: int) -> None:
    response = client.get(f"/api/ballots/{open_ballot}/results")
    assert response.status_code == 409
    assert response.json()["detail"] == {
        "code": "ballot_not_ended",
        "message": "cannot see the ballot result before ballot end",
    }


def test_ids_beyond_storage_range_are_not_found(
    client: TestClient, headers_for: Callable[[str], dict[str, str]], open_ballot: int
) -> None:
    huge = 2**63

    assert client.get(f"/api/ballots/{huge}").status_code == 404
    assert client.get(f"/api/ballots/{huge}/results").status_code == 404
    assert client.get(f"/api/ballots/{huge}/votes/v1").json() == {
        "identity": "v1",
        "ballot_id": huge,
        "has_voted": False,
    }
    cast = client.post(f"/api/ballots/{huge}/votes", json={"choice_index": 0}, headers=headers_for("v1"))
    assert cast.status_code == 404
    assert cast.json()["detail"]["code"] == "not_found"


def test_non_admin_with_overlong_name_is_forbidden(
    client: TestClient, headers_for: Callable[[str], dict[str, str]]
) -> None:
    response = client.post(
        "/api/ballots",
        json={"name": "x" * 300, "choices": ["yes"], "duration_seconds": 10},
        headers=headers_for("account-3"),
    )
    assert response.status_code == 403
    assert response.json()["detail"]["code"] == "unauthorized"


def test_admin_with_overlong_choice_name_gets_invalid_ballot(
    client: TestClient, admin_headers: dict[str, str]
) -> None:
    response = client.post(
        "/api/ballots",
        json={"name": "ok", "choices": ["yes", "c" * 300], "duration_seconds": 10},
        headers=admin_headers,
    )
    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "invalid_ballot"
    assert client.get("/api/ballots/next-id").json()["next_ballot_id"] == 0
