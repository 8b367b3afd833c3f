from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from ballot_registry.obs import PrometheusMiddleware, metrics_router, record_rejection
from ballot_registry.voting import InMemoryVotingState, ManualClock, add_voters, create_ballot, vote
from tests.conftest import ADMIN


def _sample(name: str, labels: dict[str, str] | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def test_metrics_endpoint_exposes_counters() -> None:
    app = FastAPI()
    app.add_middleware(PrometheusMiddleware)
    app.include_router(metrics_router)

    client = TestClient(app)
    response = client.get("/metrics")

    assert response.status_code == 200
    assert "http_requests_total" in response.text
    assert "votes_cast_total" in response.text


def test_voting_operations_update_counters(memory_state: InMemoryVotingState, clock: ManualClock) -> None:
    ballots_before = _sample("ballots_created_total")
    votes_before = _sample("votes_cast_total")

    create_ballot(memory_state, caller=ADMIN, name="m", choices=["a"], duration_seconds=5, clock=clock)
    add_voters(memory_state, caller=ADMIN, identities=["v"])
    vote(memory_state, ballot_id=0, choice_index=0, voter="v", clock=clock)

    assert _sample("ballots_created_total") == ballots_before + 1
    assert _sample("votes_cast_total") == votes_before + 1


def test_record_rejection_labels_by_code() -> None:
    before = _sample("voting_rejections_total", {"code": "not_voter"})
    record_rejection("not_voter")
    assert _sample("voting_rejections_total", {"code": "not_voter"}) == before + 1
