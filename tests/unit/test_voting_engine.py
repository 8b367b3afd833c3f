from __future__ import annotations

import pytest

from ballot_registry.voting import (
    AlreadyVoted,
    BallotEnded,
    InvalidChoice,
    ManualClock,
    NotFound,
    NotVoter,
    VotingState,
    add_voters,
    create_ballot,
    get_ballot,
    has_voted,
    vote,
)
from tests.conftest import ADMIN

VOTERS = ["v0", "v1", "v2"]


@pytest.fixture()
def ballot_id(state: VotingState, clock: ManualClock) -> int:
    ballot = create_ballot(
        state,
        caller=ADMIN,
        name="new ballot",
        choices=["1", "2", "3"],
        duration_seconds=10,
        clock=clock,
    )
    add_voters(state, caller=ADMIN, identities=VOTERS)
    return ballot.id


def _counts(state: VotingState, ballot_id: int) -> list[int]:
    return [choice.vote_count for choice in get_ballot(state, ballot_id).choices]


def test_vote_records_voter_and_increments_choice(
    state: VotingState, clock: ManualClock, ballot_id: int
) -> None:
    assert not has_voted(state, "v1", ballot_id)
    clock.advance(1)

    vote(state, ballot_id=ballot_id, choice_index=0, voter="v1", clock=clock)

    assert has_voted(state, "v1", ballot_id)
    assert not has_voted(state, "v0", ballot_id)
    assert _counts(state, ballot_id) == [1, 0, 0]


def test_votes_from_several_voters_accumulate(
    state: VotingState, clock: ManualClock, ballot_id: int
) -> None:
    vote(state, ballot_id=ballot_id, choice_index=2, voter="v0", clock=clock)
    vote(state, ballot_id=ballot_id, choice_index=2, voter="v1", clock=clock)
    vote(state, ballot_id=ballot_id, choice_index=1, voter="v2", clock=clock)

    ballot = get_ballot(state, ballot_id)
    assert _counts(state, ballot_id) == [0, 1, 2]
    assert ballot.name == "new ballot"
    assert [choice.name for choice in ballot.choices] == ["1", "2", "3"]


def test_second_vote_is_rejected(state: VotingState, clock: ManualClock, ballot_id: int) -> None:
    vote(state, ballot_id=ballot_id, choice_index=0, voter="v1", clock=clock)

    with pytest.raises(AlreadyVoted, match="voter can only vote once for a ballot"):
        vote(state, ballot_id=ballot_id, choice_index=1, voter="v1", clock=clock)
    assert _counts(state, ballot_id) == [1, 0, 0]


def test_unregistered_identity_cannot_vote(state: VotingState, clock: ManualClock, ballot_id: int) -> None:
    with pytest.raises(NotVoter, match="only voters can vote"):
        vote(state, ballot_id=ballot_id, choice_index=0, voter="v5", clock=clock)
    assert not has_voted(state, "v5", ballot_id)
    assert _counts(state, ballot_id) == [0, 0, 0]


def test_admin_must_be_registered_to_vote(state: VotingState, clock: ManualClock, ballot_id: int) -> None:
    with pytest.raises(NotVoter):
        vote(state, ballot_id=ballot_id, choice_index=0, voter=ADMIN, clock=clock)


def test_vote_after_end_is_rejected(state: VotingState, clock: ManualClock, ballot_id: int) -> None:
    clock.advance(10001)

    with pytest.raises(BallotEnded, match="can only vote until ballot end date"):
        vote(state, ballot_id=ballot_id, choice_index=0, voter="v1", clock=clock)
    assert not has_voted(state, "v1", ballot_id)


def test_voting_closes_exactly_at_end(state: VotingState, clock: ManualClock, ballot_id: int) -> None:
    clock.advance(9)
    vote(state, ballot_id=ballot_id, choice_index=0, voter="v0", clock=clock)

    clock.advance(1)
    with pytest.raises(BallotEnded):
        vote(state, ballot_id=ballot_id, choice_index=0, voter="v1", clock=clock)


@pytest.mark.parametrize("choice_index", [-1, 3, 100])
def test_out_of_range_choice_is_rejected(
    state: VotingState, clock: ManualClock, ballot_id: int, choice_index: int
) -> None:
    with pytest.raises(InvalidChoice):
        vote(state, ballot_id=ballot_id, choice_index=choice_index, voter="v1", clock=clock)
    assert not has_voted(state, "v1", ballot_id)

    vote(state, ballot_id=ballot_id, choice_index=2, voter="v1", clock=clock)
    assert _counts(state, ballot_id) == [0, 0, 1]


def test_unknown_ballot_is_rejected(state: VotingState, clock: ManualClock, ballot_id: int) -> None:
    with pytest.raises(NotFound):
        vote(state, ballot_id=ballot_id + 1, choice_index=0, voter="v1", clock=clock)
    assert not has_voted(state, "v1", ballot_id + 1)


def test_ended_check_precedes_eligibility(state: VotingState, clock: ManualClock, ballot_id: int) -> None:
    clock.advance(10)
    with pytest.raises(BallotEnded):
        vote(state, ballot_id=ballot_id, choice_index=0, voter="never-registered", clock=clock)


def test_already_voted_check_precedes_choice_range(
    state: VotingState, clock: ManualClock, ballot_id: int
) -> None:
    vote(state, ballot_id=ballot_id, choice_index=0, voter="v2", clock=clock)
    with pytest.raises(AlreadyVoted):
        vote(state, ballot_id=ballot_id, choice_index=42, voter="v2", clock=clock)


def test_votes_are_scoped_per_ballot(state: VotingState, clock: ManualClock, ballot_id: int) -> None:
    other = create_ballot(
        state, caller=ADMIN, name="second", choices=["a", "b"], duration_seconds=60, clock=clock
    )
    vote(state, ballot_id=ballot_id, choice_index=1, voter="v1", clock=clock)
    vote(state, ballot_id=other.id, choice_index=1, voter="v1", clock=clock)

    assert has_voted(state, "v1", ballot_id)
    assert has_voted(state, "v1", other.id)
    assert _counts(state, other.id) == [0, 1]


def test_long_identities_can_register_and_vote(
    state: VotingState, clock: ManualClock, ballot_id: int
) -> None:
    long_identity = "did:example:" + "f" * 500
    add_voters(state, caller=ADMIN, identities=[long_identity])

    vote(state, ballot_id=ballot_id, choice_index=2, voter=long_identity, clock=clock)

    assert has_voted(state, long_identity, ballot_id)
    assert _counts(state, ballot_id) == [0, 0, 1]
