"""Ballot registry core: access control, voters, ballots, votes and results.

Every operation takes a :class:`VotingState` as its first argument and raises
a :class:`VotingError` subclass on rejection, leaving the state untouched.
"""

from .access import is_admin, require_admin
from .ballots import MAX_NAME_LENGTH, create_ballot, get_ballot, next_ballot_id
from .clock import Clock, ManualClock, SystemClock
from .engine import has_voted, vote
from .errors import (
    AlreadyVoted,
    BallotEnded,
    BallotNotEnded,
    InvalidBallot,
    InvalidChoice,
    NotFound,
    NotVoter,
    Unauthorized,
    VotingError,
)
from .memory import InMemoryVotingState
from .registry import add_voters, is_voter
from .results import results
from .state import Ballot, Choice, VotingState

__all__ = [
    "AlreadyVoted",
    "Ballot",
    "BallotEnded",
    "BallotNotEnded",
    "Choice",
    "Clock",
    "InMemoryVotingState",
    "InvalidBallot",
    "InvalidChoice",
    "MAX_NAME_LENGTH",
    "ManualClock",
    "NotFound",
    "NotVoter",
    "SystemClock",
    "Unauthorized",
    "VotingError",
    "VotingState",
    "add_voters",
    "create_ballot",
    "get_ballot",
    "has_voted",
    "is_admin",
    "is_voter",
    "next_ballot_id",
    "require_admin",
    "results",
    "vote",
]
