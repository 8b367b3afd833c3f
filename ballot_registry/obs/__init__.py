"""Observability utilities."""

from .metrics import (
    BALLOTS_CREATED_COUNTER,
    REQUEST_COUNTER,
    REQUEST_ERROR_COUNTER,
    REQUEST_LATENCY_SECONDS,
    VOTES_CAST_COUNTER,
    VOTING_REJECTION_COUNTER,
    PrometheusMiddleware,
    metrics_router,
    record_rejection,
)
from .tracing import initialise_tracing, instrument_fastapi_app, instrument_sqlalchemy_engine

__all__ = [
    "BALLOTS_CREATED_COUNTER",
    "PrometheusMiddleware",
    "REQUEST_COUNTER",
    "REQUEST_ERROR_COUNTER",
    "REQUEST_LATENCY_SECONDS",
    "VOTES_CAST_COUNTER",
    "VOTING_REJECTION_COUNTER",
    "initialise_tracing",
    "instrument_fastapi_app",
    "instrument_sqlalchemy_engine",
    "metrics_router",
    "record_rejection",
]
